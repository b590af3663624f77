from __future__ import annotations

from shelter.application.errors import ValidationError
from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.adoptions.common import utcnow
from shelter.application.use_cases.health_records.common import load_record
from shelter.domain.models.health_record import HealthRecord


async def execute(stores: ShelterStores, record_id: int, medication: str) -> HealthRecord:
    if medication is None or not medication.strip():
        raise ValidationError("Medication must not be empty", details={"field": "medication"})
    record = await load_record(stores, record_id)
    record.add_medication(medication.strip(), utcnow())
    return await stores.health_records.update(record)
