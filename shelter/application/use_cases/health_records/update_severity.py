from __future__ import annotations

from shelter.application.errors import ValidationError
from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.adoptions.common import utcnow
from shelter.application.use_cases.health_records.common import load_record
from shelter.domain.models.health_record import HealthRecord


async def execute(stores: ShelterStores, record_id: int, severity: str) -> HealthRecord:
    if severity is None or not severity.strip():
        raise ValidationError("Severity must not be empty", details={"field": "severity"})
    record = await load_record(stores, record_id)
    record.set_severity(severity.strip(), utcnow())
    return await stores.health_records.update(record)
