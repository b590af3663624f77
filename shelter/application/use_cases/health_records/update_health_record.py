from __future__ import annotations

from shelter.application.errors import ValidationError
from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.adoptions.common import utcnow
from shelter.application.use_cases.health_records.common import load_record
from shelter.domain.models.health_record import HealthRecord


async def execute(stores: ShelterStores, record: HealthRecord) -> HealthRecord:
    if record is None:
        raise ValidationError("Health record must not be None")
    existing = await load_record(stores, record.id)
    if record.animal_id != existing.animal_id:
        raise ValidationError(
            "A health record cannot be moved to another animal",
            details={"field": "animal_id", "current": existing.animal_id},
        )
    record.created_at = existing.created_at
    record.updated_at = utcnow()
    return await stores.health_records.update(record)
