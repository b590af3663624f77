from __future__ import annotations

import logging

from shelter.application.errors import ValidationError
from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.health_records.common import load_animal
from shelter.domain.models.health_record import HealthRecord

logger = logging.getLogger(__name__)


async def execute(stores: ShelterStores, animal_id: int, record: HealthRecord) -> HealthRecord:
    if record is None:
        raise ValidationError("Health record must not be None")
    await load_animal(stores, animal_id)
    record.animal_id = animal_id
    created = await stores.health_records.add(record)
    logger.info("Health record %s added for animal %s", created.id, animal_id)
    return created
