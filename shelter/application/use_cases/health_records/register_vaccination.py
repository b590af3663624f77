from __future__ import annotations

import logging
from datetime import datetime

from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.adoptions.common import utcnow
from shelter.application.use_cases.health_records import add_health_record, update_health_record
from shelter.application.use_cases.health_records.common import load_animal
from shelter.application.validation import as_utc
from shelter.domain.models.health_record import VACCINATION_DIAGNOSIS, HealthRecord

logger = logging.getLogger(__name__)

DEFAULT_VACCINATION_NOTE = "Vaccination registered."


async def execute(
    stores: ShelterStores,
    animal_id: int,
    vaccination_date: datetime,
    next_vaccination_date: datetime | None = None,
    notes: str = "",
    veterinarian_name: str = "",
) -> HealthRecord:
    """Record a vaccination for an animal.

    A vaccination already recorded on the same day as the animal's latest
    record is amended in place instead of creating a second entry.
    """
    await load_animal(stores, animal_id)
    latest = await stores.health_records.get_latest_for_animal(animal_id)
    if (
        latest is not None
        and latest.is_vaccinated
        and as_utc(latest.record_date).date() == as_utc(vaccination_date).date()
    ):
        latest.next_vaccination_date = next_vaccination_date
        if notes and notes.strip():
            latest.append_note(notes.strip())
        logger.info("Vaccination of animal %s amended on record %s", animal_id, latest.id)
        return await update_health_record.execute(stores, latest)

    record = HealthRecord(
        animal_id=animal_id,
        record_date=vaccination_date,
        record_type=VACCINATION_DIAGNOSIS,
        diagnosis=VACCINATION_DIAGNOSIS,
        treatment="Vaccine given",
        veterinarian_name=veterinarian_name or "Shelter staff",
        is_vaccinated=True,
        next_vaccination_date=next_vaccination_date,
        notes=notes.strip() if notes and notes.strip() else DEFAULT_VACCINATION_NOTE,
        created_at=utcnow(),
    )
    return await add_health_record.execute(stores, animal_id, record)
