"""Read-side health record queries.

Blank text filters return every record, matching how the shelter staff search
screens behave. Lookups scoped to one animal require the animal to exist.
"""

from __future__ import annotations

from datetime import date, datetime

from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.health_records.common import load_animal
from shelter.application.validation import as_utc
from shelter.domain.models.animal import Animal
from shelter.domain.models.health_record import HealthRecord
from shelter.domain.value_objects.animal_status import AnimalStatus

IN_CARE_STATUSES = frozenset(
    {AnimalStatus.AVAILABLE, AnimalStatus.RESERVED, AnimalStatus.IN_TREATMENT}
)


async def for_animal(stores: ShelterStores, animal_id: int) -> list[HealthRecord]:
    await load_animal(stores, animal_id)
    return await stores.health_records.get_by_animal_id(animal_id)


async def latest_for_animal(stores: ShelterStores, animal_id: int) -> HealthRecord | None:
    await load_animal(stores, animal_id)
    return await stores.health_records.get_latest_for_animal(animal_id)


async def by_date_range(
    stores: ShelterStores, start: datetime, end: datetime
) -> list[HealthRecord]:
    return await stores.health_records.get_by_date_range(start, end)


async def by_diagnosis(stores: ShelterStores, diagnosis: str) -> list[HealthRecord]:
    if not diagnosis or not diagnosis.strip():
        return await stores.health_records.get_all()
    return await stores.health_records.get_by_diagnosis(diagnosis)


async def by_treatment(stores: ShelterStores, treatment: str) -> list[HealthRecord]:
    if not treatment or not treatment.strip():
        return await stores.health_records.get_all()
    return await stores.health_records.get_by_treatment(treatment)


async def by_medication(stores: ShelterStores, medication: str) -> list[HealthRecord]:
    if not medication or not medication.strip():
        return await stores.health_records.get_all()
    return await stores.health_records.get_by_medication(medication)


async def by_severity(stores: ShelterStores, severity: str) -> list[HealthRecord]:
    if not severity or not severity.strip():
        return await stores.health_records.get_all()
    return await stores.health_records.get_by_severity(severity)


async def by_veterinarian(stores: ShelterStores, identifier: str) -> list[HealthRecord]:
    if not identifier or not identifier.strip():
        return await stores.health_records.get_all()
    return await stores.health_records.get_by_veterinarian(identifier)


async def by_vaccination_status(
    stores: ShelterStores, is_vaccinated: bool
) -> list[HealthRecord]:
    return await stores.health_records.get_by_vaccination_status(is_vaccinated)


def vaccination_due(record: HealthRecord | None, today: date) -> bool:
    return (
        record is not None
        and record.next_vaccination_date is not None
        and as_utc(record.next_vaccination_date).date() <= today
    )


async def animals_needing_vaccination(
    stores: ShelterStores, today: date | None = None
) -> list[Animal]:
    """Animals in care that were never vaccinated or whose next shot is due."""
    today = today or date.today()
    in_care = await stores.animals.find(lambda a: a.status in IN_CARE_STATUSES)
    due: list[Animal] = []
    for animal in in_care:
        latest = await stores.health_records.get_latest_vaccination_for_animal(animal.id)
        if latest is None or vaccination_due(latest, today):
            due.append(animal)
    return due
