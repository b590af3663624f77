from __future__ import annotations

from shelter.application.errors import NotFound
from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.adoptions.common import ensure_positive_id
from shelter.domain.models.animal import Animal
from shelter.domain.models.health_record import HealthRecord


async def load_animal(stores: ShelterStores, animal_id: int) -> Animal:
    ensure_positive_id(animal_id, "animal_id")
    animal = await stores.animals.get_by_id(animal_id)
    if animal is None:
        raise NotFound(f"Animal {animal_id} not found")
    return animal


async def load_record(stores: ShelterStores, record_id: int) -> HealthRecord:
    ensure_positive_id(record_id, "health_record_id")
    record = await stores.health_records.get_by_id(record_id)
    if record is None:
        raise NotFound(f"Health record {record_id} not found")
    return record
