"""Read-side visit queries."""

from __future__ import annotations

from datetime import datetime

from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.adoptions.common import ensure_positive_id, utcnow
from shelter.application.use_cases.health_records.common import load_animal
from shelter.domain.models.animal import Animal
from shelter.domain.models.visit import Visit
from shelter.domain.value_objects.visit_status import VisitStatus


async def all_visits(stores: ShelterStores) -> list[Visit]:
    return await stores.visits.get_all()


async def for_animal(stores: ShelterStores, animal_id: int) -> list[Visit]:
    await load_animal(stores, animal_id)
    return await stores.visits.get_by_animal_id(animal_id)


async def upcoming_for_animal(
    stores: ShelterStores, animal_id: int, now: datetime | None = None
) -> list[Visit]:
    now = now or utcnow()
    return [visit for visit in await for_animal(stores, animal_id) if visit.is_upcoming(now)]


async def by_customer(stores: ShelterStores, customer_id: int) -> list[Visit]:
    ensure_positive_id(customer_id, "customer_id")
    return await stores.visits.get_by_customer_id(customer_id)


async def by_employee(stores: ShelterStores, employee_id: int) -> list[Visit]:
    ensure_positive_id(employee_id, "employee_id")
    return await stores.visits.get_by_employee_id(employee_id)


async def by_date_range(stores: ShelterStores, start: datetime, end: datetime) -> list[Visit]:
    return await stores.visits.get_by_date_range(start, end)


async def by_status(stores: ShelterStores, status: VisitStatus) -> list[Visit]:
    return await stores.visits.get_by_status(status)


async def by_type(stores: ShelterStores, visit_type: str) -> list[Visit]:
    if not visit_type or not visit_type.strip():
        return await stores.visits.get_all()
    return await stores.visits.get_by_type(visit_type)


async def latest_for_animal(stores: ShelterStores, animal_id: int) -> Visit | None:
    await load_animal(stores, animal_id)
    return await stores.visits.get_latest_for_animal(animal_id)


async def latest_for_customer(stores: ShelterStores, customer_id: int) -> Visit | None:
    ensure_positive_id(customer_id, "customer_id")
    return await stores.visits.get_latest_for_customer(customer_id)


async def animals_with_vet_appointments(
    stores: ShelterStores, start: datetime, end: datetime
) -> list[Animal]:
    """Animals with a veterinary visit in the range that was not cancelled."""
    visits = await stores.visits.get_by_date_range(start, end)
    animal_ids: list[int] = []
    for visit in visits:
        if visit.is_veterinary and visit.status != VisitStatus.CANCELLED:
            if visit.animal_id not in animal_ids:
                animal_ids.append(visit.animal_id)
    animals = []
    for animal_id in animal_ids:
        # Deleted animals drop out here
        animal = await stores.animals.get_by_id(animal_id)
        if animal is not None:
            animals.append(animal)
    return animals
