"""Read-side adoption queries.

Non-positive foreign keys and blank filters yield an empty list rather than
an error.
"""

from __future__ import annotations

from datetime import datetime

from shelter.application.interfaces.stores import ShelterStores
from shelter.domain.models.adoption import Adoption
from shelter.domain.value_objects.adoption_status import AdoptionStatus
from shelter.domain.value_objects.species import Species


async def by_customer(stores: ShelterStores, customer_id: int) -> list[Adoption]:
    return await stores.adoptions.get_by_customer_id(customer_id)


async def by_animal(stores: ShelterStores, animal_id: int) -> list[Adoption]:
    return await stores.adoptions.get_by_animal_id(animal_id)


async def by_employee(stores: ShelterStores, employee_id: int) -> list[Adoption]:
    return await stores.adoptions.get_by_employee_id(employee_id)


async def by_status(stores: ShelterStores, status: AdoptionStatus) -> list[Adoption]:
    return await stores.adoptions.get_by_status(status)


async def by_date_range(
    stores: ShelterStores, start: datetime, end: datetime
) -> list[Adoption]:
    return await stores.adoptions.get_by_date_range(start, end)


async def by_adopter_email(stores: ShelterStores, email: str) -> list[Adoption]:
    customer = await stores.customers.get_by_email(email)
    if customer is None:
        return []
    return await stores.adoptions.get_by_customer_id(customer.id)


async def by_species(stores: ShelterStores, species: Species) -> list[Adoption]:
    animal_ids = {animal.id for animal in await stores.animals.get_by_species(species)}
    if not animal_ids:
        return []
    return await stores.adoptions.find(lambda a: a.animal_id in animal_ids)


async def latest_for_animal(stores: ShelterStores, animal_id: int) -> Adoption:
    return await stores.adoptions.get_latest_for_animal(animal_id)
