from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from shelter.application.errors import ConflictError, NotFound, ValidationError
from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.adoptions.common import (
    ensure_positive_id,
    load_employee,
    utcnow,
)
from shelter.application.validation import as_utc
from shelter.domain.models.adoption import Adoption
from shelter.domain.value_objects.animal_status import AnimalStatus

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateAdoptionInput:
    animal_id: int
    customer_id: int
    adoption_type: str = "Standard"
    employee_id: int | None = None
    adoption_date: datetime | None = None
    notes: str = ""


async def execute(stores: ShelterStores, payload: CreateAdoptionInput) -> Adoption:
    ensure_positive_id(payload.customer_id, "customer_id")
    ensure_positive_id(payload.animal_id, "animal_id")
    if payload.adoption_date is not None and as_utc(payload.adoption_date).date() < utcnow().date():
        raise ValidationError(
            "Adoption date cannot be in the past for a new application",
            details={"field": "adoption_date"},
        )

    customer = await stores.customers.get_by_id(payload.customer_id)
    if customer is None:
        raise NotFound(f"Customer {payload.customer_id} not found")
    animal = await stores.animals.get_by_id(payload.animal_id)
    if animal is None:
        raise NotFound(f"Animal {payload.animal_id} not found")
    if payload.employee_id is not None:
        await load_employee(stores, payload.employee_id)

    if animal.status != AnimalStatus.AVAILABLE:
        raise ConflictError(
            f"Animal {animal.id} is not available for adoption",
            details={"animal_status": AnimalStatus(animal.status).value},
        )
    # Check and insert are separate locked sections; concurrent creates may both pass.
    if await stores.adoptions.get_open_for_animal(animal.id):
        raise ConflictError(f"Animal {animal.id} already has an open adoption")

    adoption = Adoption.create(
        animal_id=payload.animal_id,
        customer_id=payload.customer_id,
        adoption_type=payload.adoption_type,
        employee_id=payload.employee_id,
        adoption_date=payload.adoption_date,
        notes=payload.notes,
    )
    created = await stores.adoptions.add(adoption)
    logger.info(
        "Adoption %s created for animal %s by customer %s",
        created.id,
        created.animal_id,
        created.customer_id,
    )
    return created
