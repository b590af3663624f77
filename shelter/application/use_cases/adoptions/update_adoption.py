from __future__ import annotations

import logging

from shelter.application.errors import (
    ConflictError,
    InvalidStateTransition,
    NotFound,
    ValidationError,
)
from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.adoptions.common import (
    ensure_positive_id,
    load_adoption,
    load_employee,
)
from shelter.domain.models.adoption import Adoption
from shelter.domain.value_objects.adoption_status import AdoptionStatus
from shelter.domain.value_objects.animal_status import AnimalStatus

logger = logging.getLogger(__name__)


def _ensure_references_frozen(existing: Adoption, adoption: Adoption) -> None:
    # Past Pending the animal record points back at the customer
    status = AdoptionStatus(existing.status)
    if status == AdoptionStatus.PENDING:
        return
    for field_name in ("animal_id", "customer_id"):
        if getattr(adoption, field_name) != getattr(existing, field_name):
            raise InvalidStateTransition(
                f"Cannot change {field_name} of a {status.value} adoption",
                details={"field": field_name, "status": status.value},
            )


async def execute(stores: ShelterStores, adoption: Adoption) -> Adoption:
    """Update the editable fields of an adoption.

    Status and the lifecycle dates (adoption, approval, rejection, completion)
    are kept from the stored record; they only change through the lifecycle
    operations. Animal and customer may only be changed while the adoption is
    Pending, and moving it to another animal is checked like a new
    application.
    """
    if adoption is None:
        raise ValidationError("Adoption must not be None")
    existing = await load_adoption(stores, adoption.id)

    ensure_positive_id(adoption.customer_id, "customer_id")
    ensure_positive_id(adoption.animal_id, "animal_id")
    _ensure_references_frozen(existing, adoption)

    if await stores.customers.get_by_id(adoption.customer_id) is None:
        raise NotFound(f"Customer {adoption.customer_id} not found")
    animal = await stores.animals.get_by_id(adoption.animal_id)
    if animal is None:
        raise NotFound(f"Animal {adoption.animal_id} not found")
    if adoption.employee_id is not None:
        await load_employee(stores, adoption.employee_id)

    if adoption.animal_id != existing.animal_id:
        if animal.status != AnimalStatus.AVAILABLE:
            raise ConflictError(
                f"Animal {animal.id} is not available for adoption",
                details={"animal_status": AnimalStatus(animal.status).value},
            )
        others = [
            open_adoption
            for open_adoption in await stores.adoptions.get_open_for_animal(animal.id)
            if open_adoption.id != existing.id
        ]
        if others:
            raise ConflictError(f"Animal {animal.id} already has an open adoption")

    adoption.status = existing.status
    adoption.application_date = existing.application_date
    adoption.adoption_date = existing.adoption_date
    adoption.approval_date = existing.approval_date
    adoption.rejection_date = existing.rejection_date
    adoption.completion_date = existing.completion_date
    updated = await stores.adoptions.update(adoption)
    logger.info("Adoption %s updated", updated.id)
    return updated
