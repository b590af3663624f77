from __future__ import annotations

import logging

from shelter.application.errors import ValidationError
from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.adoptions.common import (
    ensure_transition,
    load_adoption,
    load_employee,
    utcnow,
)
from shelter.domain.models.adoption import Adoption
from shelter.domain.value_objects.adoption_status import AdoptionStatus
from shelter.domain.value_objects.animal_status import AnimalStatus

logger = logging.getLogger(__name__)


async def execute(
    stores: ShelterStores, adoption_id: int, employee_id: int, reason: str
) -> Adoption:
    if reason is None or not reason.strip():
        raise ValidationError("A cancellation reason is required", details={"field": "reason"})
    adoption = await load_adoption(stores, adoption_id)
    ensure_transition(adoption, AdoptionStatus.CANCELLED)
    await load_employee(stores, employee_id)

    adoption.cancel(employee_id, reason.strip(), utcnow())
    updated = await stores.adoptions.update(adoption)
    logger.info("Adoption %s cancelled by employee %s", adoption_id, employee_id)

    animal = await stores.animals.get_by_id(updated.animal_id)
    if animal is None:
        return updated
    if animal.is_adopted_by(updated.customer_id) or animal.status == AnimalStatus.RESERVED:
        animal.release()
        await stores.animals.update(animal)
        logger.info("Animal %s released after cancellation of adoption %s", animal.id, adoption_id)
    return updated
