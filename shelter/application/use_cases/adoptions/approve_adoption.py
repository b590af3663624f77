from __future__ import annotations

import logging

from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.adoptions.common import (
    ensure_transition,
    load_adoption,
    load_employee,
    utcnow,
)
from shelter.domain.models.adoption import Adoption
from shelter.domain.value_objects.adoption_status import AdoptionStatus

logger = logging.getLogger(__name__)


async def execute(stores: ShelterStores, adoption_id: int, employee_id: int) -> Adoption:
    adoption = await load_adoption(stores, adoption_id)
    ensure_transition(adoption, AdoptionStatus.APPROVED)
    await load_employee(stores, employee_id)

    now = utcnow()
    adoption.approve(employee_id, now)
    # Adoption is written before the animal; a failure in between is not rolled back.
    updated = await stores.adoptions.update(adoption)
    logger.info("Adoption %s approved by employee %s", adoption_id, employee_id)

    animal = await stores.animals.get_by_id(updated.animal_id)
    if animal is None:
        logger.warning(
            "Animal %s for adoption %s no longer exists; status left unchanged",
            updated.animal_id,
            adoption_id,
        )
        return updated
    animal.mark_adopted(updated.customer_id, updated.adoption_date or now)
    await stores.animals.update(animal)
    logger.info("Animal %s marked adopted by customer %s", animal.id, updated.customer_id)
    return updated
