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
from shelter.domain.value_objects.animal_status import AnimalStatus

logger = logging.getLogger(__name__)


async def execute(stores: ShelterStores, adoption_id: int, employee_id: int) -> Adoption:
    adoption = await load_adoption(stores, adoption_id)
    ensure_transition(adoption, AdoptionStatus.REJECTED)
    await load_employee(stores, employee_id)

    adoption.reject(employee_id, utcnow())
    updated = await stores.adoptions.update(adoption)
    logger.info("Adoption %s rejected by employee %s", adoption_id, employee_id)

    animal = await stores.animals.get_by_id(updated.animal_id)
    if animal is not None and animal.status == AnimalStatus.RESERVED:
        animal.release()
        await stores.animals.update(animal)
        logger.info("Animal %s released after rejection of adoption %s", animal.id, adoption_id)
    return updated
