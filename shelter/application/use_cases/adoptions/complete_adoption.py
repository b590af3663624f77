from __future__ import annotations

import logging

from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.adoptions.common import (
    ensure_transition,
    load_adoption,
    utcnow,
)
from shelter.domain.models.adoption import Adoption
from shelter.domain.value_objects.adoption_status import AdoptionStatus

logger = logging.getLogger(__name__)


async def execute(stores: ShelterStores, adoption_id: int) -> Adoption:
    adoption = await load_adoption(stores, adoption_id)
    ensure_transition(adoption, AdoptionStatus.COMPLETED)
    adoption.complete(utcnow())
    updated = await stores.adoptions.update(adoption)
    logger.info("Adoption %s completed", adoption_id)
    return updated
