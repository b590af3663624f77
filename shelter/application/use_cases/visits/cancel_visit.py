from __future__ import annotations

import logging

from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.visits.common import ensure_transition, load_visit
from shelter.domain.models.visit import Visit
from shelter.domain.value_objects.visit_status import VisitStatus

logger = logging.getLogger(__name__)


async def execute(stores: ShelterStores, visit_id: int) -> Visit:
    visit = await load_visit(stores, visit_id)
    ensure_transition(visit, VisitStatus.CANCELLED)
    visit.status = VisitStatus.CANCELLED
    updated = await stores.visits.update(visit)
    logger.info("Visit %s cancelled", visit_id)
    return updated
