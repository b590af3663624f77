from __future__ import annotations

import logging

from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.visits.common import load_visit

logger = logging.getLogger(__name__)


async def execute(stores: ShelterStores, visit_id: int) -> None:
    await load_visit(stores, visit_id)
    await stores.visits.delete(visit_id)
    logger.info("Visit %s deleted", visit_id)
