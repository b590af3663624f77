from __future__ import annotations

import logging

from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.health_records.common import load_record

logger = logging.getLogger(__name__)


async def execute(stores: ShelterStores, record_id: int) -> None:
    await load_record(stores, record_id)
    await stores.health_records.delete(record_id)
    logger.info("Health record %s deleted", record_id)
