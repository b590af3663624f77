from __future__ import annotations

import logging

from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.adoptions.common import ensure_positive_id
from shelter.domain.value_objects.adoption_status import AdoptionStatus

logger = logging.getLogger(__name__)


async def execute(stores: ShelterStores, adoption_id: int) -> None:
    ensure_positive_id(adoption_id, "adoption_id")
    adoption = await stores.adoptions.get_by_id(adoption_id)
    if adoption is not None and adoption.status in (
        AdoptionStatus.APPROVED,
        AdoptionStatus.COMPLETED,
    ):
        logger.warning(
            "Deleting %s adoption %s; animal %s keeps its current status",
            AdoptionStatus(adoption.status).value,
            adoption_id,
            adoption.animal_id,
        )
    # Missing and already-deleted ids are reported by the store
    await stores.adoptions.delete(adoption_id)
    logger.info("Adoption %s deleted", adoption_id)
