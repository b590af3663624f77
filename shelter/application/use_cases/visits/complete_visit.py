from __future__ import annotations

import logging
from datetime import datetime

from shelter.application.errors import ValidationError
from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.adoptions.common import utcnow
from shelter.application.use_cases.visits.common import ensure_transition, load_visit
from shelter.application.validation import FUTURE_TOLERANCE, as_utc
from shelter.domain.models.visit import Visit
from shelter.domain.value_objects.visit_status import VisitStatus

logger = logging.getLogger(__name__)


async def execute(
    stores: ShelterStores,
    visit_id: int,
    actual_date: datetime,
    actual_duration: int,
    notes: str = "",
) -> Visit:
    if actual_date is None or as_utc(actual_date) > utcnow() + FUTURE_TOLERANCE:
        raise ValidationError(
            "Actual date must be set and not in the future", details={"field": "actual_date"}
        )
    if actual_duration is None or actual_duration <= 0:
        raise ValidationError(
            "Actual duration must be positive", details={"field": "actual_duration"}
        )
    visit = await load_visit(stores, visit_id)
    ensure_transition(visit, VisitStatus.COMPLETED)
    visit.complete(actual_date, actual_duration, notes)
    updated = await stores.visits.update(visit)
    logger.info("Visit %s completed after %s minutes", visit_id, actual_duration)
    return updated
