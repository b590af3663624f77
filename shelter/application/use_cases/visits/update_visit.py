from __future__ import annotations

from shelter.application.errors import ValidationError
from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.visits.common import load_visit
from shelter.domain.models.visit import Visit


async def execute(stores: ShelterStores, visit: Visit) -> Visit:
    """Update the editable fields of a visit.

    Status and the recorded outcome (actual date and duration) only change
    through the confirm, waitlist, cancel and complete operations.
    """
    if visit is None:
        raise ValidationError("Visit must not be None")
    existing = await load_visit(stores, visit.id)
    if visit.animal_id != existing.animal_id:
        raise ValidationError(
            "A visit cannot be moved to another animal",
            details={"field": "animal_id", "current": existing.animal_id},
        )
    visit.status = existing.status
    visit.actual_date = existing.actual_date
    visit.actual_duration = existing.actual_duration
    return await stores.visits.update(visit)
