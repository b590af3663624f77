from __future__ import annotations

from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.visits.common import load_visit
from shelter.domain.models.visit import Visit


async def execute(stores: ShelterStores, visit_id: int, notes: str | None) -> Visit:
    visit = await load_visit(stores, visit_id)
    # None clears the notes
    visit.notes = notes or ""
    return await stores.visits.update(visit)
