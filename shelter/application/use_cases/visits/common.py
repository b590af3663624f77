from __future__ import annotations

from shelter.application.errors import InvalidStateTransition, NotFound
from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.adoptions.common import ensure_positive_id
from shelter.domain.models.visit import Visit
from shelter.domain.value_objects.visit_status import VisitStatus


async def load_visit(stores: ShelterStores, visit_id: int) -> Visit:
    ensure_positive_id(visit_id, "visit_id")
    visit = await stores.visits.get_by_id(visit_id)
    if visit is None:
        raise NotFound(f"Visit {visit_id} not found")
    return visit


def ensure_transition(visit: Visit, target: VisitStatus) -> None:
    current = VisitStatus(visit.status)
    if not current.can_transition_to(target):
        raise InvalidStateTransition(
            f"Cannot move visit {visit.id} from {current.value} to {target.value}",
            details={"from": current.value, "to": target.value},
        )
