from __future__ import annotations

import logging

from shelter.application.errors import NotFound, ValidationError
from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.adoptions.common import load_employee
from shelter.application.use_cases.health_records.common import load_animal
from shelter.domain.models.visit import Visit
from shelter.domain.value_objects.visit_status import VisitStatus

logger = logging.getLogger(__name__)

OPENING_STATUSES = frozenset({VisitStatus.SCHEDULED, VisitStatus.WAITLISTED})


async def execute(stores: ShelterStores, visit: Visit) -> Visit:
    if visit is None:
        raise ValidationError("Visit must not be None")
    if VisitStatus(visit.status) not in OPENING_STATUSES:
        raise ValidationError(
            "A new visit must be Scheduled or Waitlisted", details={"field": "status"}
        )
    await load_animal(stores, visit.animal_id)
    if visit.customer_id is not None and await stores.customers.get_by_id(visit.customer_id) is None:
        raise NotFound(f"Customer {visit.customer_id} not found")
    if visit.employee_id is not None:
        await load_employee(stores, visit.employee_id)

    created = await stores.visits.add(visit)
    logger.info("Visit %s planned for animal %s", created.id, created.animal_id)
    return created
