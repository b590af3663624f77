from __future__ import annotations

from datetime import datetime, timezone

from shelter.application.errors import InvalidStateTransition, NotFound, ValidationError
from shelter.application.interfaces.stores import ShelterStores
from shelter.domain.models.adoption import Adoption
from shelter.domain.models.employee import Employee
from shelter.domain.value_objects.adoption_status import AdoptionStatus


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def ensure_positive_id(value: int | None, field_name: str) -> int:
    if value is None or value <= 0:
        raise ValidationError(f"{field_name} must be a positive id", details={"field": field_name})
    return value


async def load_adoption(stores: ShelterStores, adoption_id: int) -> Adoption:
    ensure_positive_id(adoption_id, "adoption_id")
    adoption = await stores.adoptions.get_by_id(adoption_id)
    if adoption is None:
        raise NotFound(f"Adoption {adoption_id} not found")
    return adoption


async def load_employee(stores: ShelterStores, employee_id: int) -> Employee:
    ensure_positive_id(employee_id, "employee_id")
    employee = await stores.employees.get_by_id(employee_id)
    if employee is None:
        raise NotFound(f"Employee {employee_id} not found")
    return employee


def ensure_transition(adoption: Adoption, target: AdoptionStatus) -> None:
    current = AdoptionStatus(adoption.status)
    if not current.can_transition_to(target):
        raise InvalidStateTransition(
            f"Cannot move adoption {adoption.id} from {current.value} to {target.value}",
            details={"from": current.value, "to": target.value},
        )
