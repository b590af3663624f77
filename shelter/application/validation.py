"""Field-level validation for stored records.

Every per-type validator calls :func:`validate_entity` first and then layers
its own checks on top. Stores receive the composed function as a plain
callable instead of overriding a method.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Any

from shelter.application.errors import ValidationError
from shelter.domain.models.adoption import Adoption
from shelter.domain.models.animal import Animal
from shelter.domain.models.customer import Customer
from shelter.domain.models.employee import Employee
from shelter.domain.models.health_record import HealthRecord
from shelter.domain.models.visit import Visit
from shelter.domain.value_objects.adoption_status import AdoptionStatus
from shelter.domain.value_objects.animal_status import AnimalStatus
from shelter.domain.value_objects.species import Species
from shelter.domain.value_objects.visit_status import VisitStatus

EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
PHONE_RE = re.compile(r"^(\+45)?\d{8}$")
POSTAL_CODE_RE = re.compile(r"^\d{4}$")

DEFAULT_ADOPTION_DATE_GRACE_DAYS = 365
# Allows for clock skew between the caller and the store
FUTURE_TOLERANCE = timedelta(minutes=1)


def _is_member(enum_cls: type[Enum], value: Any) -> bool:
    try:
        enum_cls(value)
    except ValueError:
        return False
    return True


def _require(value: str | None, message: str, field_name: str) -> None:
    if value is None or not value.strip():
        raise ValidationError(message, details={"field": field_name})


def as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def validate_entity(entity: object) -> None:
    if entity is None:
        raise ValidationError("Entity must not be None")


def validate_animal(animal: Animal) -> None:
    validate_entity(animal)
    _require(animal.name, "Animal name must not be empty", "name")
    if not _is_member(Species, animal.species):
        raise ValidationError("Invalid species", details={"field": "species"})
    if not _is_member(AnimalStatus, animal.status):
        raise ValidationError("Invalid animal status", details={"field": "status"})
    if animal.weight < 0:
        raise ValidationError("Weight must not be negative", details={"field": "weight"})


def validate_adoption(
    adoption: Adoption,
    *,
    grace_days: int = DEFAULT_ADOPTION_DATE_GRACE_DAYS,
    now: datetime | None = None,
) -> None:
    validate_entity(adoption)
    if adoption.customer_id <= 0:
        raise ValidationError("Customer id must be positive", details={"field": "customer_id"})
    if adoption.animal_id <= 0:
        raise ValidationError("Animal id must be positive", details={"field": "animal_id"})
    if not _is_member(AdoptionStatus, adoption.status):
        raise ValidationError("Invalid adoption status", details={"field": "status"})
    status = AdoptionStatus(adoption.status)
    if adoption.employee_id is not None and adoption.employee_id <= 0 and status.is_open:
        raise ValidationError(
            "Employee id must be positive for pending or approved adoptions",
            details={"field": "employee_id"},
        )
    _require(adoption.adoption_type, "Adoption type must not be empty", "adoption_type")

    now = now or datetime.now(timezone.utc)
    if adoption.adoption_date is not None:
        limit = now + timedelta(days=grace_days) + FUTURE_TOLERANCE
        if as_utc(adoption.adoption_date) > limit:
            raise ValidationError(
                f"Adoption date cannot be more than {grace_days} days in the future",
                details={"field": "adoption_date"},
            )
    elif status in (AdoptionStatus.APPROVED, AdoptionStatus.COMPLETED):
        raise ValidationError(
            "Adoption date must be set for approved or completed adoptions",
            details={"field": "adoption_date"},
        )


def _validate_contact(record: Customer | Employee) -> None:
    _require(record.first_name, "First name must not be empty", "first_name")
    _require(record.last_name, "Last name must not be empty", "last_name")
    _require(record.email, "Email must not be empty", "email")
    if not EMAIL_RE.match(record.email):
        raise ValidationError("Invalid email format", details={"field": "email"})
    _require(record.phone, "Phone must not be empty", "phone")
    if not PHONE_RE.match(record.phone.replace(" ", "")):
        raise ValidationError(
            "Invalid phone format, expected 8 digits with optional +45",
            details={"field": "phone"},
        )


def validate_customer(customer: Customer) -> None:
    validate_entity(customer)
    _validate_contact(customer)
    _require(customer.address, "Address must not be empty", "address")
    _require(customer.postal_code, "Postal code must not be empty", "postal_code")
    if not POSTAL_CODE_RE.match(customer.postal_code):
        raise ValidationError(
            "Invalid postal code, expected 4 digits", details={"field": "postal_code"}
        )
    _require(customer.city, "City must not be empty", "city")


def validate_employee(employee: Employee, *, now: datetime | None = None) -> None:
    validate_entity(employee)
    _validate_contact(employee)
    _require(employee.position, "Position must not be empty", "position")
    if employee.hire_date is None:
        raise ValidationError("Hire date must be set", details={"field": "hire_date"})
    now = now or datetime.now(timezone.utc)
    if as_utc(employee.hire_date) > now + FUTURE_TOLERANCE:
        raise ValidationError("Hire date cannot be in the future", details={"field": "hire_date"})
    if employee.salary < 0:
        raise ValidationError("Salary must not be negative", details={"field": "salary"})


def validate_health_record(record: HealthRecord, *, now: datetime | None = None) -> None:
    validate_entity(record)
    if record.animal_id <= 0:
        raise ValidationError("Animal id must be positive", details={"field": "animal_id"})
    if record.record_date is None:
        raise ValidationError("Record date must be set", details={"field": "record_date"})
    now = now or datetime.now(timezone.utc)
    if as_utc(record.record_date) > now + FUTURE_TOLERANCE:
        raise ValidationError(
            "Record date cannot be in the future", details={"field": "record_date"}
        )
    _require(record.diagnosis, "Diagnosis must not be empty", "diagnosis")
    if not record.veterinarian_name.strip() and not record.veterinarian_id.strip():
        raise ValidationError(
            "Either veterinarian name or veterinarian id must be given",
            details={"field": "veterinarian_name"},
        )
    if record.weight < 0:
        raise ValidationError("Weight must not be negative", details={"field": "weight"})


def validate_visit(visit: Visit, *, now: datetime | None = None) -> None:
    validate_entity(visit)
    if visit.animal_id <= 0:
        raise ValidationError("Animal id must be positive", details={"field": "animal_id"})
    if visit.planned_date is None:
        raise ValidationError("Planned date must be set", details={"field": "planned_date"})
    if visit.planned_duration < 0:
        raise ValidationError(
            "Planned duration must not be negative", details={"field": "planned_duration"}
        )
    _require(visit.visit_type, "Visit type must not be empty", "visit_type")
    if not _is_member(VisitStatus, visit.status):
        raise ValidationError("Invalid visit status", details={"field": "status"})

    now = now or datetime.now(timezone.utc)
    if visit.actual_date is not None and as_utc(visit.actual_date) > now + FUTURE_TOLERANCE:
        raise ValidationError(
            "Actual date cannot be in the future", details={"field": "actual_date"}
        )
    if VisitStatus(visit.status) == VisitStatus.COMPLETED:
        if visit.actual_date is None:
            raise ValidationError(
                "Actual date must be set for a completed visit",
                details={"field": "actual_date"},
            )
        if visit.actual_duration is None or visit.actual_duration <= 0:
            raise ValidationError(
                "Actual duration must be positive for a completed visit",
                details={"field": "actual_duration"},
            )
