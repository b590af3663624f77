from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from shelter.application.errors import ValidationError
from shelter.application.validation import (
    validate_adoption,
    validate_animal,
    validate_customer,
    validate_employee,
    validate_entity,
    validate_health_record,
    validate_visit,
)
from shelter.domain.models.adoption import Adoption
from shelter.domain.models.health_record import HealthRecord
from shelter.domain.models.visit import Visit
from shelter.domain.value_objects.adoption_status import AdoptionStatus
from shelter.domain.value_objects.visit_status import VisitStatus

NOW = datetime(2025, 1, 1, tzinfo=timezone.utc)


def test_validate_entity_rejects_none():
    with pytest.raises(ValidationError):
        validate_entity(None)


def test_per_type_validators_call_base_check_first():
    for validator in (validate_animal, validate_adoption, validate_customer, validate_employee):
        with pytest.raises(ValidationError) as exc_info:
            validator(None)
        assert exc_info.value.message == "Entity must not be None"


def test_animal_requires_name_and_known_species(make_animal):
    validate_animal(make_animal())
    with pytest.raises(ValidationError) as exc_info:
        validate_animal(make_animal(name="  "))
    assert exc_info.value.details == {"field": "name"}

    with pytest.raises(ValidationError) as exc_info:
        validate_animal(make_animal(species="Dragon"))
    assert exc_info.value.details == {"field": "species"}

    with pytest.raises(ValidationError):
        validate_animal(make_animal(weight=-1))


def test_adoption_ids_must_be_positive():
    with pytest.raises(ValidationError) as exc_info:
        validate_adoption(Adoption(animal_id=1, customer_id=0), now=NOW)
    assert exc_info.value.details == {"field": "customer_id"}
    with pytest.raises(ValidationError) as exc_info:
        validate_adoption(Adoption(animal_id=-1, customer_id=1), now=NOW)
    assert exc_info.value.details == {"field": "animal_id"}


def test_adoption_employee_checked_only_for_open_statuses():
    with pytest.raises(ValidationError):
        validate_adoption(Adoption(animal_id=1, customer_id=1, employee_id=0), now=NOW)
    validate_adoption(
        Adoption(animal_id=1, customer_id=1, employee_id=0, status=AdoptionStatus.REJECTED),
        now=NOW,
    )


def test_adoption_type_and_status():
    with pytest.raises(ValidationError):
        validate_adoption(Adoption(animal_id=1, customer_id=1, adoption_type=""), now=NOW)
    with pytest.raises(ValidationError) as exc_info:
        validate_adoption(Adoption(animal_id=1, customer_id=1, status="Lost"), now=NOW)
    assert exc_info.value.details == {"field": "status"}


def test_adoption_date_grace_window():
    within = Adoption(animal_id=1, customer_id=1, adoption_date=NOW + timedelta(days=364))
    validate_adoption(within, now=NOW)

    beyond = Adoption(animal_id=1, customer_id=1, adoption_date=NOW + timedelta(days=366))
    with pytest.raises(ValidationError):
        validate_adoption(beyond, now=NOW)
    validate_adoption(beyond, now=NOW, grace_days=400)


@pytest.mark.parametrize("status", [AdoptionStatus.APPROVED, AdoptionStatus.COMPLETED])
def test_adoption_date_required_once_approved(status):
    with pytest.raises(ValidationError) as exc_info:
        validate_adoption(Adoption(animal_id=1, customer_id=1, status=status), now=NOW)
    assert exc_info.value.details == {"field": "adoption_date"}
    validate_adoption(
        Adoption(animal_id=1, customer_id=1, status=status, adoption_date=NOW), now=NOW
    )


def test_customer_contact_rules(make_customer):
    validate_customer(make_customer(phone="+45 11 22 33 44"))
    with pytest.raises(ValidationError) as exc_info:
        validate_customer(make_customer(email="not-an-email"))
    assert exc_info.value.details == {"field": "email"}
    with pytest.raises(ValidationError) as exc_info:
        validate_customer(make_customer(phone="1234"))
    assert exc_info.value.details == {"field": "phone"}
    with pytest.raises(ValidationError) as exc_info:
        validate_customer(make_customer(postal_code="12345"))
    assert exc_info.value.details == {"field": "postal_code"}
    with pytest.raises(ValidationError):
        validate_customer(make_customer(city=""))


def test_employee_rules(make_employee):
    validate_employee(make_employee())
    with pytest.raises(ValidationError) as exc_info:
        validate_employee(make_employee(hire_date=NOW + timedelta(days=1)), now=NOW)
    assert exc_info.value.details == {"field": "hire_date"}
    with pytest.raises(ValidationError) as exc_info:
        validate_employee(make_employee(salary=-5))
    assert exc_info.value.details == {"field": "salary"}
    with pytest.raises(ValidationError) as exc_info:
        validate_employee(make_employee(position=""))
    assert exc_info.value.details == {"field": "position"}


def _record(**overrides) -> HealthRecord:
    values = {
        "animal_id": 1,
        "record_date": NOW - timedelta(days=1),
        "diagnosis": "Routine check",
        "veterinarian_name": "Dr. Hansen",
    }
    values.update(overrides)
    return HealthRecord(**values)


def test_health_record_rules():
    validate_health_record(_record(), now=NOW)
    validate_health_record(_record(veterinarian_name="", veterinarian_id="VET-7"), now=NOW)

    with pytest.raises(ValidationError) as exc_info:
        validate_health_record(_record(record_date=NOW + timedelta(days=1)), now=NOW)
    assert exc_info.value.details == {"field": "record_date"}
    with pytest.raises(ValidationError) as exc_info:
        validate_health_record(_record(diagnosis="  "), now=NOW)
    assert exc_info.value.details == {"field": "diagnosis"}
    with pytest.raises(ValidationError) as exc_info:
        validate_health_record(_record(veterinarian_name=""), now=NOW)
    assert exc_info.value.details == {"field": "veterinarian_name"}
    with pytest.raises(ValidationError) as exc_info:
        validate_health_record(_record(weight=-0.5), now=NOW)
    assert exc_info.value.details == {"field": "weight"}
    with pytest.raises(ValidationError):
        validate_health_record(_record(animal_id=0), now=NOW)


def _visit(**overrides) -> Visit:
    values = {"animal_id": 1, "planned_date": NOW + timedelta(days=2), "visit_type": "Viewing"}
    values.update(overrides)
    return Visit(**values)


def test_visit_rules():
    validate_visit(_visit(), now=NOW)

    with pytest.raises(ValidationError) as exc_info:
        validate_visit(_visit(visit_type=""), now=NOW)
    assert exc_info.value.details == {"field": "visit_type"}
    with pytest.raises(ValidationError) as exc_info:
        validate_visit(_visit(planned_duration=-10), now=NOW)
    assert exc_info.value.details == {"field": "planned_duration"}
    with pytest.raises(ValidationError) as exc_info:
        validate_visit(_visit(status="Postponed"), now=NOW)
    assert exc_info.value.details == {"field": "status"}
    with pytest.raises(ValidationError) as exc_info:
        validate_visit(_visit(actual_date=NOW + timedelta(hours=2)), now=NOW)
    assert exc_info.value.details == {"field": "actual_date"}


def test_completed_visit_needs_outcome():
    done = _visit(status=VisitStatus.COMPLETED, planned_date=NOW - timedelta(days=1))
    with pytest.raises(ValidationError) as exc_info:
        validate_visit(done, now=NOW)
    assert exc_info.value.details == {"field": "actual_date"}

    done.actual_date = NOW - timedelta(days=1)
    done.actual_duration = 0
    with pytest.raises(ValidationError) as exc_info:
        validate_visit(done, now=NOW)
    assert exc_info.value.details == {"field": "actual_duration"}

    done.actual_duration = 40
    validate_visit(done, now=NOW)
