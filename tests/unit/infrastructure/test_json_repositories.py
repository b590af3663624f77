from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest

from shelter.application.errors import ConflictError, NotFound, RepositoryError, ValidationError
from shelter.domain.models.adoption import Adoption
from shelter.domain.models.visit import Visit
from shelter.domain.value_objects.adoption_status import AdoptionStatus
from shelter.domain.value_objects.animal_status import AnimalStatus
from shelter.domain.value_objects.species import Species
from shelter.domain.value_objects.visit_status import VisitStatus
from shelter.infrastructure.seed import sample_data
from shelter.infrastructure.seed.sample_data import seed_sample_data


@pytest.mark.asyncio
async def test_seed_writes_each_missing_file_once(stores):
    created = await seed_sample_data(stores)
    assert {path.name for path in created} == {
        "animals.json",
        "adoptions.json",
        "customers.json",
        "employees.json",
        "healthrecords.json",
        "visits.json",
    }
    assert len(await stores.animals.get_all()) == 8
    assert len(await stores.customers.get_all()) == 5
    assert len(await stores.employees.get_all()) == 5
    assert len(await stores.adoptions.get_all()) == 3
    assert len(await stores.health_records.get_all()) == 7
    assert len(await stores.visits.get_all()) == 5

    assert await seed_sample_data(stores) == []

    raw = json.loads(stores.animals.file_path.read_text(encoding="utf-8"))
    assert raw[0]["species"] == "Dog"
    assert raw[0]["status"] == "Available"


@pytest.mark.asyncio
async def test_failed_seed_leaves_no_partial_file(stores, monkeypatch):
    good_customers = sample_data.default_customers

    def with_bad_record(now):
        customers = good_customers(now)
        customers[2].email = "not-an-email"
        return customers

    monkeypatch.setattr(sample_data, "default_customers", with_bad_record)
    with pytest.raises(RepositoryError):
        await seed_sample_data(stores)
    assert stores.animals.file_path.exists()
    assert not stores.customers.file_path.exists()

    monkeypatch.undo()
    created = await seed_sample_data(stores)
    assert stores.customers.file_path in created
    assert stores.animals.file_path not in created
    assert len(await stores.customers.get_all()) == 5


@pytest.mark.asyncio
async def test_seed_leaves_existing_files_alone(stores):
    stores.customers.file_path.write_text("[]", encoding="utf-8")
    created = await seed_sample_data(stores)
    assert stores.customers.file_path not in created
    assert await stores.customers.get_all() == []


@pytest.mark.asyncio
async def test_animal_lookups(seeded_stores):
    animals = seeded_stores.animals
    assert {a.name for a in await animals.get_available()} == {
        "Max", "Bella", "Cooper", "Daisy", "Rocky", "Misty",
    }
    assert [a.name for a in await animals.get_adopted()] == ["Lucy"]
    assert [a.name for a in await animals.get_by_status(AnimalStatus.RESERVED)] == ["Charlie"]
    assert {a.name for a in await animals.get_by_species(Species.DOG)} == {"Max", "Charlie", "Rocky"}
    assert [a.name for a in await animals.search_by_name("mis")] == ["Misty"]
    assert len(await animals.search_by_name("")) == 8
    assert [a.name for a in await animals.search_by_breed("retriever")] == ["Max", "Charlie"]
    assert {a.name for a in await animals.get_by_weight_range(30, 36)} == {"Max", "Charlie"}
    with pytest.raises(ValidationError):
        await animals.get_by_weight_range(10, 5)


@pytest.mark.asyncio
async def test_animal_validation_is_applied_on_add(stores, make_animal):
    with pytest.raises(RepositoryError) as exc_info:
        await stores.animals.add(make_animal(weight=-2))
    assert exc_info.value.code == "validation_error"


@pytest.mark.asyncio
async def test_adoption_lookups(seeded_stores):
    adoptions = seeded_stores.adoptions
    assert [a.id for a in await adoptions.get_by_customer_id(3)] == [1]
    assert await adoptions.get_by_customer_id(0) == []
    assert await adoptions.get_by_animal_id(-1) == []
    assert [a.id for a in await adoptions.get_by_employee_id(2)] == [1, 3]
    assert [a.id for a in await adoptions.get_by_status(AdoptionStatus.COMPLETED)] == [3]
    assert [a.id for a in await adoptions.get_open_for_animal(1)] == [1]
    assert await adoptions.get_by_adoption_type("") == []
    assert len(await adoptions.get_by_adoption_type("standard")) == 3

    now = datetime.now(timezone.utc)
    recent = await adoptions.get_by_date_range(now - timedelta(days=30), now)
    assert [a.id for a in recent] == [3]


@pytest.mark.asyncio
async def test_latest_adoption_for_animal(seeded_stores):
    adoptions = seeded_stores.adoptions
    newer = Adoption(animal_id=4, customer_id=5, status=AdoptionStatus.REJECTED)
    await adoptions.add(newer)
    assert (await adoptions.get_latest_for_animal(4)).id == newer.id

    with pytest.raises(NotFound):
        await adoptions.get_latest_for_animal(6)
    with pytest.raises(ValidationError):
        await adoptions.get_latest_for_animal(0)


@pytest.mark.asyncio
async def test_customer_email_is_unique_among_active_records(stores, make_customer):
    first = await stores.customers.add(make_customer(email="same@example.com"))
    with pytest.raises(RepositoryError) as exc_info:
        await stores.customers.add(make_customer(email="SAME@example.com"))
    assert isinstance(exc_info.value.cause, ConflictError)

    await stores.customers.delete(first.id)
    again = await stores.customers.add(make_customer(email="same@example.com"))
    assert again.id == first.id + 1


@pytest.mark.asyncio
async def test_customer_update_keeps_registration_date(stores, make_customer):
    customer = await stores.customers.add(make_customer())
    original = customer.registration_date
    customer.city = "Odense"
    customer.registration_date = original + timedelta(days=10)
    await stores.customers.update(customer)

    stored = await stores.customers.get_by_id(customer.id)
    assert stored.city == "Odense"
    assert stored.registration_date == original


@pytest.mark.asyncio
async def test_customer_lookups(seeded_stores):
    customers = seeded_stores.customers
    assert (await customers.get_by_email("Carla.C@example.org")).first_name == "Carla"
    assert await customers.get_by_email("not-an-email") is None
    assert [c.first_name for c in await customers.get_by_phone("1122 3344")] == ["Carla"]
    assert [c.first_name for c in await customers.get_by_city("solby")] == ["Anders"]
    assert [c.first_name for c in await customers.get_by_postal_code("4321")] == ["Bente"]
    assert [c.first_name for c in await customers.search_by_name("eriksen")] == ["Eva"]


@pytest.mark.asyncio
async def test_employee_lookups_and_unique_email(seeded_stores, make_employee):
    employees = seeded_stores.employees
    assert (await employees.get_by_email("peter.plys@shelter.example")).id == 2
    assert {e.id for e in await employees.get_by_department("kennel")} == {2, 5}
    assert [e.id for e in await employees.get_by_specialization("birds")] == [3]
    assert [e.id for e in await employees.search_by_name("sofie")] == [4]

    with pytest.raises(RepositoryError) as exc_info:
        await employees.add(make_employee(email="peter.plys@shelter.example"))
    assert exc_info.value.code == "conflict"


@pytest.mark.asyncio
async def test_health_record_lookups(seeded_stores):
    records = seeded_stores.health_records
    assert [r.id for r in await records.get_by_animal_id(1)] == [1, 3]
    assert await records.get_by_animal_id(0) == []
    assert (await records.get_latest_for_animal(7)).id == 7
    assert (await records.get_latest_vaccination_for_animal(3)).id == 4
    assert await records.get_latest_vaccination_for_animal(5) is None
    assert [r.id for r in await records.get_by_diagnosis("leg")] == [6, 7]
    assert await records.get_by_diagnosis(" ") == []
    assert [r.id for r in await records.get_by_medication("carprofen")] == [6]
    assert [r.id for r in await records.get_by_severity("MODERATE")] == [6]
    assert [r.id for r in await records.get_by_veterinarian("hansen")] == [6, 7]
    assert [r.id for r in await records.get_by_vaccination_status(False)] == [5]

    now = datetime.now(timezone.utc)
    recent = await records.get_by_date_range(now - timedelta(days=25), now)
    assert [r.id for r in recent] == [3, 5]
    with pytest.raises(ValidationError):
        await records.get_by_date_range(now, now - timedelta(days=1))


@pytest.mark.asyncio
async def test_visit_lookups(seeded_stores):
    visits = seeded_stores.visits
    assert [v.id for v in await visits.get_by_customer_id(3)] == [1]
    assert [v.id for v in await visits.get_by_employee_id(2)] == [1, 5]
    assert [v.id for v in await visits.get_by_status(VisitStatus.COMPLETED)] == [2, 4]
    assert [v.id for v in await visits.get_by_type("viewing")] == [2]
    assert [v.id for v in await visits.get_veterinary()] == [5]
    assert await visits.get_resulting_in_adoption() == []
    assert (await visits.get_latest_for_animal(7)).id == 5
    assert await visits.get_latest_for_customer(4) is None

    now = datetime.now(timezone.utc)
    assert [v.id for v in await visits.get_by_date_range(now - timedelta(days=2), now)] == [2]


@pytest.mark.asyncio
async def test_visit_validation_is_applied_on_add(stores):
    with pytest.raises(RepositoryError) as exc_info:
        await stores.visits.add(
            Visit(animal_id=1, visit_type="Viewing", status=VisitStatus.COMPLETED)
        )
    assert exc_info.value.code == "validation_error"
    assert not stores.visits.file_path.exists()
