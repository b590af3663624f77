"""Default records written into empty data directories."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone
from pathlib import Path

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
from shelter.infrastructure.storage.json_store import JsonFileStore
from shelter.infrastructure.storage.registry import JsonShelterStores

logger = logging.getLogger(__name__)


def _days_ago(now: datetime, days: int) -> datetime:
    return now - timedelta(days=days)


def default_animals(now: datetime) -> list[Animal]:
    def animal(**kwargs) -> Animal:  # noqa: ANN003
        return Animal(picture_url=f"https://placehold.co/600x400?text={kwargs['name']}", **kwargs)

    return [
        animal(
            id=1, name="Max", species=Species.DOG, breed="Labrador Retriever",
            birth_date=date(2020, 5, 15), gender="Male", weight=30.5,
            intake_date=_days_ago(now, 90),
            description="Friendly family dog. Loves long walks.",
            health_status="Healthy",
        ),
        animal(
            id=2, name="Bella", species=Species.CAT, breed="Siamese",
            birth_date=date(2021, 1, 10), gender="Female", weight=4.2,
            intake_date=_days_ago(now, 60),
            description="Affectionate and calm indoor cat.",
            health_status="Needs special diet",
        ),
        animal(
            id=3, name="Charlie", species=Species.DOG, breed="Golden Retriever",
            birth_date=date(2019, 8, 22), gender="Male", weight=35.1,
            intake_date=_days_ago(now, 120), status=AnimalStatus.RESERVED,
            description="Very active and eager to train. Needs an experienced owner.",
            health_status="Good shape",
        ),
        animal(
            id=4, name="Lucy", species=Species.CAT, breed="Maine Coon",
            birth_date=date(2022, 3, 5), gender="Female", weight=6.8,
            intake_date=_days_ago(now, 30), status=AnimalStatus.ADOPTED,
            is_adopted=True, adoption_date=_days_ago(now, 10), adopted_by_customer_id=2,
            description="Large, handsome and very social cat.",
            health_status="Healthy",
        ),
        animal(
            id=5, name="Cooper", species=Species.RABBIT, breed="Mini Lop",
            birth_date=date(2023, 1, 15), gender="Male", weight=1.5,
            intake_date=_days_ago(now, 15),
            description="Sweet and curious rabbit. House trained.",
            health_status="Checked by vet",
        ),
        animal(
            id=6, name="Daisy", species=Species.BIRD, breed="Budgerigar",
            birth_date=date(2022, 11, 1), gender="Female", weight=0.05,
            intake_date=_days_ago(now, 45),
            description="Sings beautifully. Tame.",
            health_status="Ok",
        ),
        animal(
            id=7, name="Rocky", species=Species.DOG, breed="German Shepherd",
            birth_date=date(2018, 6, 10), gender="Male", weight=38.0,
            intake_date=_days_ago(now, 200),
            description="Former service dog. Calm and loyal.",
            health_status="Old leg fracture, needs gentle exercise",
        ),
        animal(
            id=8, name="Misty", species=Species.CAT, breed="Persian",
            birth_date=date(2020, 2, 20), gender="Female", weight=3.5,
            intake_date=_days_ago(now, 50),
            description="Long-haired and a little shy. Needs grooming.",
            health_status="Ok, but shy",
        ),
    ]


def default_customers(now: datetime) -> list[Customer]:
    rows = [
        (1, "Anders", "Andersen", "anders.a@example.com", "12345678", "Solvej 1", "1234", "Solby", 180),
        (2, "Bente", "Bentsen", "bente.b@example.net", "87654321", "Månevej 22", "4321", "Måneby", 90),
        (3, "Carla", "Carlsen", "carla.c@example.org", "11223344", "Stjernevej 3", "5678", "Stjernekøbing", 30),
        (4, "Dennis", "Danielsen", "dennis.d@example.com", "55667788", "Galaksevej 44", "8765", "Galakseborg", 15),
        (5, "Eva", "Eriksen", "eva.e@example.net", "99887766", "Planetvej 5", "3456", "Planetbyen", 5),
    ]
    return [
        Customer(
            id=id_, first_name=first, last_name=last, email=email, phone=phone,
            address=address, postal_code=postal, city=city,
            registration_date=_days_ago(now, days),
        )
        for id_, first, last, email, phone, address, postal, city, days in rows
    ]


def default_employees() -> list[Employee]:
    def hired(year: int, month: int, day: int) -> datetime:
        return datetime(year, month, day, tzinfo=timezone.utc)

    return [
        Employee(
            id=1, first_name="Admin", last_name="User", email="admin@shelter.example",
            phone="10203040", position="System Administrator", department="IT",
            salary=55000, hire_date=hired(2018, 1, 1),
            specializations=["System maintenance", "Data security"],
        ),
        Employee(
            id=2, first_name="Peter", last_name="Plys", email="peter.plys@shelter.example",
            phone="20304050", position="Lead Animal Keeper", department="Kennel",
            salary=42000, hire_date=hired(2019, 3, 15),
            specializations=["Dog behaviour", "Cat care"],
        ),
        Employee(
            id=3, first_name="Mette", last_name="Munk", email="mette.munk@shelter.example",
            phone="30405060", position="Biologist", department="Field Unit",
            salary=38000, hire_date=hired(2020, 6, 1),
            specializations=["Wildlife", "Hedgehogs", "Birds"],
        ),
        Employee(
            id=4, first_name="Sofie", last_name="Sørensen", email="sofie.s@shelter.example",
            phone="40506070", position="Veterinary Nurse", department="Clinic",
            salary=36000, hire_date=hired(2021, 9, 10),
            specializations=["Surgery assistance", "Lab work"],
        ),
        Employee(
            id=5, first_name="Jens", last_name="Jensen", email="jens.j@shelter.example",
            phone="50607080", position="Shelter Worker", department="Kennel",
            salary=30000, hire_date=hired(2022, 2, 20),
            specializations=["Cleaning", "Feeding", "Socialisation"],
        ),
    ]


def default_adoptions(now: datetime) -> list[Adoption]:
    return [
        Adoption(
            id=1, animal_id=1, customer_id=3, employee_id=2,
            application_date=_days_ago(now, 5), status=AdoptionStatus.PENDING,
            notes="Carla looks like a good match for Max. Home visit planned.",
        ),
        Adoption(
            id=2, animal_id=2, customer_id=1, employee_id=4,
            application_date=_days_ago(now, 2), status=AdoptionStatus.PENDING,
            notes="Anders has experience with Siamese cats.",
        ),
        Adoption(
            id=3, animal_id=4, customer_id=2, employee_id=2,
            application_date=_days_ago(now, 15), status=AdoptionStatus.COMPLETED,
            approval_date=_days_ago(now, 12), completion_date=_days_ago(now, 10),
            adoption_date=_days_ago(now, 10),
            notes="Lucy is thriving with Bente.",
        ),
    ]


def default_health_records(now: datetime) -> list[HealthRecord]:
    def record(days: int, **kwargs) -> HealthRecord:  # noqa: ANN003
        when = _days_ago(now, days)
        return HealthRecord(record_date=when, created_at=when, **kwargs)

    return [
        record(
            80, id=1, animal_id=1, diagnosis="Routine check", treatment="Standard vaccination",
            notes="All good. Max is healthy.", veterinarian_name="Dr. Dyregod",
            is_vaccinated=True, next_vaccination_date=_days_ago(now, 80) + timedelta(days=365),
            weight=30.2,
        ),
        record(
            50, id=2, animal_id=2, diagnosis="Mild eye infection",
            treatment="Eye drops twice a day for 7 days", medication="Eye drops",
            notes="Check again in 10 days.", veterinarian_name="Dr. Andersen",
            is_vaccinated=True, next_vaccination_date=_days_ago(now, 50) + timedelta(days=365),
            weight=4.1,
        ),
        record(
            20, id=3, animal_id=1, diagnosis="Follow-up on minor scratch",
            treatment="Cleaned and observed", notes="Scratch on the front leg heals well.",
            veterinarian_name="Dr. Dyregod", is_vaccinated=True, weight=30.5,
        ),
        record(
            110, id=4, animal_id=3, diagnosis="Behaviour assessment",
            treatment="No medical treatment", notes="Very energetic, training recommended.",
            veterinarian_name="Behaviourist Olsen", is_vaccinated=True,
            next_vaccination_date=_days_ago(now, 110) + timedelta(days=365), weight=34.8,
        ),
        record(
            14, id=5, animal_id=5, diagnosis="Intake health check", treatment="None needed",
            notes="Cooper is a healthy young rabbit.", veterinarian_name="Dr. Nielsen",
            weight=1.5,
        ),
        record(
            190, id=6, animal_id=7, diagnosis="Old leg fracture assessment",
            treatment="Pain relief as needed", medication="Carprofen", severity="Moderate",
            notes="Avoid rough play.", veterinarian_name="Dr. Hansen", is_vaccinated=True,
            next_vaccination_date=_days_ago(now, 190) + timedelta(days=365), weight=38.5,
        ),
        record(
            30, id=7, animal_id=7, diagnosis="Leg follow-up", treatment="Continued observation",
            notes="No worsening. Pain relief dose may be reduced.",
            veterinarian_name="Dr. Hansen", is_vaccinated=True, weight=38.0,
        ),
    ]


def default_visits(now: datetime) -> list[Visit]:
    return [
        Visit(
            id=1, animal_id=1, customer_id=3, employee_id=2,
            planned_date=now + timedelta(days=2), planned_duration=60,
            visit_type="Home visit", purpose="Home assessment for the adoption of Max",
            visitor="Carla Carlsen", status=VisitStatus.SCHEDULED,
        ),
        Visit(
            id=2, animal_id=2, customer_id=1, employee_id=4,
            planned_date=_days_ago(now, 1), actual_date=_days_ago(now, 1),
            planned_duration=30, actual_duration=45, visit_type="Viewing",
            visitor="Anders Andersen", status=VisitStatus.COMPLETED,
            notes="Anders met Bella and was very interested.",
        ),
        Visit(
            id=3, animal_id=5, employee_id=5, planned_date=now + timedelta(days=5),
            visit_type="Interest", visitor="The Hansen family", status=VisitStatus.SCHEDULED,
            notes="Family with children wants to see the rabbits.",
        ),
        Visit(
            id=4, animal_id=7, employee_id=3, planned_date=_days_ago(now, 10),
            actual_date=_days_ago(now, 10), planned_duration=90, actual_duration=85,
            visit_type="Behaviour consultation", visitor="Dog trainer Karen",
            status=VisitStatus.COMPLETED,
        ),
        Visit(
            id=5, animal_id=7, employee_id=2, planned_date=now + timedelta(days=7),
            visit_type="Veterinary", purpose="Leg check", visitor="Dr. Hansen",
            is_veterinary_visit=True, status=VisitStatus.CONFIRMED,
        ),
    ]


async def _seed_store(store: JsonFileStore, records: list) -> bool:
    if store.file_path.exists():
        logger.debug("Skipping seed for %s: file exists", store.file_path)
        return False
    # One write; a bad record leaves no file behind so the next run retries
    await store.add_many(records)
    logger.info("Seeded %d %s records into %s", len(records), store.entity_name, store.file_path)
    return True


async def seed_sample_data(target: JsonShelterStores | str | Path) -> list[Path]:
    """Write sample records into every data file that does not exist yet.

    Existing files are left alone, even when empty. Returns the paths that
    were created.
    """
    stores = target if isinstance(target, JsonShelterStores) else JsonShelterStores(target)
    now = datetime.now(timezone.utc)
    plan: list[tuple[JsonFileStore, list]] = [
        (stores.animals, default_animals(now)),
        (stores.customers, default_customers(now)),
        (stores.employees, default_employees()),
        (stores.adoptions, default_adoptions(now)),
        (stores.health_records, default_health_records(now)),
        (stores.visits, default_visits(now)),
    ]
    created: list[Path] = []
    for store, records in plan:
        if await _seed_store(store, records):
            created.append(store.file_path)
    return created
