from __future__ import annotations

import sys
from collections.abc import AsyncIterator, Callable
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

# ruff: noqa: E402
from shelter.config.settings import Settings
from shelter.domain.models.animal import Animal
from shelter.domain.models.customer import Customer
from shelter.domain.models.employee import Employee
from shelter.domain.value_objects.species import Species
from shelter.infrastructure.seed.sample_data import seed_sample_data
from shelter.infrastructure.storage.registry import JsonShelterStores
from shelter.interfaces.http.main import create_app


@pytest.fixture()
def data_dir(tmp_path) -> Path:
    return tmp_path / "data"


@pytest.fixture()
def test_settings(data_dir: Path) -> Settings:
    return Settings.model_validate(
        {
            "data_dir": str(data_dir),
            "log_level": "INFO",
            "environment": "test",
            "seed_sample_data": False,
            "default_page_size": 5,
            "max_page_size": 10,
        }
    )


@pytest.fixture()
def stores(test_settings: Settings) -> JsonShelterStores:
    return JsonShelterStores.from_settings(test_settings)


@pytest.fixture()
async def seeded_stores(stores: JsonShelterStores) -> JsonShelterStores:
    await seed_sample_data(stores)
    return stores


@pytest.fixture()
def make_animal() -> Callable[..., Animal]:
    def factory(**overrides) -> Animal:
        values = {"name": "Rex", "species": Species.DOG, "breed": "Mixed", "weight": 12.0}
        values.update(overrides)
        return Animal(**values)

    return factory


@pytest.fixture()
def make_customer() -> Callable[..., Customer]:
    counter = iter(range(1, 1000))

    def factory(**overrides) -> Customer:
        n = next(counter)
        values = {
            "first_name": "Carla",
            "last_name": "Carlsen",
            "email": f"customer{n}@example.org",
            "phone": "11223344",
            "address": "Stjernevej 3",
            "postal_code": "5678",
            "city": "Aarhus",
        }
        values.update(overrides)
        return Customer(**values)

    return factory


@pytest.fixture()
def make_employee() -> Callable[..., Employee]:
    counter = iter(range(1, 1000))

    def factory(**overrides) -> Employee:
        n = next(counter)
        values = {
            "first_name": "Peter",
            "last_name": "Plys",
            "email": f"employee{n}@shelter.example",
            "phone": "20304050",
            "position": "Animal Keeper",
            "department": "Kennel",
            "salary": 30000.0,
            "hire_date": datetime.now(timezone.utc) - timedelta(days=400),
        }
        values.update(overrides)
        return Employee(**values)

    return factory


@pytest.fixture()
def app(test_settings: Settings, stores: JsonShelterStores):
    return create_app(settings=test_settings, stores=stores)


@pytest.fixture()
async def client(app) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
