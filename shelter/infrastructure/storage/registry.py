from __future__ import annotations

import logging
from pathlib import Path

from shelter.config.settings import Settings
from shelter.infrastructure.repos.adoptions_json import AdoptionsJsonRepository
from shelter.infrastructure.repos.animals_json import AnimalsJsonRepository
from shelter.infrastructure.repos.customers_json import CustomersJsonRepository
from shelter.infrastructure.repos.employees_json import EmployeesJsonRepository
from shelter.infrastructure.repos.health_records_json import HealthRecordsJsonRepository
from shelter.infrastructure.repos.visits_json import VisitsJsonRepository

logger = logging.getLogger(__name__)


class JsonShelterStores:
    """One store per entity type, each owning its own file and lock."""

    def __init__(
        self,
        data_dir: str | Path,
        *,
        animals_file: str = "animals.json",
        adoptions_file: str = "adoptions.json",
        customers_file: str = "customers.json",
        employees_file: str = "employees.json",
        health_records_file: str = "healthrecords.json",
        visits_file: str = "visits.json",
        grace_days: int = 365,
    ) -> None:
        self.data_dir = Path(data_dir)
        self.animals = AnimalsJsonRepository(self.data_dir / animals_file)
        self.adoptions = AdoptionsJsonRepository(
            self.data_dir / adoptions_file, grace_days=grace_days
        )
        self.customers = CustomersJsonRepository(self.data_dir / customers_file)
        self.employees = EmployeesJsonRepository(self.data_dir / employees_file)
        self.health_records = HealthRecordsJsonRepository(self.data_dir / health_records_file)
        self.visits = VisitsJsonRepository(self.data_dir / visits_file)
        logger.info("JSON stores ready in %s", self.data_dir)

    @classmethod
    def from_settings(cls, settings: Settings) -> JsonShelterStores:
        return cls(
            settings.data_dir,
            animals_file=settings.animals_file,
            adoptions_file=settings.adoptions_file,
            customers_file=settings.customers_file,
            employees_file=settings.employees_file,
            health_records_file=settings.health_records_file,
            visits_file=settings.visits_file,
            grace_days=settings.adoption_date_grace_days,
        )
