from __future__ import annotations

from typing import Protocol

from shelter.application.interfaces.repositories.adoptions import AdoptionRepository
from shelter.application.interfaces.repositories.animals import AnimalRepository
from shelter.application.interfaces.repositories.customers import CustomerRepository
from shelter.application.interfaces.repositories.employees import EmployeeRepository
from shelter.application.interfaces.repositories.health_records import HealthRecordRepository
from shelter.application.interfaces.repositories.visits import VisitRepository


class ShelterStores(Protocol):
    animals: AnimalRepository
    adoptions: AdoptionRepository
    customers: CustomerRepository
    employees: EmployeeRepository
    health_records: HealthRecordRepository
    visits: VisitRepository
