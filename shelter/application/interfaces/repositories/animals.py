from __future__ import annotations

from datetime import datetime
from typing import Protocol

from shelter.application.interfaces.repositories.base import EntityStore
from shelter.domain.models.animal import Animal
from shelter.domain.value_objects.animal_status import AnimalStatus
from shelter.domain.value_objects.species import Species


class AnimalRepository(EntityStore[Animal], Protocol):
    async def get_available(self) -> list[Animal]: ...

    async def get_adopted(self) -> list[Animal]: ...

    async def get_by_status(self, status: AnimalStatus) -> list[Animal]: ...

    async def get_by_species(self, species: Species) -> list[Animal]: ...

    async def search_by_name(self, name: str) -> list[Animal]: ...

    async def search_by_breed(self, breed: str) -> list[Animal]: ...

    async def get_by_gender(self, gender: str) -> list[Animal]: ...

    async def get_by_weight_range(self, min_weight: float, max_weight: float) -> list[Animal]: ...

    async def get_by_intake_range(self, start: datetime, end: datetime) -> list[Animal]: ...

    async def get_by_age_range(self, min_years: int, max_years: int) -> list[Animal]: ...
