from __future__ import annotations

from datetime import datetime
from pathlib import Path

from shelter.application.errors import ValidationError
from shelter.application.interfaces.repositories.animals import AnimalRepository
from shelter.application.validation import as_utc, validate_animal
from shelter.domain.models.animal import Animal
from shelter.domain.value_objects.animal_status import AnimalStatus
from shelter.domain.value_objects.species import Species
from shelter.infrastructure.storage.json_store import JsonFileStore


def _check_range(low, high, label: str) -> None:  # noqa: ANN001
    if low > high:
        raise ValidationError(f"Invalid {label} range: start is after end")


class AnimalsJsonRepository(JsonFileStore[Animal], AnimalRepository):
    def __init__(self, file_path: str | Path) -> None:
        super().__init__(file_path, Animal, validator=validate_animal)

    async def get_available(self) -> list[Animal]:
        return await self.get_by_status(AnimalStatus.AVAILABLE)

    async def get_adopted(self) -> list[Animal]:
        return await self.find(lambda a: a.status == AnimalStatus.ADOPTED or a.is_adopted)

    async def get_by_status(self, status: AnimalStatus) -> list[Animal]:
        return await self.find(lambda a: a.status == status)

    async def get_by_species(self, species: Species) -> list[Animal]:
        return await self.find(lambda a: a.species == species)

    async def search_by_name(self, name: str) -> list[Animal]:
        term = (name or "").strip().lower()
        if not term:
            return await self.get_all()
        return await self.find(lambda a: term in a.name.lower())

    async def search_by_breed(self, breed: str) -> list[Animal]:
        term = (breed or "").strip().lower()
        if not term:
            return await self.get_all()
        return await self.find(lambda a: term in a.breed.lower())

    async def get_by_gender(self, gender: str) -> list[Animal]:
        term = (gender or "").strip().lower()
        if not term:
            return []
        return await self.find(lambda a: a.gender.lower() == term)

    async def get_by_weight_range(self, min_weight: float, max_weight: float) -> list[Animal]:
        if min_weight < 0:
            raise ValidationError("Weight must not be negative")
        _check_range(min_weight, max_weight, "weight")
        return await self.find(lambda a: min_weight <= a.weight <= max_weight)

    async def get_by_intake_range(self, start: datetime, end: datetime) -> list[Animal]:
        start, end = as_utc(start), as_utc(end)
        _check_range(start, end, "intake date")
        return await self.find(lambda a: start <= as_utc(a.intake_date) <= end)

    async def get_by_age_range(self, min_years: int, max_years: int) -> list[Animal]:
        if min_years < 0:
            raise ValidationError("Age must not be negative")
        _check_range(min_years, max_years, "age")
        return await self.find(
            lambda a: a.birth_date is not None and min_years <= a.age_in_years() <= max_years
        )
