from __future__ import annotations

from datetime import datetime
from functools import partial
from pathlib import Path

from shelter.application.errors import NotFound, ValidationError
from shelter.application.interfaces.repositories.adoptions import AdoptionRepository
from shelter.application.validation import (
    DEFAULT_ADOPTION_DATE_GRACE_DAYS,
    as_utc,
    validate_adoption,
)
from shelter.domain.models.adoption import Adoption
from shelter.domain.value_objects.adoption_status import AdoptionStatus
from shelter.infrastructure.storage.json_store import JsonFileStore


class AdoptionsJsonRepository(JsonFileStore[Adoption], AdoptionRepository):
    def __init__(
        self, file_path: str | Path, *, grace_days: int = DEFAULT_ADOPTION_DATE_GRACE_DAYS
    ) -> None:
        super().__init__(
            file_path, Adoption, validator=partial(validate_adoption, grace_days=grace_days)
        )

    async def get_by_customer_id(self, customer_id: int) -> list[Adoption]:
        if customer_id <= 0:
            return []
        return await self.find(lambda a: a.customer_id == customer_id)

    async def get_by_animal_id(self, animal_id: int) -> list[Adoption]:
        if animal_id <= 0:
            return []
        return await self.find(lambda a: a.animal_id == animal_id)

    async def get_by_employee_id(self, employee_id: int) -> list[Adoption]:
        if employee_id <= 0:
            return []
        return await self.find(lambda a: a.employee_id == employee_id)

    async def get_by_status(self, status: AdoptionStatus) -> list[Adoption]:
        return await self.find(lambda a: a.status == status)

    async def get_by_date_range(self, start: datetime, end: datetime) -> list[Adoption]:
        start, end = as_utc(start), as_utc(end)
        if start > end:
            raise ValidationError("Invalid date range: start is after end")
        return await self.find(
            lambda a: a.adoption_date is not None and start <= as_utc(a.adoption_date) <= end
        )

    async def get_by_adoption_type(self, adoption_type: str) -> list[Adoption]:
        term = (adoption_type or "").strip().lower()
        if not term:
            return []
        return await self.find(lambda a: a.adoption_type.lower() == term)

    async def get_open_for_animal(self, animal_id: int) -> list[Adoption]:
        if animal_id <= 0:
            return []
        return await self.find(lambda a: a.animal_id == animal_id and a.status.is_open)

    async def get_latest_for_animal(self, animal_id: int) -> Adoption:
        if animal_id <= 0:
            raise ValidationError("Animal id must be positive", details={"field": "animal_id"})
        history = await self.find_and_sort(
            lambda a: a.animal_id == animal_id,
            lambda a: as_utc(a.application_date),
            ascending=False,
        )
        if not history:
            raise NotFound(f"No adoption found for animal {animal_id}")
        return history[0]
