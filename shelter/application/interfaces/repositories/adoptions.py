from __future__ import annotations

from datetime import datetime
from typing import Protocol

from shelter.application.interfaces.repositories.base import EntityStore
from shelter.domain.models.adoption import Adoption
from shelter.domain.value_objects.adoption_status import AdoptionStatus


class AdoptionRepository(EntityStore[Adoption], Protocol):
    async def get_by_customer_id(self, customer_id: int) -> list[Adoption]: ...

    async def get_by_animal_id(self, animal_id: int) -> list[Adoption]: ...

    async def get_by_employee_id(self, employee_id: int) -> list[Adoption]: ...

    async def get_by_status(self, status: AdoptionStatus) -> list[Adoption]: ...

    async def get_by_date_range(self, start: datetime, end: datetime) -> list[Adoption]: ...

    async def get_by_adoption_type(self, adoption_type: str) -> list[Adoption]: ...

    async def get_open_for_animal(self, animal_id: int) -> list[Adoption]: ...

    async def get_latest_for_animal(self, animal_id: int) -> Adoption: ...
