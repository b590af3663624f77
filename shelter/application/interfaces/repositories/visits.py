from __future__ import annotations

from datetime import datetime
from typing import Protocol

from shelter.application.interfaces.repositories.base import EntityStore
from shelter.domain.models.visit import Visit
from shelter.domain.value_objects.visit_status import VisitStatus


class VisitRepository(EntityStore[Visit], Protocol):
    async def get_by_animal_id(self, animal_id: int) -> list[Visit]: ...

    async def get_by_customer_id(self, customer_id: int) -> list[Visit]: ...

    async def get_by_employee_id(self, employee_id: int) -> list[Visit]: ...

    async def get_by_date_range(self, start: datetime, end: datetime) -> list[Visit]: ...

    async def get_by_status(self, status: VisitStatus) -> list[Visit]: ...

    async def get_by_type(self, visit_type: str) -> list[Visit]: ...

    async def get_veterinary(self) -> list[Visit]: ...

    async def get_resulting_in_adoption(self) -> list[Visit]: ...

    async def get_latest_for_animal(self, animal_id: int) -> Visit | None: ...

    async def get_latest_for_customer(self, customer_id: int) -> Visit | None: ...
