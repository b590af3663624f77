from __future__ import annotations

from datetime import datetime
from pathlib import Path

from shelter.application.errors import ValidationError
from shelter.application.interfaces.repositories.visits import VisitRepository
from shelter.application.validation import as_utc, validate_visit
from shelter.domain.models.visit import Visit
from shelter.domain.value_objects.visit_status import VisitStatus
from shelter.infrastructure.storage.json_store import JsonFileStore


class VisitsJsonRepository(JsonFileStore[Visit], VisitRepository):
    def __init__(self, file_path: str | Path) -> None:
        super().__init__(file_path, Visit, validator=validate_visit)

    async def get_by_animal_id(self, animal_id: int) -> list[Visit]:
        if animal_id <= 0:
            return []
        return await self.find(lambda v: v.animal_id == animal_id)

    async def get_by_customer_id(self, customer_id: int) -> list[Visit]:
        if customer_id <= 0:
            return []
        return await self.find(lambda v: v.customer_id == customer_id)

    async def get_by_employee_id(self, employee_id: int) -> list[Visit]:
        if employee_id <= 0:
            return []
        return await self.find(lambda v: v.employee_id == employee_id)

    async def get_by_date_range(self, start: datetime, end: datetime) -> list[Visit]:
        """Visits planned or held on any day between ``start`` and ``end``."""
        if as_utc(start) > as_utc(end):
            raise ValidationError("Invalid date range: start is after end")
        first, last = start.date(), end.date()

        def in_range(visit: Visit) -> bool:
            if first <= visit.planned_date.date() <= last:
                return True
            return visit.actual_date is not None and first <= visit.actual_date.date() <= last

        return await self.find(in_range)

    async def get_by_status(self, status: VisitStatus) -> list[Visit]:
        return await self.find(lambda v: v.status == status)

    async def get_by_type(self, visit_type: str) -> list[Visit]:
        term = (visit_type or "").strip().lower()
        if not term:
            return []
        return await self.find(lambda v: v.visit_type.strip().lower() == term)

    async def get_veterinary(self) -> list[Visit]:
        return await self.find(lambda v: v.is_veterinary)

    async def get_resulting_in_adoption(self) -> list[Visit]:
        return await self.find(lambda v: v.resulted_in_adoption)

    async def get_latest_for_animal(self, animal_id: int) -> Visit | None:
        if animal_id <= 0:
            return None
        history = await self.find_and_sort(
            lambda v: v.animal_id == animal_id, lambda v: as_utc(v.last_seen), ascending=False
        )
        return history[0] if history else None

    async def get_latest_for_customer(self, customer_id: int) -> Visit | None:
        if customer_id <= 0:
            return None
        history = await self.find_and_sort(
            lambda v: v.customer_id == customer_id, lambda v: as_utc(v.last_seen), ascending=False
        )
        return history[0] if history else None
