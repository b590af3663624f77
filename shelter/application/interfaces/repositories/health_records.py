from __future__ import annotations

from datetime import datetime
from typing import Protocol

from shelter.application.interfaces.repositories.base import EntityStore
from shelter.domain.models.health_record import HealthRecord


class HealthRecordRepository(EntityStore[HealthRecord], Protocol):
    async def get_by_animal_id(self, animal_id: int) -> list[HealthRecord]: ...

    async def get_latest_for_animal(self, animal_id: int) -> HealthRecord | None: ...

    async def get_latest_vaccination_for_animal(self, animal_id: int) -> HealthRecord | None: ...

    async def get_by_date_range(self, start: datetime, end: datetime) -> list[HealthRecord]: ...

    async def get_by_diagnosis(self, diagnosis: str) -> list[HealthRecord]: ...

    async def get_by_treatment(self, treatment: str) -> list[HealthRecord]: ...

    async def get_by_medication(self, medication: str) -> list[HealthRecord]: ...

    async def get_by_severity(self, severity: str) -> list[HealthRecord]: ...

    async def get_by_vaccination_status(self, is_vaccinated: bool) -> list[HealthRecord]: ...

    async def get_by_veterinarian(self, identifier: str) -> list[HealthRecord]: ...
