from __future__ import annotations

from datetime import datetime
from pathlib import Path

from shelter.application.errors import ValidationError
from shelter.application.interfaces.repositories.health_records import HealthRecordRepository
from shelter.application.validation import as_utc, validate_health_record
from shelter.domain.models.health_record import HealthRecord
from shelter.infrastructure.storage.json_store import JsonFileStore


def _contains(value: str, term: str) -> bool:
    return bool(value.strip()) and term in value.lower()


class HealthRecordsJsonRepository(JsonFileStore[HealthRecord], HealthRecordRepository):
    def __init__(self, file_path: str | Path) -> None:
        super().__init__(file_path, HealthRecord, validator=validate_health_record)

    async def get_by_animal_id(self, animal_id: int) -> list[HealthRecord]:
        if animal_id <= 0:
            return []
        return await self.find(lambda r: r.animal_id == animal_id)

    async def get_latest_for_animal(self, animal_id: int) -> HealthRecord | None:
        if animal_id <= 0:
            return None
        history = await self.find_and_sort(
            lambda r: r.animal_id == animal_id,
            lambda r: as_utc(r.record_date),
            ascending=False,
        )
        return history[0] if history else None

    async def get_latest_vaccination_for_animal(self, animal_id: int) -> HealthRecord | None:
        if animal_id <= 0:
            return None
        history = await self.find_and_sort(
            lambda r: r.animal_id == animal_id and r.is_vaccinated,
            lambda r: as_utc(r.record_date),
            ascending=False,
        )
        return history[0] if history else None

    async def get_by_date_range(self, start: datetime, end: datetime) -> list[HealthRecord]:
        if as_utc(start) > as_utc(end):
            raise ValidationError("Invalid date range: start is after end")
        first, last = start.date(), end.date()
        return await self.find(lambda r: first <= r.record_date.date() <= last)

    async def get_by_diagnosis(self, diagnosis: str) -> list[HealthRecord]:
        term = (diagnosis or "").strip().lower()
        if not term:
            return []
        return await self.find(lambda r: _contains(r.diagnosis, term))

    async def get_by_treatment(self, treatment: str) -> list[HealthRecord]:
        term = (treatment or "").strip().lower()
        if not term:
            return []
        return await self.find(lambda r: _contains(r.treatment, term))

    async def get_by_medication(self, medication: str) -> list[HealthRecord]:
        term = (medication or "").strip().lower()
        if not term:
            return []
        return await self.find(lambda r: _contains(r.medication, term))

    async def get_by_severity(self, severity: str) -> list[HealthRecord]:
        term = (severity or "").strip().lower()
        if not term:
            return []
        return await self.find(lambda r: r.severity.strip().lower() == term)

    async def get_by_vaccination_status(self, is_vaccinated: bool) -> list[HealthRecord]:
        return await self.find(lambda r: r.is_vaccinated == is_vaccinated)

    async def get_by_veterinarian(self, identifier: str) -> list[HealthRecord]:
        term = (identifier or "").strip().lower()
        if not term:
            return []
        return await self.find(
            lambda r: _contains(r.veterinarian_name, term)
            or r.veterinarian_id.strip().lower() == term
        )
