from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

VACCINATION_DIAGNOSIS = "Vaccination"


@dataclass(slots=True)
class HealthRecord:
    id: int = 0
    animal_id: int = 0
    record_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    appointment_date: datetime | None = None
    veterinarian_name: str = ""
    veterinarian_id: str = ""
    record_type: str = ""
    diagnosis: str = ""
    treatment: str = ""
    medication: str = ""
    weight: float = 0.0
    notes: str = ""
    severity: str = ""
    is_vaccinated: bool = False
    next_vaccination_date: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None

    is_deleted: bool = False
    deleted_at: datetime | None = None

    def add_medication(self, medication: str, when: datetime) -> None:
        self.medication = f"{self.medication}, {medication}" if self.medication.strip() else medication
        self.updated_at = when

    def set_severity(self, severity: str, when: datetime) -> None:
        self.severity = severity
        self.updated_at = when

    def append_note(self, line: str) -> None:
        self.notes = f"{self.notes}\n{line}".strip() if self.notes.strip() else line
