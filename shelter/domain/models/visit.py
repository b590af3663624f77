from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from shelter.domain.value_objects.visit_status import VisitStatus

DEFAULT_VISIT_MINUTES = 30
VETERINARY_VISIT_TYPE = "Veterinary"


@dataclass(slots=True)
class Visit:
    id: int = 0
    animal_id: int = 0
    customer_id: int | None = None
    employee_id: int | None = None
    planned_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    actual_date: datetime | None = None
    planned_duration: int = DEFAULT_VISIT_MINUTES
    actual_duration: int | None = None
    visit_type: str = ""
    purpose: str = ""
    visitor: str = ""
    description: str = ""
    status: VisitStatus = VisitStatus.SCHEDULED
    is_veterinary_visit: bool = False
    resulted_in_adoption: bool = False
    notes: str = ""

    is_deleted: bool = False
    deleted_at: datetime | None = None

    @property
    def is_veterinary(self) -> bool:
        return self.is_veterinary_visit or self.visit_type.lower() == VETERINARY_VISIT_TYPE.lower()

    @property
    def last_seen(self) -> datetime:
        return self.actual_date or self.planned_date

    def is_upcoming(self, now: datetime) -> bool:
        planned = self.planned_date
        if planned.tzinfo is None:
            planned = planned.replace(tzinfo=timezone.utc)
        return planned > now and not VisitStatus(self.status).is_closed

    def complete(self, actual_date: datetime, actual_duration: int, notes: str = "") -> None:
        self.status = VisitStatus.COMPLETED
        self.actual_date = actual_date
        self.actual_duration = actual_duration
        if notes and notes.strip():
            self.notes = f"{self.notes}\n{notes}".strip() if self.notes.strip() else notes
