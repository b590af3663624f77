from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from shelter.domain.value_objects.adoption_status import AdoptionStatus


@dataclass(slots=True)
class Adoption:
    id: int = 0
    animal_id: int = 0
    customer_id: int = 0
    employee_id: int | None = None
    application_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    adoption_date: datetime | None = None
    status: AdoptionStatus = AdoptionStatus.PENDING
    adoption_type: str = "Standard"
    notes: str = ""
    approval_date: datetime | None = None
    rejection_date: datetime | None = None
    completion_date: datetime | None = None

    is_deleted: bool = False
    deleted_at: datetime | None = None

    @classmethod
    def create(
        cls,
        animal_id: int,
        customer_id: int,
        adoption_type: str = "Standard",
        employee_id: int | None = None,
        adoption_date: datetime | None = None,
        notes: str = "",
    ) -> Adoption:
        return cls(
            animal_id=animal_id,
            customer_id=customer_id,
            employee_id=employee_id,
            application_date=datetime.now(timezone.utc),
            adoption_date=adoption_date,
            status=AdoptionStatus.PENDING,
            adoption_type=adoption_type,
            notes=notes,
        )

    @property
    def is_open(self) -> bool:
        return self.status.is_open

    def approve(self, employee_id: int, when: datetime) -> None:
        self.status = AdoptionStatus.APPROVED
        self.approval_date = when
        self.employee_id = employee_id
        if self.adoption_date is None:
            self.adoption_date = when

    def reject(self, employee_id: int, when: datetime) -> None:
        self.status = AdoptionStatus.REJECTED
        self.rejection_date = when
        self.employee_id = employee_id

    def complete(self, when: datetime) -> None:
        self.status = AdoptionStatus.COMPLETED
        self.completion_date = when
        if self.adoption_date is None:
            self.adoption_date = when

    def cancel(self, employee_id: int, reason: str, when: datetime) -> None:
        self.status = AdoptionStatus.CANCELLED
        self.employee_id = employee_id
        self.append_note(
            f"[{when.isoformat(timespec='seconds')}] Cancelled by employee {employee_id}. "
            f"Reason: {reason}"
        )
        self.approval_date = None
        self.rejection_date = None
        self.completion_date = None
        self.adoption_date = None

    def append_note(self, line: str) -> None:
        # Notes are an audit trail; earlier lines are never rewritten.
        self.notes = f"{self.notes}\n{line}" if self.notes.strip() else line
