from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(slots=True)
class Employee:
    id: int = 0
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    position: str = ""
    department: str = ""
    specializations: list[str] = field(default_factory=list)
    salary: float = 0.0
    hire_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    picture_url: str | None = None
    registration_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    is_deleted: bool = False
    deleted_at: datetime | None = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
