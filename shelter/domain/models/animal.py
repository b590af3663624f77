from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone

from shelter.domain.value_objects.animal_status import AnimalStatus
from shelter.domain.value_objects.species import Species


@dataclass(slots=True)
class Animal:
    id: int = 0
    name: str = ""
    species: Species = Species.OTHER
    breed: str = ""
    birth_date: date | None = None
    gender: str = ""
    description: str = ""
    intake_date: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    weight: float = 0.0
    health_status: str = ""
    status: AnimalStatus = AnimalStatus.AVAILABLE
    is_adopted: bool = False
    adoption_date: datetime | None = None
    adopted_by_customer_id: int | None = None
    picture_url: str | None = None

    is_deleted: bool = False
    deleted_at: datetime | None = None

    def mark_adopted(self, customer_id: int, when: datetime) -> None:
        self.status = AnimalStatus.ADOPTED
        self.is_adopted = True
        self.adoption_date = when
        self.adopted_by_customer_id = customer_id

    def release(self) -> None:
        """Make the animal available again and drop any adoption linkage."""
        self.status = AnimalStatus.AVAILABLE
        self.is_adopted = False
        self.adoption_date = None
        self.adopted_by_customer_id = None

    def is_adopted_by(self, customer_id: int) -> bool:
        return (
            self.status == AnimalStatus.ADOPTED
            and self.adoption_date is not None
            and self.adopted_by_customer_id == customer_id
        )

    def age_in_years(self, today: date | None = None) -> int:
        if self.birth_date is None:
            return 0
        today = today or date.today()
        years = today.year - self.birth_date.year
        if (today.month, today.day) < (self.birth_date.month, self.birth_date.day):
            years -= 1
        return years

    def age_in_months(self, today: date | None = None) -> int:
        if self.birth_date is None:
            return 0
        today = today or date.today()
        months = (today.year - self.birth_date.year) * 12 + today.month - self.birth_date.month
        if today.day < self.birth_date.day:
            months -= 1
        return months

    def age_in_days(self, today: date | None = None) -> int:
        if self.birth_date is None:
            return 0
        today = today or date.today()
        return (today - self.birth_date).days

    def age_in_weeks(self, today: date | None = None) -> int:
        return self.age_in_days(today) // 7

    def formatted_age(self, today: date | None = None) -> str:
        if self.birth_date is None:
            return "Unknown age"
        days = self.age_in_days(today)
        if days < 7:
            return f"{days} days"
        weeks = self.age_in_weeks(today)
        if weeks < 4:
            return f"{weeks} weeks"
        months = self.age_in_months(today)
        if months < 12:
            return f"{months} months"
        return f"{self.age_in_years(today)} years"
