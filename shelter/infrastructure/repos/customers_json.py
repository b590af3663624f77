from __future__ import annotations

from datetime import datetime
from pathlib import Path

from shelter.application.errors import ConflictError, ValidationError
from shelter.application.interfaces.repositories.customers import CustomerRepository
from shelter.application.validation import EMAIL_RE, as_utc, validate_customer
from shelter.domain.models.customer import Customer
from shelter.infrastructure.storage.json_store import JsonFileStore


def _digits(value: str) -> str:
    return "".join(ch for ch in value if ch.isdigit())


def ensure_unique_email(record: Customer, others: list[Customer]) -> None:
    email = record.email.strip().lower()
    if any(other.email.strip().lower() == email for other in others):
        raise ConflictError(
            f"Email {record.email} is already registered", details={"field": "email"}
        )


class CustomersJsonRepository(JsonFileStore[Customer], CustomerRepository):
    def __init__(self, file_path: str | Path) -> None:
        super().__init__(
            file_path, Customer, validator=validate_customer, conflict_check=ensure_unique_email
        )

    async def update(self, entity: Customer) -> Customer:
        existing = await self.get_by_id(entity.id) if entity is not None else None
        if existing is not None:
            entity.registration_date = existing.registration_date
        return await super().update(entity)

    async def search_by_name(self, name: str) -> list[Customer]:
        term = (name or "").strip().lower()
        if not term:
            return await self.get_all()
        return await self.find(lambda c: term in c.full_name.lower())

    async def get_by_email(self, email: str) -> Customer | None:
        email = (email or "").strip().lower()
        if not email or not EMAIL_RE.match(email):
            return None
        matches = await self.find(lambda c: c.email.strip().lower() == email)
        return matches[0] if matches else None

    async def get_by_phone(self, phone: str) -> list[Customer]:
        digits = _digits(phone or "")
        if not digits:
            return []
        return await self.find(lambda c: _digits(c.phone).endswith(digits))

    async def get_by_city(self, city: str) -> list[Customer]:
        term = (city or "").strip().lower()
        if not term:
            return []
        return await self.find(lambda c: c.city.lower() == term)

    async def get_by_postal_code(self, postal_code: str) -> list[Customer]:
        code = (postal_code or "").strip()
        if not code:
            return []
        return await self.find(lambda c: c.postal_code == code)

    async def get_by_registration_range(
        self, start: datetime, end: datetime
    ) -> list[Customer]:
        start, end = as_utc(start), as_utc(end)
        if start > end:
            raise ValidationError("Invalid registration date range: start is after end")
        return await self.find(lambda c: start <= as_utc(c.registration_date) <= end)
