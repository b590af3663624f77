from __future__ import annotations

from datetime import datetime
from typing import Protocol

from shelter.application.interfaces.repositories.base import EntityStore
from shelter.domain.models.customer import Customer


class CustomerRepository(EntityStore[Customer], Protocol):
    async def search_by_name(self, name: str) -> list[Customer]: ...

    async def get_by_email(self, email: str) -> Customer | None: ...

    async def get_by_phone(self, phone: str) -> list[Customer]: ...

    async def get_by_city(self, city: str) -> list[Customer]: ...

    async def get_by_postal_code(self, postal_code: str) -> list[Customer]: ...

    async def get_by_registration_range(
        self, start: datetime, end: datetime
    ) -> list[Customer]: ...
