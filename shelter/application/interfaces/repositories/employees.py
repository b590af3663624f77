from __future__ import annotations

from typing import Protocol

from shelter.application.interfaces.repositories.base import EntityStore
from shelter.domain.models.employee import Employee


class EmployeeRepository(EntityStore[Employee], Protocol):
    async def get_by_email(self, email: str) -> Employee | None: ...

    async def search_by_name(self, name: str) -> list[Employee]: ...

    async def get_by_position(self, position: str) -> list[Employee]: ...

    async def get_by_department(self, department: str) -> list[Employee]: ...

    async def get_by_specialization(self, specialization: str) -> list[Employee]: ...
