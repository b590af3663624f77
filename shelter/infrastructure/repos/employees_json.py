from __future__ import annotations

from pathlib import Path

from shelter.application.errors import ConflictError
from shelter.application.interfaces.repositories.employees import EmployeeRepository
from shelter.application.validation import EMAIL_RE, validate_employee
from shelter.domain.models.employee import Employee
from shelter.infrastructure.storage.json_store import JsonFileStore


def ensure_unique_email(record: Employee, others: list[Employee]) -> None:
    email = record.email.strip().lower()
    if any(other.email.strip().lower() == email for other in others):
        raise ConflictError(
            f"Email {record.email} is already used by another employee",
            details={"field": "email"},
        )


class EmployeesJsonRepository(JsonFileStore[Employee], EmployeeRepository):
    def __init__(self, file_path: str | Path) -> None:
        super().__init__(
            file_path, Employee, validator=validate_employee, conflict_check=ensure_unique_email
        )

    async def get_by_email(self, email: str) -> Employee | None:
        email = (email or "").strip().lower()
        if not email or not EMAIL_RE.match(email):
            return None
        matches = await self.find(lambda e: e.email.strip().lower() == email)
        return matches[0] if matches else None

    async def search_by_name(self, name: str) -> list[Employee]:
        term = (name or "").strip().lower()
        if not term:
            return await self.get_all()
        return await self.find(lambda e: term in e.full_name.lower())

    async def get_by_position(self, position: str) -> list[Employee]:
        term = (position or "").strip().lower()
        if not term:
            return []
        return await self.find(lambda e: e.position.lower() == term)

    async def get_by_department(self, department: str) -> list[Employee]:
        term = (department or "").strip().lower()
        if not term:
            return []
        return await self.find(lambda e: e.department.lower() == term)

    async def get_by_specialization(self, specialization: str) -> list[Employee]:
        term = (specialization or "").strip().lower()
        if not term:
            return []
        return await self.find(lambda e: any(s.lower() == term for s in e.specializations))
