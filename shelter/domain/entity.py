from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class Entity(Protocol):
    id: int


@runtime_checkable
class SoftDeletable(Protocol):
    is_deleted: bool
    deleted_at: datetime | None


def supports_soft_delete(record: object) -> bool:
    return hasattr(record, "is_deleted") and hasattr(record, "deleted_at")


def is_soft_deleted(record: object) -> bool:
    return supports_soft_delete(record) and bool(getattr(record, "is_deleted"))


def is_active(record: object) -> bool:
    return not is_soft_deleted(record)
