from __future__ import annotations

from enum import Enum


class AdoptionStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"

    @property
    def is_open(self) -> bool:
        return self in OPEN_STATUSES

    @property
    def is_terminal(self) -> bool:
        return not ALLOWED_TRANSITIONS[self]

    def can_transition_to(self, target: AdoptionStatus) -> bool:
        return target in ALLOWED_TRANSITIONS[self]


OPEN_STATUSES = frozenset({AdoptionStatus.PENDING, AdoptionStatus.APPROVED})

ALLOWED_TRANSITIONS: dict[AdoptionStatus, frozenset[AdoptionStatus]] = {
    AdoptionStatus.PENDING: frozenset(
        {AdoptionStatus.APPROVED, AdoptionStatus.REJECTED, AdoptionStatus.CANCELLED}
    ),
    AdoptionStatus.APPROVED: frozenset({AdoptionStatus.COMPLETED, AdoptionStatus.CANCELLED}),
    AdoptionStatus.REJECTED: frozenset(),
    AdoptionStatus.COMPLETED: frozenset(),
    AdoptionStatus.CANCELLED: frozenset(),
}
