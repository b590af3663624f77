from __future__ import annotations

from enum import Enum


class VisitStatus(str, Enum):
    SCHEDULED = "Scheduled"
    CONFIRMED = "Confirmed"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"
    WAITLISTED = "Waitlisted"

    @property
    def is_closed(self) -> bool:
        return not VISIT_TRANSITIONS[self]

    def can_transition_to(self, target: VisitStatus) -> bool:
        return target in VISIT_TRANSITIONS[self]


VISIT_TRANSITIONS: dict[VisitStatus, frozenset[VisitStatus]] = {
    VisitStatus.SCHEDULED: frozenset(
        {
            VisitStatus.CONFIRMED,
            VisitStatus.WAITLISTED,
            VisitStatus.CANCELLED,
            VisitStatus.COMPLETED,
        }
    ),
    VisitStatus.WAITLISTED: frozenset(
        {VisitStatus.CONFIRMED, VisitStatus.CANCELLED, VisitStatus.COMPLETED}
    ),
    VisitStatus.CONFIRMED: frozenset({VisitStatus.CANCELLED, VisitStatus.COMPLETED}),
    VisitStatus.COMPLETED: frozenset(),
    VisitStatus.CANCELLED: frozenset(),
}
