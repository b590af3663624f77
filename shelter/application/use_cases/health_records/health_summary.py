from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from shelter.application.interfaces.stores import ShelterStores
from shelter.application.use_cases.adoptions.common import utcnow
from shelter.application.use_cases.health_records.common import load_animal
from shelter.application.use_cases.health_records.queries import vaccination_due
from shelter.application.validation import as_utc
from shelter.domain.models.animal import Animal
from shelter.domain.models.health_record import VACCINATION_DIAGNOSIS, HealthRecord
from shelter.domain.models.visit import Visit
from shelter.domain.value_objects.animal_status import AnimalStatus
from shelter.domain.value_objects.visit_status import VisitStatus

ROUTINE_DIAGNOSES = frozenset({VACCINATION_DIAGNOSIS.lower(), "routine check"})


@dataclass(slots=True)
class AnimalHealthSummary:
    animal: Animal
    latest_record: HealthRecord | None
    next_vaccination_date: datetime | None
    needs_vaccination: bool
    health_status: str
    upcoming_visits: list[Visit] = field(default_factory=list)
    past_visits: list[Visit] = field(default_factory=list)
    alerts: list[str] = field(default_factory=list)


def _health_status(animal: Animal, latest: HealthRecord | None, now: datetime) -> str:
    status = AnimalStatus(animal.status)
    if status in (AnimalStatus.DECEASED, AnimalStatus.ADOPTED, AnimalStatus.RESERVED):
        return status.value
    if latest is None:
        return "Unknown (no health records)"
    if vaccination_due(latest, now.date()):
        return "Vaccination due"
    severity = latest.severity.lower()
    if "critical" in severity:
        return "Critical"
    if "serious" in severity:
        return "Serious"
    diagnosis = latest.diagnosis.lower()
    if "ill" in diagnosis or "injur" in diagnosis:
        return "Under observation"
    if status == AnimalStatus.IN_TREATMENT:
        return "In treatment"
    return "Healthy"


def _alerts(
    animal: Animal, latest: HealthRecord | None, upcoming: list[Visit], now: datetime
) -> list[str]:
    alerts: list[str] = []
    if animal.status == AnimalStatus.IN_TREATMENT:
        alerts.append("Animal is marked as in treatment.")
    if vaccination_due(latest, now.date()):
        alerts.append(
            f"Vaccination due (next: {as_utc(latest.next_vaccination_date):%d-%m-%Y})"
        )
    elif latest is None or not latest.is_vaccinated:
        alerts.append("Vaccination status unknown or primary vaccination missing.")
    if latest is not None:
        severity = latest.severity.lower()
        if "critical" in severity:
            alerts.append(f"Critical condition noted: {latest.diagnosis}")
        elif "serious" in severity:
            alerts.append(f"Serious condition noted: {latest.diagnosis}")
        if latest.diagnosis.strip() and latest.diagnosis.strip().lower() not in ROUTINE_DIAGNOSES:
            alerts.append(f"Latest diagnosis: {latest.diagnosis}")
    vet_visits = [visit for visit in upcoming if visit.is_veterinary]
    if vet_visits:
        alerts.append(f"{len(vet_visits)} upcoming veterinary visit(s) planned.")
    return alerts or ["No health alerts."]


async def execute(
    stores: ShelterStores, animal_id: int, now: datetime | None = None
) -> AnimalHealthSummary:
    now = now or utcnow()
    animal = await load_animal(stores, animal_id)
    latest = await stores.health_records.get_latest_for_animal(animal_id)
    visits = await stores.visits.get_by_animal_id(animal_id)

    upcoming = sorted(
        (visit for visit in visits if visit.is_upcoming(now)),
        key=lambda visit: as_utc(visit.planned_date),
    )
    past = sorted(
        (
            visit
            for visit in visits
            if VisitStatus(visit.status).is_closed
            or (visit.actual_date is not None and as_utc(visit.actual_date) <= now)
        ),
        key=lambda visit: as_utc(visit.last_seen),
        reverse=True,
    )
    return AnimalHealthSummary(
        animal=animal,
        latest_record=latest,
        next_vaccination_date=latest.next_vaccination_date if latest else None,
        needs_vaccination=latest is None or vaccination_due(latest, now.date()),
        health_status=_health_status(animal, latest, now),
        upcoming_visits=upcoming,
        past_visits=past,
        alerts=_alerts(animal, latest, upcoming, now),
    )
