from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from shelter.interfaces.http.schemas.animals import AnimalResponse
from shelter.interfaces.http.schemas.visits import VisitResponse


class HealthRecordCreate(BaseModel):
    record_date: datetime | None = None
    appointment_date: datetime | None = None
    veterinarian_name: str = ""
    veterinarian_id: str = ""
    record_type: str = ""
    diagnosis: str = Field(min_length=1)
    treatment: str = ""
    medication: str = ""
    weight: float = Field(0.0, ge=0)
    notes: str = ""
    severity: str = ""
    is_vaccinated: bool = False
    next_vaccination_date: datetime | None = None


class VaccinationCreate(BaseModel):
    vaccination_date: datetime
    next_vaccination_date: datetime | None = None
    veterinarian_name: str = ""
    notes: str = ""


class HealthRecordResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    animal_id: int
    record_date: datetime
    appointment_date: datetime | None
    veterinarian_name: str
    veterinarian_id: str
    record_type: str
    diagnosis: str
    treatment: str
    medication: str
    weight: float
    notes: str
    severity: str
    is_vaccinated: bool
    next_vaccination_date: datetime | None
    created_at: datetime
    updated_at: datetime | None


class HealthSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    animal: AnimalResponse
    latest_record: HealthRecordResponse | None
    next_vaccination_date: datetime | None
    needs_vaccination: bool
    health_status: str
    upcoming_visits: list[VisitResponse]
    past_visits: list[VisitResponse]
    alerts: list[str]
