from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from shelter.domain.value_objects.adoption_status import AdoptionStatus


class AdoptionCreate(BaseModel):
    animal_id: int = Field(gt=0)
    customer_id: int = Field(gt=0)
    adoption_type: str = "Standard"
    employee_id: int | None = Field(None, gt=0)
    adoption_date: datetime | None = None
    notes: str = ""


class AdoptionDecision(BaseModel):
    employee_id: int = Field(gt=0)


class AdoptionCancel(BaseModel):
    employee_id: int = Field(gt=0)
    reason: str = Field(min_length=1)


class AdoptionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    animal_id: int
    customer_id: int
    employee_id: int | None
    application_date: datetime
    adoption_date: datetime | None
    status: AdoptionStatus
    adoption_type: str
    notes: str
    approval_date: datetime | None
    rejection_date: datetime | None
    completion_date: datetime | None


class AdoptionsPageResponse(BaseModel):
    items: list[AdoptionResponse]
    total: int
    page: int
    page_size: int
    total_pages: int
