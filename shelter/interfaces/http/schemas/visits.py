from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from shelter.domain.models.visit import DEFAULT_VISIT_MINUTES
from shelter.domain.value_objects.visit_status import VisitStatus


class VisitCreate(BaseModel):
    animal_id: int = Field(gt=0)
    customer_id: int | None = Field(None, gt=0)
    employee_id: int | None = Field(None, gt=0)
    planned_date: datetime
    planned_duration: int = Field(DEFAULT_VISIT_MINUTES, ge=0)
    visit_type: str = Field(min_length=1)
    purpose: str = ""
    visitor: str = ""
    description: str = ""
    is_veterinary_visit: bool = False
    notes: str = ""
    status: VisitStatus = VisitStatus.SCHEDULED


class VisitCompletion(BaseModel):
    actual_date: datetime
    actual_duration: int = Field(gt=0)
    notes: str = ""


class VisitResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    animal_id: int
    customer_id: int | None
    employee_id: int | None
    planned_date: datetime
    actual_date: datetime | None
    planned_duration: int
    actual_duration: int | None
    visit_type: str
    purpose: str
    visitor: str
    description: str
    status: VisitStatus
    is_veterinary_visit: bool
    resulted_in_adoption: bool
    notes: str
