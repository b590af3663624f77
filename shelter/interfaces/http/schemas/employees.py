from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class EmployeeCreate(BaseModel):
    first_name: str
    last_name: str
    email: str
    phone: str
    position: str
    department: str = ""
    specializations: list[str] = Field(default_factory=list)
    salary: float = Field(0.0, ge=0)
    hire_date: datetime
    picture_url: str | None = None


class EmployeeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str
    last_name: str
    email: str
    phone: str
    position: str
    department: str
    specializations: list[str]
    salary: float
    hire_date: datetime
    picture_url: str | None = None
