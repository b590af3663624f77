from __future__ import annotations

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field

from shelter.domain.value_objects.animal_status import AnimalStatus
from shelter.domain.value_objects.species import Species


class AnimalBase(BaseModel):
    name: str
    species: Species
    breed: str = ""
    birth_date: date | None = None
    gender: str = ""
    description: str = ""
    weight: float = Field(0.0, ge=0)
    health_status: str = ""
    picture_url: str | None = None


class AnimalCreate(AnimalBase):
    intake_date: datetime | None = None


class AnimalUpdate(AnimalBase):
    status: AnimalStatus = AnimalStatus.AVAILABLE


class AnimalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    species: Species
    breed: str
    birth_date: date | None
    gender: str
    description: str
    intake_date: datetime
    weight: float
    health_status: str
    status: AnimalStatus
    is_adopted: bool
    adoption_date: datetime | None = None
    adopted_by_customer_id: int | None = None
    picture_url: str | None = None


class AnimalsPageResponse(BaseModel):
    items: list[AnimalResponse]
    total: int
    page: int
    page_size: int
    total_pages: int
