from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query, Response, status

from shelter.application.errors import InvalidStateTransition, NotFound
from shelter.config.settings import Settings
from shelter.domain.models.animal import Animal
from shelter.domain.value_objects.animal_status import AnimalStatus
from shelter.domain.value_objects.species import Species
from shelter.interfaces.http.deps import get_app_settings, get_stores, resolve_page_size
from shelter.interfaces.http.schemas.animals import (
    AnimalCreate,
    AnimalResponse,
    AnimalsPageResponse,
    AnimalUpdate,
)

router = APIRouter(prefix="/animals", tags=["animals"])


@router.get("/", response_model=AnimalsPageResponse)
async def list_animals(
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1),
    status_filter: AnimalStatus | None = Query(None, alias="status"),
    species: Species | None = Query(None),
    q: str | None = Query(None, description="Case-insensitive name search"),
    settings: Settings = Depends(get_app_settings),
    stores=Depends(get_stores),
) -> AnimalsPageResponse:
    checks = []
    if status_filter is not None:
        checks.append(lambda a: a.status == status_filter)
    if species is not None:
        checks.append(lambda a: a.species == species)
    if q:
        term = q.strip().lower()
        checks.append(lambda a: term in a.name.lower())

    size = resolve_page_size(settings, page_size)
    result = await stores.animals.get_paged(
        page, size, (lambda a: all(check(a) for check in checks)) if checks else None
    )
    return AnimalsPageResponse(
        items=[AnimalResponse.model_validate(item) for item in result.items],
        total=result.total_count,
        page=result.page_number,
        page_size=result.page_size,
        total_pages=result.total_pages,
    )


@router.get("/{animal_id}", response_model=AnimalResponse)
async def get_animal(animal_id: int, stores=Depends(get_stores)):
    animal = await stores.animals.get_by_id(animal_id)
    if animal is None:
        raise NotFound(f"Animal {animal_id} not found")
    return AnimalResponse.model_validate(animal)


@router.post("/", response_model=AnimalResponse, status_code=status.HTTP_201_CREATED)
async def create_animal(payload: AnimalCreate, stores=Depends(get_stores)):
    animal = Animal(
        name=payload.name,
        species=payload.species,
        breed=payload.breed,
        birth_date=payload.birth_date,
        gender=payload.gender,
        description=payload.description,
        intake_date=payload.intake_date or datetime.now(timezone.utc),
        weight=payload.weight,
        health_status=payload.health_status,
        picture_url=payload.picture_url,
    )
    created = await stores.animals.add(animal)
    return AnimalResponse.model_validate(created)


@router.put("/{animal_id}", response_model=AnimalResponse)
async def update_animal(animal_id: int, payload: AnimalUpdate, stores=Depends(get_stores)):
    animal = await stores.animals.get_by_id(animal_id)
    if animal is None:
        raise NotFound(f"Animal {animal_id} not found")
    if (payload.status == AnimalStatus.ADOPTED) != (animal.status == AnimalStatus.ADOPTED):
        raise InvalidStateTransition(
            "Adopted status is only changed through the adoption workflow",
            details={"from": AnimalStatus(animal.status).value, "to": payload.status.value},
        )
    for field_name, value in payload.model_dump().items():
        setattr(animal, field_name, value)
    updated = await stores.animals.update(animal)
    return AnimalResponse.model_validate(updated)


@router.delete("/{animal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_animal(animal_id: int, stores=Depends(get_stores)) -> Response:
    await stores.animals.delete(animal_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
