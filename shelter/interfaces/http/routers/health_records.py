from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from shelter.application.use_cases.adoptions.common import utcnow
from shelter.application.use_cases.health_records import (
    add_health_record,
    delete_health_record,
    health_summary,
    queries,
    register_vaccination,
)
from shelter.domain.models.health_record import HealthRecord
from shelter.interfaces.http.deps import get_stores
from shelter.interfaces.http.schemas.animals import AnimalResponse
from shelter.interfaces.http.schemas.health_records import (
    HealthRecordCreate,
    HealthRecordResponse,
    HealthSummaryResponse,
    VaccinationCreate,
)

router = APIRouter(prefix="/health-records", tags=["health-records"])


@router.get("/needing-vaccination", response_model=list[AnimalResponse])
async def needing_vaccination_endpoint(stores=Depends(get_stores)):
    animals = await queries.animals_needing_vaccination(stores, utcnow().date())
    return [AnimalResponse.model_validate(animal) for animal in animals]


@router.get("/animal/{animal_id}", response_model=list[HealthRecordResponse])
async def list_for_animal_endpoint(animal_id: int, stores=Depends(get_stores)):
    records = await queries.for_animal(stores, animal_id)
    return [HealthRecordResponse.model_validate(record) for record in records]


@router.get("/animal/{animal_id}/summary", response_model=HealthSummaryResponse)
async def summary_endpoint(animal_id: int, stores=Depends(get_stores)):
    return HealthSummaryResponse.model_validate(await health_summary.execute(stores, animal_id))


@router.post(
    "/animal/{animal_id}",
    response_model=HealthRecordResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_record_endpoint(
    animal_id: int, payload: HealthRecordCreate, stores=Depends(get_stores)
):
    values = payload.model_dump(exclude_none=True)
    now = utcnow()
    values.setdefault("record_date", now)
    record = HealthRecord(animal_id=animal_id, created_at=now, **values)
    created = await add_health_record.execute(stores, animal_id, record)
    return HealthRecordResponse.model_validate(created)


@router.post(
    "/animal/{animal_id}/vaccinations",
    response_model=HealthRecordResponse,
    status_code=status.HTTP_201_CREATED,
)
async def vaccination_endpoint(
    animal_id: int, payload: VaccinationCreate, stores=Depends(get_stores)
):
    record = await register_vaccination.execute(
        stores,
        animal_id,
        payload.vaccination_date,
        next_vaccination_date=payload.next_vaccination_date,
        notes=payload.notes,
        veterinarian_name=payload.veterinarian_name,
    )
    return HealthRecordResponse.model_validate(record)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_record_endpoint(record_id: int, stores=Depends(get_stores)) -> Response:
    await delete_health_record.execute(stores, record_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
