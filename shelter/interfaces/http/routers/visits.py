from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from shelter.application.use_cases.visits import (
    cancel_visit,
    complete_visit,
    confirm_visit,
    create_visit,
    delete_visit,
    queries,
    waitlist_visit,
)
from shelter.application.use_cases.visits.common import load_visit
from shelter.domain.models.visit import Visit
from shelter.domain.value_objects.visit_status import VisitStatus
from shelter.interfaces.http.deps import get_stores
from shelter.interfaces.http.schemas.visits import VisitCompletion, VisitCreate, VisitResponse

router = APIRouter(prefix="/visits", tags=["visits"])


@router.get("/", response_model=list[VisitResponse])
async def list_visits_endpoint(
    animal_id: int | None = Query(None, ge=1),
    status_filter: VisitStatus | None = Query(None, alias="status"),
    stores=Depends(get_stores),
):
    if animal_id is not None:
        visits = await queries.for_animal(stores, animal_id)
    else:
        visits = await queries.all_visits(stores)
    if status_filter is not None:
        visits = [visit for visit in visits if visit.status == status_filter]
    return [VisitResponse.model_validate(visit) for visit in visits]


@router.get("/{visit_id}", response_model=VisitResponse)
async def get_visit_endpoint(visit_id: int, stores=Depends(get_stores)):
    return VisitResponse.model_validate(await load_visit(stores, visit_id))


@router.post("/", response_model=VisitResponse, status_code=status.HTTP_201_CREATED)
async def create_visit_endpoint(payload: VisitCreate, stores=Depends(get_stores)):
    created = await create_visit.execute(stores, Visit(**payload.model_dump()))
    return VisitResponse.model_validate(created)


@router.post("/{visit_id}/confirm", response_model=VisitResponse)
async def confirm_visit_endpoint(visit_id: int, stores=Depends(get_stores)):
    return VisitResponse.model_validate(await confirm_visit.execute(stores, visit_id))


@router.post("/{visit_id}/waitlist", response_model=VisitResponse)
async def waitlist_visit_endpoint(visit_id: int, stores=Depends(get_stores)):
    return VisitResponse.model_validate(await waitlist_visit.execute(stores, visit_id))


@router.post("/{visit_id}/cancel", response_model=VisitResponse)
async def cancel_visit_endpoint(visit_id: int, stores=Depends(get_stores)):
    return VisitResponse.model_validate(await cancel_visit.execute(stores, visit_id))


@router.post("/{visit_id}/complete", response_model=VisitResponse)
async def complete_visit_endpoint(
    visit_id: int, payload: VisitCompletion, stores=Depends(get_stores)
):
    visit = await complete_visit.execute(
        stores, visit_id, payload.actual_date, payload.actual_duration, payload.notes
    )
    return VisitResponse.model_validate(visit)


@router.delete("/{visit_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_visit_endpoint(visit_id: int, stores=Depends(get_stores)) -> Response:
    await delete_visit.execute(stores, visit_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
