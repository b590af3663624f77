from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status

from shelter.application.use_cases.adoptions import (
    approve_adoption,
    cancel_adoption,
    complete_adoption,
    create_adoption,
    delete_adoption,
    get_adoption,
    list_adoptions,
    reject_adoption,
)
from shelter.application.use_cases.adoptions.create_adoption import CreateAdoptionInput
from shelter.config.settings import Settings
from shelter.domain.value_objects.adoption_status import AdoptionStatus
from shelter.interfaces.http.deps import get_app_settings, get_stores, resolve_page_size
from shelter.interfaces.http.schemas.adoptions import (
    AdoptionCancel,
    AdoptionCreate,
    AdoptionDecision,
    AdoptionResponse,
    AdoptionsPageResponse,
)

router = APIRouter(prefix="/adoptions", tags=["adoptions"])


@router.get("/", response_model=AdoptionsPageResponse)
async def list_adoptions_endpoint(
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1),
    status_filter: AdoptionStatus | None = Query(None, alias="status"),
    settings: Settings = Depends(get_app_settings),
    stores=Depends(get_stores),
) -> AdoptionsPageResponse:
    result = await list_adoptions.execute(
        stores, page, resolve_page_size(settings, page_size), status=status_filter
    )
    return AdoptionsPageResponse(
        items=[AdoptionResponse.model_validate(item) for item in result.items],
        total=result.total_count,
        page=result.page_number,
        page_size=result.page_size,
        total_pages=result.total_pages,
    )


@router.get("/{adoption_id}", response_model=AdoptionResponse)
async def get_adoption_endpoint(adoption_id: int, stores=Depends(get_stores)):
    adoption = await get_adoption.execute(stores, adoption_id)
    return AdoptionResponse.model_validate(adoption)


@router.post("/", response_model=AdoptionResponse, status_code=status.HTTP_201_CREATED)
async def create_adoption_endpoint(payload: AdoptionCreate, stores=Depends(get_stores)):
    created = await create_adoption.execute(stores, CreateAdoptionInput(**payload.model_dump()))
    return AdoptionResponse.model_validate(created)


@router.post("/{adoption_id}/approve", response_model=AdoptionResponse)
async def approve_adoption_endpoint(
    adoption_id: int, payload: AdoptionDecision, stores=Depends(get_stores)
):
    adoption = await approve_adoption.execute(stores, adoption_id, payload.employee_id)
    return AdoptionResponse.model_validate(adoption)


@router.post("/{adoption_id}/reject", response_model=AdoptionResponse)
async def reject_adoption_endpoint(
    adoption_id: int, payload: AdoptionDecision, stores=Depends(get_stores)
):
    adoption = await reject_adoption.execute(stores, adoption_id, payload.employee_id)
    return AdoptionResponse.model_validate(adoption)


@router.post("/{adoption_id}/complete", response_model=AdoptionResponse)
async def complete_adoption_endpoint(adoption_id: int, stores=Depends(get_stores)):
    adoption = await complete_adoption.execute(stores, adoption_id)
    return AdoptionResponse.model_validate(adoption)


@router.post("/{adoption_id}/cancel", response_model=AdoptionResponse)
async def cancel_adoption_endpoint(
    adoption_id: int, payload: AdoptionCancel, stores=Depends(get_stores)
):
    adoption = await cancel_adoption.execute(
        stores, adoption_id, payload.employee_id, payload.reason
    )
    return AdoptionResponse.model_validate(adoption)


@router.delete("/{adoption_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_adoption_endpoint(adoption_id: int, stores=Depends(get_stores)) -> Response:
    await delete_adoption.execute(stores, adoption_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
