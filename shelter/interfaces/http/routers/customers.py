from __future__ import annotations

from fastapi import APIRouter, Depends, status

from shelter.application.errors import NotFound
from shelter.domain.models.customer import Customer
from shelter.interfaces.http.deps import get_stores
from shelter.interfaces.http.schemas.customers import CustomerCreate, CustomerResponse

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("/", response_model=list[CustomerResponse])
async def list_customers(stores=Depends(get_stores)):
    items = await stores.customers.get_all()
    return [CustomerResponse.model_validate(item) for item in items]


@router.get("/{customer_id}", response_model=CustomerResponse)
async def get_customer(customer_id: int, stores=Depends(get_stores)):
    customer = await stores.customers.get_by_id(customer_id)
    if customer is None:
        raise NotFound(f"Customer {customer_id} not found")
    return CustomerResponse.model_validate(customer)


@router.post("/", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
async def create_customer(payload: CustomerCreate, stores=Depends(get_stores)):
    created = await stores.customers.add(Customer(**payload.model_dump()))
    return CustomerResponse.model_validate(created)
