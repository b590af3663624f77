from __future__ import annotations

from fastapi import APIRouter, Depends, status

from shelter.application.errors import NotFound
from shelter.domain.models.employee import Employee
from shelter.interfaces.http.deps import get_stores
from shelter.interfaces.http.schemas.employees import EmployeeCreate, EmployeeResponse

router = APIRouter(prefix="/employees", tags=["employees"])


@router.get("/", response_model=list[EmployeeResponse])
async def list_employees(stores=Depends(get_stores)):
    items = await stores.employees.get_all()
    return [EmployeeResponse.model_validate(item) for item in items]


@router.get("/{employee_id}", response_model=EmployeeResponse)
async def get_employee(employee_id: int, stores=Depends(get_stores)):
    employee = await stores.employees.get_by_id(employee_id)
    if employee is None:
        raise NotFound(f"Employee {employee_id} not found")
    return EmployeeResponse.model_validate(employee)


@router.post("/", response_model=EmployeeResponse, status_code=status.HTTP_201_CREATED)
async def create_employee(payload: EmployeeCreate, stores=Depends(get_stores)):
    created = await stores.employees.add(Employee(**payload.model_dump()))
    return EmployeeResponse.model_validate(created)
