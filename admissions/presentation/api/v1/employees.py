"""Employee API endpoints (Admin only)."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from admissions.application.dtos.employee_dto import (
    CreateEmployeeDTO,
    EditEmployeeDTO,
    EmployeeDTO,
    EmployeeFilterDTO,
)
from admissions.application.dtos.user_dto import UserDTO
from admissions.application.services.employee_service import EmployeeService
from admissions.presentation.dependencies import get_employee_service, require_admin

router = APIRouter(prefix="/employees", tags=["employees"])


@router.post(
    "",
    response_model=EmployeeDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create an employee",
    description="Create a staff account and employee profile. The Admin role cannot be granted.",
)
async def create_employee(
    dto: CreateEmployeeDTO,
    current_user: UserDTO = Depends(require_admin),
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeDTO:
    return await service.create_employee(dto, actor_id=current_user.id)


@router.get("", response_model=list[EmployeeDTO], summary="List employees")
async def list_employees(
    filters: Annotated[EmployeeFilterDTO, Query()],
    current_user: UserDTO = Depends(require_admin),
    service: EmployeeService = Depends(get_employee_service),
) -> list[EmployeeDTO]:
    return await service.list_employees(filters, skip=filters.skip, limit=filters.limit)


@router.get("/{employee_id}", response_model=EmployeeDTO, summary="Get employee by ID")
async def get_employee(
    employee_id: UUID,
    current_user: UserDTO = Depends(require_admin),
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeDTO:
    return await service.get_employee(employee_id)


@router.patch(
    "",
    response_model=EmployeeDTO,
    summary="Edit an employee",
    description="Partial update; omitted fields are left unchanged.",
)
async def edit_employee(
    dto: EditEmployeeDTO,
    current_user: UserDTO = Depends(require_admin),
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeDTO:
    return await service.edit_employee(dto, actor_id=current_user.id)
