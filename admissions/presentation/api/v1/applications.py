"""Application API endpoints (any employee role)."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from admissions.application.dtos.application_dto import (
    ApplicationDTO,
    ApplicationFilterDTO,
    CreateApplicationDTO,
    EditApplicationDTO,
)
from admissions.application.dtos.user_dto import UserDTO
from admissions.application.services.application_service import ApplicationService
from admissions.presentation.dependencies import get_application_service, require_employee

router = APIRouter(prefix="/applications", tags=["applications"])


@router.post(
    "",
    response_model=ApplicationDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Open an application for a student",
)
async def create_application(
    dto: CreateApplicationDTO,
    current_user: UserDTO = Depends(require_employee),
    service: ApplicationService = Depends(get_application_service),
) -> ApplicationDTO:
    return await service.create_application(dto, actor_id=current_user.id)


@router.get("", response_model=list[ApplicationDTO], summary="List applications")
async def list_applications(
    filters: Annotated[ApplicationFilterDTO, Query()],
    current_user: UserDTO = Depends(require_employee),
    service: ApplicationService = Depends(get_application_service),
) -> list[ApplicationDTO]:
    return await service.list_applications(filters, skip=filters.skip, limit=filters.limit)


@router.get(
    "/{application_id}", response_model=ApplicationDTO, summary="Get application by ID"
)
async def get_application(
    application_id: UUID,
    current_user: UserDTO = Depends(require_employee),
    service: ApplicationService = Depends(get_application_service),
) -> ApplicationDTO:
    return await service.get_application(application_id)


@router.patch("", response_model=ApplicationDTO, summary="Edit an application")
async def edit_application(
    dto: EditApplicationDTO,
    current_user: UserDTO = Depends(require_employee),
    service: ApplicationService = Depends(get_application_service),
) -> ApplicationDTO:
    return await service.edit_application(dto, actor_id=current_user.id)
