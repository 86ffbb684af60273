"""Student API endpoints (Admin and Agent)."""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from admissions.application.dtos.student_dto import (
    CreatedStudentDTO,
    CreateStudentDTO,
    EditPassportDTO,
    EditStudentAddressDTO,
    EditStudentDTO,
    StudentDTO,
    StudentFilterDTO,
)
from admissions.application.dtos.user_dto import UserDTO
from admissions.application.services.student_service import StudentService
from admissions.presentation.dependencies import (
    get_student_service,
    require_student_staff,
)

router = APIRouter(prefix="/students", tags=["students"])


@router.post(
    "",
    response_model=CreatedStudentDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Register a client student",
    description=(
        "Create the student's account, profile and first application. "
        "The caller becomes the student's agent; the generated password is "
        "returned once as temporaryPassword."
    ),
)
async def create_student(
    dto: CreateStudentDTO,
    current_user: UserDTO = Depends(require_student_staff),
    service: StudentService = Depends(get_student_service),
) -> CreatedStudentDTO:
    return await service.create_student(dto, actor_id=current_user.id)


@router.get("", response_model=list[StudentDTO], summary="List students")
async def list_students(
    filters: Annotated[StudentFilterDTO, Query()],
    current_user: UserDTO = Depends(require_student_staff),
    service: StudentService = Depends(get_student_service),
) -> list[StudentDTO]:
    return await service.list_students(filters, skip=filters.skip, limit=filters.limit)


@router.get("/{student_id}", response_model=StudentDTO, summary="Get student by ID")
async def get_student(
    student_id: UUID,
    current_user: UserDTO = Depends(require_student_staff),
    service: StudentService = Depends(get_student_service),
) -> StudentDTO:
    return await service.get_student(student_id)


@router.patch("", response_model=StudentDTO, summary="Edit a student")
async def edit_student(
    dto: EditStudentDTO,
    current_user: UserDTO = Depends(require_student_staff),
    service: StudentService = Depends(get_student_service),
) -> StudentDTO:
    return await service.edit_student(dto, actor_id=current_user.id)


@router.patch("/address", response_model=StudentDTO, summary="Edit a student's address")
async def edit_address(
    dto: EditStudentAddressDTO,
    current_user: UserDTO = Depends(require_student_staff),
    service: StudentService = Depends(get_student_service),
) -> StudentDTO:
    return await service.edit_address(dto, actor_id=current_user.id)


@router.patch("/passport", response_model=StudentDTO, summary="Edit a student's passport")
async def edit_passport(
    dto: EditPassportDTO,
    current_user: UserDTO = Depends(require_student_staff),
    service: StudentService = Depends(get_student_service),
) -> StudentDTO:
    return await service.edit_passport(dto, actor_id=current_user.id)
