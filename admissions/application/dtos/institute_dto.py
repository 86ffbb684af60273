"""Institutes an application was submitted to."""

from typing import Optional
from uuid import UUID

from admissions.application.dtos.common import NonEmptyStr, RequestDTO, ResponseDTO
from admissions.domain.enums import AdmissionStatus


class CreateInstituteDTO(RequestDTO):
    name: NonEmptyStr
    comment: Optional[str] = None
    application_id: UUID


class EditInstituteDTO(RequestDTO):
    id: Optional[UUID] = None
    name: Optional[NonEmptyStr] = None
    comment: Optional[str] = None
    admission_status: Optional[AdmissionStatus] = None


class InstituteDTO(ResponseDTO):
    id: UUID
    name: str
    comment: Optional[str] = None
    admission_status: AdmissionStatus
