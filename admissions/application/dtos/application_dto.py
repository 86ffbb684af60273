"""Application DTOs."""

from typing import Optional
from uuid import UUID

from pydantic import ConfigDict

from admissions.application.dtos.common import NonEmptyStr, PageDTO, RequestDTO, ResponseDTO
from admissions.application.dtos.institute_dto import InstituteDTO
from admissions.application.dtos.shared_dto import StudentSummaryDTO
from admissions.domain.enums import (
    AdmissionStatus,
    ApplicationStatus,
    Country,
    EnglishTestRequiredStatus,
    Season,
)


class CreateApplicationDTO(RequestDTO):
    country: Country
    educational_level: NonEmptyStr
    field_of_study: NonEmptyStr
    student_id: UUID
    intake: Optional[Season] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "country": "UnitedStates",
                "educationalLevel": "Bachelors",
                "fieldOfStudy": "Nursing",
                "studentId": "0b8f0f5e-6c43-4f5b-9a43-6a2d3f1f8f10",
                "intake": "Spring",
            }
        }
    )


class EditApplicationDTO(RequestDTO):
    """Partial update of an application; stage and statuses move here."""

    id: UUID
    educational_level: Optional[NonEmptyStr] = None
    field_of_study: Optional[NonEmptyStr] = None
    institute: Optional[str] = None
    intake: Optional[Season] = None
    english_test_required: Optional[EnglishTestRequiredStatus] = None
    application_status: Optional[ApplicationStatus] = None
    admission_status: Optional[AdmissionStatus] = None


class ApplicationFilterDTO(PageDTO):
    application_status: Optional[ApplicationStatus] = None
    admission_status: Optional[AdmissionStatus] = None
    country: Optional[Country] = None
    intake: Optional[Season] = None
    student_id: Optional[UUID] = None


class CreatePendingDocumentDTO(RequestDTO):
    name: NonEmptyStr
    file_url: Optional[str] = None
    application_id: UUID


class EditPendingDocumentDTO(RequestDTO):
    id: UUID
    name: Optional[NonEmptyStr] = None
    file_url: Optional[str] = None


class PendingDocumentDTO(ResponseDTO):
    id: UUID
    name: str
    file_url: Optional[str] = None


class ApplicationDTO(ResponseDTO):
    id: UUID
    country: Country
    educational_level: str
    field_of_study: str
    application_status: ApplicationStatus
    institute: Optional[str] = None
    intake: Optional[Season] = None
    english_test_required: EnglishTestRequiredStatus
    admission_status: AdmissionStatus
    student: Optional[StudentSummaryDTO] = None


class ApplicationWithPendingDocumentsForStudentDTO(ResponseDTO):
    id: UUID
    country: Country
    educational_level: str
    field_of_study: str
    application_status: ApplicationStatus
    intake: Optional[Season] = None
    admission_status: AdmissionStatus
    english_test_required: EnglishTestRequiredStatus
    pending_documents: list[PendingDocumentDTO] = []
    student: Optional[StudentSummaryDTO] = None


class ApplicationWithPendingDocumentsDTO(ApplicationWithPendingDocumentsForStudentDTO):
    institute: Optional[str] = None
    institutes: list[InstituteDTO] = []
