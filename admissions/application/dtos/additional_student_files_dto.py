"""Supporting documents uploaded for a student."""

from typing import Optional
from uuid import UUID

from admissions.application.dtos.common import RequestDTO, ResponseDTO
from admissions.domain.enums import AdditionalFileType


class CreateAdditionalStudentFilesDTO(RequestDTO):
    file_type: AdditionalFileType
    file_uri: Optional[str] = None


class EditAdditionalStudentFilesDTO(RequestDTO):
    file_type: AdditionalFileType
    file_uri: Optional[str] = None


class AdditionalStudentFilesDTO(ResponseDTO):
    id: UUID
    student_id: UUID
    file_type: AdditionalFileType
    file_uri: str
