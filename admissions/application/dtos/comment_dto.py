"""Comment threads on applications."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from admissions.application.dtos.auth_dto import BasicEmployeeUserDTO
from admissions.application.dtos.common import NonEmptyStr, RequestDTO, ResponseDTO
from admissions.application.dtos.shared_dto import ApplicationSummaryDTO


class CreateCommentDTO(RequestDTO):
    text: NonEmptyStr
    application_id: UUID
    parent_id: Optional[str] = None


class EditCommentDTO(RequestDTO):
    id: UUID
    text: Optional[str] = None
    parent_id: Optional[str] = None


class ParentCommentDTO(ResponseDTO):
    id: UUID
    text: str
    user: Optional[BasicEmployeeUserDTO] = None


class CommentDTO(ResponseDTO):
    id: UUID
    text: str
    is_edited: bool = False
    created_at: datetime
    application: Optional[ApplicationSummaryDTO] = None
    user: Optional[BasicEmployeeUserDTO] = None
    parent: Optional[ParentCommentDTO] = None
