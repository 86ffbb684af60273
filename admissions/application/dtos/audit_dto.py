"""Audit trail DTOs."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from admissions.application.dtos.auth_dto import EmployeeUserDTO
from admissions.application.dtos.common import NonEmptyStr, PageDTO, RequestDTO, ResponseDTO
from admissions.domain.enums import Operation


class CreateAuditDTO(RequestDTO):
    """
    One audit entry as written by services.

    ``previousValues`` is the JSON snapshot of the record before the change.
    """

    entity: NonEmptyStr
    record_id: NonEmptyStr
    user_id: UUID
    previous_values: NonEmptyStr
    detail: str = ""
    operation: Operation


class AuditFilterDTO(PageDTO):
    entity: Optional[str] = None
    record_id: Optional[str] = None


class AuditDTO(ResponseDTO):
    id: UUID
    created_at: datetime
    user: Optional[EmployeeUserDTO] = None
    entity: str
    record_id: str
    note: Optional[str] = None
    detail: str = ""
    operation: Operation
