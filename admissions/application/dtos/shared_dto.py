"""Compact student and application shapes nested inside other responses."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from admissions.application.dtos.common import ResponseDTO
from admissions.domain.enums import ApplicationStatus, Country, Gender, Season


class StudentSummaryDTO(ResponseDTO):
    id: UUID
    first_name: str
    last_name: str
    gender: Gender
    date_of_birth: Optional[datetime] = None
    admission_email: Optional[str] = None
    branch: Optional[str] = None
    is_active: bool = True
    image: Optional[str] = None


class ApplicationSummaryDTO(ResponseDTO):
    id: UUID
    country: Country
    educational_level: str
    field_of_study: str
    intake: Optional[Season] = None
    application_status: ApplicationStatus
