"""English proficiency test DTOs."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from admissions.application.dtos.common import (
    IsoDateTime,
    LowercaseEmail,
    NonEmptyStr,
    RequestDTO,
    ResponseDTO,
)
from admissions.application.dtos.shared_dto import ApplicationSummaryDTO
from admissions.domain.enums import EnglishTestRequiredStatus, EnglishTestStatus


class CreateEnglishTestDTO(RequestDTO):
    """
    Test-portal credentials and practice material for an application.

    ``email`` is the portal login, lower-cased like every other email.
    """

    application_id: UUID
    practice_link: NonEmptyStr
    practice_link2: Optional[str] = None
    test_date: Optional[IsoDateTime] = None
    email: LowercaseEmail
    password: NonEmptyStr
    has_passed: Optional[bool] = None


class EditEnglishTestDTO(RequestDTO):
    application_id: UUID
    practice_link: Optional[str] = None
    practice_link2: Optional[str] = None
    test_date: Optional[IsoDateTime] = None
    score: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    has_passed: Optional[EnglishTestStatus] = None


class EnglishTestDTO(ResponseDTO):
    practice_link: str
    practice_link2: Optional[str] = None
    test_date: Optional[datetime] = None
    score: Optional[str] = None
    email: str
    password: str
    has_passed: Optional[EnglishTestStatus] = None
    application: Optional[ApplicationSummaryDTO] = None


class ApplicationEnglishTestDTO(ResponseDTO):
    english_test_required: Optional[EnglishTestRequiredStatus] = None
    english_test: Optional[EnglishTestDTO] = None
