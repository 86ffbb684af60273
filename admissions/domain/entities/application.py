"""Application domain entity - one study application of a student."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from admissions.domain.enums import (
    AdmissionStatus,
    ApplicationStatus,
    Country,
    EnglishTestRequiredStatus,
    Season,
)
from admissions.domain.exceptions import InvalidEntityStateException

if TYPE_CHECKING:
    from admissions.domain.entities.student import Student


@dataclass
class Application:
    """An application to study in a given country, tracked through its stages."""

    student_id: UUID
    country: Country
    educational_level: str
    field_of_study: str
    intake: Optional[Season] = None
    application_status: ApplicationStatus = ApplicationStatus.ADMISSION
    admission_status: AdmissionStatus = AdmissionStatus.PENDING
    english_test_required: EnglishTestRequiredStatus = EnglishTestRequiredStatus.PENDING
    institute: Optional[str] = None
    student: Optional["Student"] = None
    id: Optional[UUID] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        if not self.educational_level or not self.educational_level.strip():
            raise InvalidEntityStateException("Educational level cannot be empty.")

        if not self.field_of_study or not self.field_of_study.strip():
            raise InvalidEntityStateException("Field of study cannot be empty.")

        self.country = Country(self.country)
        self.application_status = ApplicationStatus(self.application_status)
        self.admission_status = AdmissionStatus(self.admission_status)
        self.english_test_required = EnglishTestRequiredStatus(self.english_test_required)
        if self.intake is not None:
            self.intake = Season(self.intake)

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
