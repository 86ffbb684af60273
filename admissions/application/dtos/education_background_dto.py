"""Education background DTOs."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from admissions.application.dtos.common import (
    IsoDateTime,
    NonEmptyStr,
    Number,
    NumberOrNaN,
    RequestDTO,
    ResponseDTO,
)


class CreateEducationBackgroundDTO(RequestDTO):
    """
    A school or university the student attended.

    ``rank`` may be NaN for institutions that do not rank students.
    """

    student_id: UUID
    institution: NonEmptyStr
    degree: NonEmptyStr
    field_of_study: Optional[str] = None
    start_date: IsoDateTime
    end_date: Optional[IsoDateTime] = None
    gpa: Optional[Number] = None
    rank: Optional[NumberOrNaN] = None


class EditEducationBackgroundDTO(RequestDTO):
    id: UUID
    institution: Optional[NonEmptyStr] = None
    degree: Optional[NonEmptyStr] = None
    field_of_study: Optional[str] = None
    start_date: Optional[IsoDateTime] = None
    end_date: Optional[IsoDateTime] = None
    gpa: Optional[Number] = None
    rank: Optional[NumberOrNaN] = None


class EducationBackgroundDTO(ResponseDTO):
    id: UUID
    institution: str
    degree: str
    field_of_study: Optional[str] = None
    start_date: datetime
    end_date: Optional[datetime] = None
    gpa: Optional[float] = None
    rank: Optional[float] = None
    certificate_file_uri: Optional[str] = None
    transcript_file_uri: Optional[str] = None
