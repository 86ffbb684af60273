"""Student relative DTOs."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from admissions.application.dtos.common import (
    IsoDateTime,
    NonEmptyStr,
    PhoneNumber,
    RequestDTO,
    ResponseDTO,
)
from admissions.domain.enums import Relationship


class CreateStudentRelationsDTO(RequestDTO):
    student_id: UUID
    first_name: NonEmptyStr
    last_name: NonEmptyStr
    phone_number: Optional[PhoneNumber] = None
    educational_level: Optional[str] = None
    date_of_birth: Optional[IsoDateTime] = None
    relationship: Relationship


class EditStudentRelationsDTO(RequestDTO):
    id: UUID
    first_name: Optional[NonEmptyStr] = None
    last_name: Optional[NonEmptyStr] = None
    phone_number: Optional[PhoneNumber] = None
    educational_level: Optional[str] = None
    date_of_birth: Optional[IsoDateTime] = None


class StudentRelationsDTO(ResponseDTO):
    id: UUID
    first_name: str
    last_name: str
    phone_number: Optional[str] = None
    educational_level: Optional[str] = None
    date_of_birth: Optional[datetime] = None
    relationship: Relationship
