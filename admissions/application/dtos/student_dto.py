"""Student DTOs.

``StudentDTO`` is the full record: handling agent, address, relatives,
education history, applications, login account and uploaded files.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import ConfigDict

from admissions.application.dtos.additional_student_files_dto import (
    AdditionalStudentFilesDTO,
)
from admissions.application.dtos.common import (
    IsoDateTime,
    LowercaseEmail,
    NonEmptyStr,
    PhoneNumber,
    PageDTO,
    RequestDTO,
    ResponseDTO,
    StrongPassword,
)
from admissions.application.dtos.education_background_dto import (
    EducationBackgroundDTO,
)
from admissions.application.dtos.employee_dto import EmployeeDTO
from admissions.application.dtos.relation_dto import StudentRelationsDTO
from admissions.application.dtos.shared_dto import ApplicationSummaryDTO
from admissions.application.dtos.user_dto import UserDTO
from admissions.domain.enums import Country, Gender, Season


class CreateStudentDTO(RequestDTO):
    """
    DTO for an agent registering a client student.

    The account password is generated server-side. ``country``,
    ``educationalLevel``, ``fieldOfStudy`` and ``intake`` open the student's
    first application.
    """

    email: LowercaseEmail
    first_name: NonEmptyStr
    last_name: NonEmptyStr
    gender: Gender
    phone_number: Optional[PhoneNumber] = None
    date_of_birth: Optional[IsoDateTime] = None
    branch: NonEmptyStr
    region: NonEmptyStr
    city: NonEmptyStr
    sub_city: NonEmptyStr
    woreda: NonEmptyStr
    kebele: NonEmptyStr
    house_number: NonEmptyStr
    country: Country
    educational_level: NonEmptyStr
    field_of_study: NonEmptyStr
    intake: Optional[Season] = None
    is_client: Optional[bool] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "selam@example.com",
                "firstName": "Selam",
                "lastName": "Girma",
                "gender": "Female",
                "branch": "Bole",
                "region": "Addis Ababa",
                "city": "Addis Ababa",
                "subCity": "Bole",
                "woreda": "03",
                "kebele": "12",
                "houseNumber": "1123",
                "country": "Canada",
                "educationalLevel": "Masters",
                "fieldOfStudy": "Computer Science",
                "intake": "Fall",
            }
        }
    )


class CreateNonClientStudentDTO(RequestDTO):
    """Lead captured before the student becomes a client."""

    email: LowercaseEmail
    password: StrongPassword
    first_name: NonEmptyStr
    last_name: NonEmptyStr
    gender: Gender
    phone_number: Optional[PhoneNumber] = None
    date_of_birth: Optional[IsoDateTime] = None
    region: NonEmptyStr
    city: NonEmptyStr
    sub_city: NonEmptyStr
    woreda: NonEmptyStr
    kebele: NonEmptyStr
    house_number: NonEmptyStr
    level: NonEmptyStr
    country: Country
    field: NonEmptyStr


class EditStudentDTO(RequestDTO):
    id: UUID
    first_name: Optional[NonEmptyStr] = None
    last_name: Optional[NonEmptyStr] = None
    gender: Optional[Gender] = None
    phone_number: Optional[PhoneNumber] = None
    date_of_birth: Optional[IsoDateTime] = None
    admission_email: Optional[LowercaseEmail] = None
    branch: Optional[NonEmptyStr] = None
    image: Optional[str] = None
    passport_number: Optional[str] = None
    issue_date: Optional[IsoDateTime] = None
    expiry_date: Optional[IsoDateTime] = None
    passport_attachment: Optional[str] = None


class EditStudentAddressDTO(RequestDTO):
    student_id: UUID
    region: Optional[NonEmptyStr] = None
    city: Optional[str] = None
    sub_city: Optional[str] = None
    woreda: Optional[str] = None
    kebele: Optional[str] = None
    house_number: Optional[NonEmptyStr] = None


class EditPassportDTO(RequestDTO):
    student_id: UUID
    passport_number: Optional[str] = None
    issue_date: Optional[IsoDateTime] = None
    expiry_date: Optional[IsoDateTime] = None
    passport_attachment: Optional[str] = None


class StudentFilterDTO(PageDTO):
    gender: Optional[Gender] = None
    country: Optional[Country] = None
    intake: Optional[Season] = None
    is_active: Optional[bool] = None
    is_client: Optional[bool] = None
    search: Optional[str] = None


class StudentAddressDTO(ResponseDTO):
    region: str
    city: Optional[str] = None
    sub_city: Optional[str] = None
    woreda: Optional[str] = None
    kebele: Optional[str] = None
    house_number: str


class PassportDTO(ResponseDTO):
    passport_number: Optional[str] = None
    issue_date: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    passport_attachment: Optional[str] = None


class FutureStudentInfoDTO(ResponseDTO):
    level: str
    country: Country
    field: str


class _StudentBaseDTO(ResponseDTO):
    id: UUID
    first_name: str
    last_name: str
    gender: Gender
    date_of_birth: Optional[datetime] = None
    admission_email: Optional[str] = None
    branch: Optional[str] = None
    is_active: bool = True
    image: Optional[str] = None
    passport_number: Optional[str] = None
    issue_date: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    passport_attachment: Optional[str] = None
    student_address: Optional[StudentAddressDTO] = None
    user: Optional[UserDTO] = None


class StudentWithoutApplicationDTO(_StudentBaseDTO):
    agent: Optional[EmployeeDTO] = None
    student_relations: list[StudentRelationsDTO] = []
    education_backgrounds: list[EducationBackgroundDTO] = []
    additional_student_files: list[AdditionalStudentFilesDTO] = []


class StudentDTO(StudentWithoutApplicationDTO):
    applications: list[ApplicationSummaryDTO] = []


class NonClientStudentDTO(_StudentBaseDTO):
    future_student_info: Optional[FutureStudentInfoDTO] = None


class CreatedStudentDTO(StudentDTO):
    """Response to student creation; the generated password is shown once."""

    temporary_password: Optional[str] = None
