"""Employee DTOs."""

from datetime import datetime
from typing import Annotated, Optional
from uuid import UUID

from pydantic import ConfigDict, Field

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
from admissions.application.dtos.user_dto import UserDTO
from admissions.domain.enums import Gender, Role

RoleList = Annotated[list[Role], Field(min_length=1)]


class CreateEmployeeDTO(RequestDTO):
    """
    DTO for creating an employee together with their login account.

    Validation:
    - roles: non-empty, every entry a known Role
    - phoneNumber and dateOfBirth are required for staff
    """

    email: LowercaseEmail
    roles: RoleList
    password: StrongPassword
    first_name: NonEmptyStr
    last_name: NonEmptyStr
    gender: Gender
    phone_number: PhoneNumber
    date_of_birth: IsoDateTime

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "hana@consultancy.example",
                "roles": ["Agent", "Admission"],
                "password": "S3cure!pass",
                "firstName": "Hana",
                "lastName": "Tesfaye",
                "gender": "Female",
                "phoneNumber": "+251911234567",
                "dateOfBirth": "1994-09-01T00:00:00Z",
            }
        }
    )


class EditEmployeeDTO(RequestDTO):
    """Partial update; only ``id`` is required."""

    id: UUID
    email: Optional[LowercaseEmail] = None
    password: Optional[StrongPassword] = None
    roles: Optional[RoleList] = None
    first_name: Optional[NonEmptyStr] = None
    last_name: Optional[NonEmptyStr] = None
    gender: Optional[Gender] = None
    phone_number: Optional[PhoneNumber] = None
    is_suspended: Optional[bool] = None
    date_of_birth: Optional[IsoDateTime] = None


class EmployeeFilterDTO(PageDTO):
    gender: Optional[Gender] = None
    role: Optional[Role] = None


class EmployeeDTO(ResponseDTO):
    id: UUID
    first_name: str
    last_name: str
    gender: Gender
    date_of_birth: Optional[datetime] = None
    user: UserDTO
