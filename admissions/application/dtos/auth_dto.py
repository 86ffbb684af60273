"""Authentication DTOs for the application layer."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from admissions.application.dtos.common import (
    IsoDateTime,
    LowercaseEmail,
    NonEmptyStr,
    Number,
    PhoneNumber,
    RawSecret,
    RequestDTO,
    ResponseDTO,
    StrongPassword,
)
from admissions.application.dtos.shared_dto import StudentSummaryDTO
from admissions.domain.enums import Gender, Role


class LoginDTO(RequestDTO):
    """DTO for user login request."""

    email: LowercaseEmail = Field(..., description="User's email address")
    password: RawSecret = Field(..., description="User's password")

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [{"email": "user@example.com", "password": "S3cure!pass"}]
        }
    )


class ChangePasswordDTO(RequestDTO):
    email: LowercaseEmail
    current_password: StrongPassword
    new_password: StrongPassword


class ResetPasswordDTO(RequestDTO):
    email: LowercaseEmail
    password: StrongPassword
    reset_password_token: RawSecret


class StudentSignupDTO(RequestDTO):
    """
    Self-registration of a prospective student.

    Validation:
    - email: lower-cased, then checked for email shape
    - password: strong (8+ chars, lower, upper, digit, symbol)
    - phoneNumber: optional, international format
    - address parts: all required
    """

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

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "abebe@example.com",
                "password": "S3cure!pass",
                "firstName": "Abebe",
                "lastName": "Kebede",
                "gender": "Male",
                "phoneNumber": "+251911234567",
                "dateOfBirth": "2001-04-12T00:00:00Z",
                "region": "Addis Ababa",
                "city": "Addis Ababa",
                "subCity": "Bole",
                "woreda": "03",
                "kebele": "12",
                "houseNumber": "1123",
            }
        }
    )


class VerifyOtpByEmailDTO(RequestDTO):
    email: LowercaseEmail
    otp: NonEmptyStr


class VerifyOtpByPhoneNumberDTO(RequestDTO):
    phone_number: PhoneNumber
    otp: NonEmptyStr


class EditGoogleTokenDTO(RequestDTO):
    """Google Calendar grant; keys stay snake_case as Google sends them."""

    access_token: NonEmptyStr = Field(..., alias="access_token")
    expires_in: Number = Field(..., alias="expires_in")


class TokenDTO(BaseModel):
    """DTO for token response."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Access token lifetime in seconds")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                    "token_type": "bearer",
                    "expires_in": 1800,
                }
            ]
        }
    }


class EmployeeSummaryDTO(ResponseDTO):
    id: UUID
    first_name: str
    last_name: str
    student_assignment_count: int = 0


class BasicEmployeeUserDTO(ResponseDTO):
    id: UUID
    first_name: str
    last_name: str
    roles: list[Role]


class CalendarEmployeeUserDTO(ResponseDTO):
    id: UUID
    access_token: Optional[str] = Field(default=None, alias="access_token")
    employee: Optional[EmployeeSummaryDTO] = None


class EmployeeUserDTO(ResponseDTO):
    id: UUID
    email: str
    first_name: str
    last_name: str
    phone_number: Optional[str] = None
    roles: list[Role]
    access_token: Optional[str] = Field(default=None, alias="access_token")
    employee: Optional[EmployeeSummaryDTO] = None


class StudentUserDTO(ResponseDTO):
    id: UUID
    email: str
    first_name: str
    last_name: str
    phone_number: Optional[str] = None
    roles: list[Role]
    student: Optional[StudentSummaryDTO] = None


class LoginResponseDTO(BaseModel):
    """Login result: the bearer token plus who it belongs to."""

    user: EmployeeUserDTO | StudentUserDTO
    token: TokenDTO
