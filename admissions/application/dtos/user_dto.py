"""User account DTOs."""

from typing import Optional
from uuid import UUID

from pydantic import ConfigDict, Field

from admissions.application.dtos.common import (
    LowercaseEmail,
    PhoneNumber,
    RequestDTO,
    ResponseDTO,
)
from admissions.domain.enums import Role


class CreateUserDTO(RequestDTO):
    """
    Internal payload used by services when opening an account.

    Never bound to a request body: callers have already validated the
    password strength and email shape on the public DTO.
    """

    email: str
    roles: list[Role]
    password: str


class EditUserDTO(RequestDTO):
    email: Optional[LowercaseEmail] = None
    phone_number: Optional[PhoneNumber] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "new.address@example.com",
                "phoneNumber": "+251911234567",
            }
        }
    )


class UserForNotificationDTO(ResponseDTO):
    id: UUID
    email: str
    first_name: str
    last_name: str
    roles: list[Role]


class UserDTO(ResponseDTO):
    """
    Account as returned to clients.

    ``access_token``/``expires_in`` are the linked Google Calendar grant, not
    the API bearer token; both keep their snake_case keys on the wire.
    """

    id: UUID
    email: str
    first_name: str
    last_name: str
    phone_number: Optional[str] = None
    access_token: Optional[str] = Field(default=None, alias="access_token")
    expires_in: Optional[float] = Field(default=None, alias="expires_in")
    calendar_id: Optional[str] = None
    roles: list[Role]
