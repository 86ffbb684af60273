"""Shared DTO bases and reusable field shapes.

Request DTOs read camelCase JSON bodies and drop keys they do not declare.
Response DTOs are built from domain entities by reading attributes, so only
declared fields ever leave the service.
"""

import re
from datetime import datetime
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    EmailStr,
    Field,
    ValidationError,
    ValidatorFunctionWrapHandler,
    WrapValidator,
)
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

ISO_DATETIME_MESSAGE = "Invalid date format. Use ISO-8601 DateTime format."

_PHONE_SEPARATORS = re.compile(r"[\s\-.()]")
_PASSWORD_SYMBOLS = re.compile(r"[^A-Za-z0-9]")


class RequestDTO(BaseModel):
    """Base for inbound payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class ResponseDTO(BaseModel):
    """Base for outbound payloads, populated from entity attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )


class PageDTO(RequestDTO):
    """Offset paging shared by list filters; read from the query string."""

    skip: int = Field(default=0, ge=0)
    limit: int = Field(default=100, ge=1, le=500)


def strip_whitespace(v: Any) -> Any:
    """Strip whitespace from string values."""
    return v.strip() if isinstance(v, str) else v


def lowercase(v: Any) -> Any:
    return v.lower() if isinstance(v, str) else v


def strip_phone_separators(v: Any) -> Any:
    """Drop spaces, hyphens, dots and parentheses: '+251 (911) 23-45.67' -> '+251911234567'."""
    return _PHONE_SEPARATORS.sub("", v) if isinstance(v, str) else v


def check_password_strength(v: str) -> str:
    """
    Require at least 8 characters mixing lowercase, uppercase, digit and symbol.

    Raises:
        ValueError: Naming the first missing requirement
    """
    if len(v) < 8:
        raise ValueError("Password must be at least 8 characters long")
    if not any(c.islower() for c in v):
        raise ValueError("Password must contain a lowercase letter")
    if not any(c.isupper() for c in v):
        raise ValueError("Password must contain an uppercase letter")
    if not any(c.isdigit() for c in v):
        raise ValueError("Password must contain a digit")
    if not _PASSWORD_SYMBOLS.search(v):
        raise ValueError("Password must contain a symbol")
    return v


def parse_iso_datetime(value: Any, handler: ValidatorFunctionWrapHandler) -> datetime:
    """Run the stock datetime parser but report failures with one stable message."""
    try:
        return handler(value)
    except ValidationError:
        raise PydanticCustomError("iso_datetime", ISO_DATETIME_MESSAGE)


NonEmptyStr = Annotated[str, BeforeValidator(strip_whitespace), Field(min_length=1)]

# Compared byte for byte against stored hashes and tokens, so never stripped.
RawSecret = Annotated[str, Field(min_length=1)]

LowercaseEmail = Annotated[EmailStr, BeforeValidator(lowercase)]

PhoneNumber = Annotated[
    str,
    BeforeValidator(strip_phone_separators),
    Field(pattern=r"^\+\d{7,15}$", examples=["+251911234567"]),
]

StrongPassword = Annotated[str, AfterValidator(check_password_strength)]

IsoDateTime = Annotated[datetime, WrapValidator(parse_iso_datetime)]

Number = Annotated[float, Field(allow_inf_nan=False)]

NumberOrNaN = Annotated[float, Field(allow_inf_nan=True)]
