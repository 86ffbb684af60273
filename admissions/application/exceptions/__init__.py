"""Application layer exceptions."""

from admissions.application.exceptions.exceptions import (
    AccountSuspendedError,
    ApplicationError,
    ApplicationNotFoundError,
    EmailAlreadyExistsError,
    EmployeeNotFoundError,
    InsufficientPermissionsError,
    InvalidCredentialsError,
    InvalidTokenError,
    StudentNotFoundError,
    UnauthorizedError,
    UserNotFoundError,
)

__all__ = [
    "AccountSuspendedError",
    "ApplicationError",
    "ApplicationNotFoundError",
    "EmailAlreadyExistsError",
    "EmployeeNotFoundError",
    "InsufficientPermissionsError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "StudentNotFoundError",
    "UnauthorizedError",
    "UserNotFoundError",
]
