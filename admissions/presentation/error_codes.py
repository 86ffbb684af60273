"""Error code to HTTP status code mapping.

Every ApplicationError and DomainException carries an ``error_code``; this
table is the only place it is turned into an HTTP status.
"""

from fastapi import status

ERROR_CODE_TO_HTTP_STATUS = {
    # Not found
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "EMPLOYEE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "STUDENT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "APPLICATION_NOT_FOUND": status.HTTP_404_NOT_FOUND,

    # Conflicts
    "EMAIL_ALREADY_EXISTS": status.HTTP_409_CONFLICT,

    # Authentication errors
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    "INVALID_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "UNAUTHORIZED": status.HTTP_401_UNAUTHORIZED,

    # Authorization errors
    "ACCOUNT_SUSPENDED": status.HTTP_403_FORBIDDEN,
    "INSUFFICIENT_PERMISSIONS": status.HTTP_403_FORBIDDEN,
    "FORBIDDEN_ROLE_ASSIGNMENT": status.HTTP_403_FORBIDDEN,

    # Domain errors (business rule violations)
    "INVALID_ENTITY_STATE": status.HTTP_400_BAD_REQUEST,
    "BUSINESS_RULE_VIOLATION": status.HTTP_400_BAD_REQUEST,
    "DOMAIN_ERROR": status.HTTP_400_BAD_REQUEST,

    # Application errors
    "APPLICATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "VALIDATION_ERROR": status.HTTP_422_UNPROCESSABLE_ENTITY,

    # Infrastructure errors
    "DATABASE_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    "INTERNAL_SERVER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def get_http_status_for_error_code(error_code: str) -> int:
    """Return the HTTP status for ``error_code``, 400 when it is unmapped."""
    return ERROR_CODE_TO_HTTP_STATUS.get(error_code, status.HTTP_400_BAD_REQUEST)
