"""Exception handlers for converting exceptions to HTTP responses.

One handler per base class: the status comes from the exception's
``error_code`` via error_codes.py, so new exceptions need no new handler.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from admissions.application.exceptions import ApplicationError
from admissions.domain.exceptions import DomainException
from admissions.presentation.error_codes import get_http_status_for_error_code

logger = logging.getLogger(__name__)


def _error_response(message: str, error_code: str) -> JSONResponse:
    return JSONResponse(
        status_code=get_http_status_for_error_code(error_code),
        content={"detail": message, "error_code": error_code},
    )


async def application_error_handler(
    request: Request, exc: ApplicationError
) -> JSONResponse:
    """Handle every ApplicationError subclass."""
    return _error_response(exc.message, exc.error_code)


async def domain_exception_handler(
    request: Request, exc: DomainException
) -> JSONResponse:
    """Handle every DomainException subclass."""
    logger.info("Domain rule rejected %s %s: %s", request.method, request.url.path, exc.message)
    return _error_response(exc.message, exc.error_code)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Flatten Pydantic validation errors into ``{"field", "message"}`` pairs.

    Field paths are dotted locations such as ``body.email`` or ``query.gender``.
    """
    validation_errors = [
        {
            "field": ".".join(str(loc) for loc in error["loc"]),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]

    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "detail": "Validation failed",
            "error_code": "VALIDATION_ERROR",
            "errors": validation_errors,
        },
    )


async def database_error_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Hide database details from clients; log them with the traceback."""
    logger.error("Database error: %s", exc, exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An internal database error occurred",
            "error_code": "DATABASE_ERROR",
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error: %s", exc, exc_info=True)

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "detail": "An internal server error occurred",
            "error_code": "INTERNAL_SERVER_ERROR",
        },
    )
