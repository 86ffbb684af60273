"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from sqlalchemy.exc import SQLAlchemyError

from admissions.application.exceptions import ApplicationError
from admissions.domain.exceptions import DomainException
from admissions.infrastructure.config.settings import Settings, get_settings
from admissions.infrastructure.logging import configure_logging
from admissions.presentation.api.v1 import applications, audits, auth, employees, students
from admissions.presentation.dependencies import dispose_database_engine
from admissions.presentation.error_schemas import ErrorResponse, ValidationErrorResponse
from admissions.presentation.exception_handlers import (
    application_error_handler,
    database_error_handler,
    domain_exception_handler,
    generic_exception_handler,
    validation_error_handler,
)

_settings = get_settings()
configure_logging(_settings)
logger = logging.getLogger("admissions")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info(
        "Starting %s v%s (%s)", _settings.app_name, _settings.app_version, _settings.environment
    )
    yield
    await dispose_database_engine()
    logger.info("Shut down %s", _settings.app_name)


app = FastAPI(
    title=_settings.app_name,
    description="Student admissions backend: staff, students, applications and their audit trail",
    version=_settings.app_version,
    debug=_settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ApplicationError and DomainException cover every raised error via error_code
app.add_exception_handler(ApplicationError, application_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(DomainException, domain_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(SQLAlchemyError, database_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(Exception, generic_exception_handler)

for router in (auth.router, employees.router, students.router, applications.router, audits.router):
    app.include_router(router, prefix="/api/v1")


@app.get("/")
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "message": _settings.app_name,
        "status": "running",
        "version": _settings.app_version,
        "environment": _settings.environment,
    }


@app.get("/config")
async def show_config(settings: Settings = Depends(get_settings)) -> dict[str, str | int | bool | list[str]]:
    """Show non-sensitive configuration. Not exposed in production."""
    if settings.is_production:
        return {"environment": settings.environment}

    return {
        "environment": settings.environment,
        "app_name": settings.app_name,
        "app_version": settings.app_version,
        "debug": settings.debug,
        "cors_origins": settings.cors_origins_list,
        "log_level": settings.log_level,
    }


def custom_openapi():
    """
    Replace FastAPI's default 422 schema with ValidationErrorResponse,
    matching what validation_error_handler actually returns.
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    schemas = openapi_schema.setdefault("components", {}).setdefault("schemas", {})
    schemas.pop("HTTPValidationError", None)
    schemas.pop("ValidationError", None)
    validation_schema = ValidationErrorResponse.model_json_schema(
        ref_template="#/components/schemas/{model}"
    )
    schemas.update(validation_schema.pop("$defs", {}))
    schemas["ValidationErrorResponse"] = validation_schema
    schemas["ErrorResponse"] = ErrorResponse.model_json_schema()

    for path_data in openapi_schema.get("paths", {}).values():
        for operation in path_data.values():
            if isinstance(operation, dict) and "422" in operation.get("responses", {}):
                operation["responses"]["422"] = {
                    "description": "Validation Error",
                    "content": {
                        "application/json": {
                            "schema": {"$ref": "#/components/schemas/ValidationErrorResponse"}
                        }
                    },
                }

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi  # type: ignore[method-assign]
