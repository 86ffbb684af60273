"""Pydantic models for error responses used in OpenAPI schema generation."""

from pydantic import BaseModel, Field


class ValidationErrorDetail(BaseModel):
    """A single failing field and why it failed."""

    field: str = Field(
        ...,
        description="Dotted location of the failing value",
        examples=["body.email", "body.phoneNumber", "query.gender"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=[
            "value is not a valid email address: An email address must have an @-sign.",
            "Field required",
            "Invalid date format. Use ISO-8601 DateTime format.",
        ],
    )


class ValidationErrorResponse(BaseModel):
    """Body of every 422 response, as produced by validation_error_handler."""

    detail: str = Field(..., examples=["Validation failed"])
    error_code: str = Field(..., examples=["VALIDATION_ERROR"])
    errors: list[ValidationErrorDetail] = Field(..., min_length=1)

    model_config = {
        "json_schema_extra": {
            "example": {
                "detail": "Validation failed",
                "error_code": "VALIDATION_ERROR",
                "errors": [
                    {"field": "body.gender", "message": "Input should be 'Male' or 'Female'"},
                    {"field": "body.firstName", "message": "Field required"},
                ],
            }
        }
    }


class ErrorResponse(BaseModel):
    """Body of every non-validation error response."""

    detail: str = Field(..., examples=["Student with ID ... not found"])
    error_code: str = Field(..., examples=["STUDENT_NOT_FOUND"])
