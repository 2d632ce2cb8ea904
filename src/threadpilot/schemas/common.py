"""Common schemas used across the API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiSchema(BaseModel):
    """Base for request/response bodies; JSON field names are camelCase."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
        validate_default=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class ErrorResponse(ApiSchema):
    """Problem-details style error body."""

    status: int = Field(..., ge=400, le=599, description="HTTP status code")
    error: str = Field(..., description="Human-readable error message")
    error_code: str = Field(..., description="Machine-readable error code")
    details: list[str] = Field(
        default_factory=list, description="Individual failure messages"
    )
    instance: str | None = Field(
        default=None, description="Request path that produced the error"
    )


class HealthResponse(ApiSchema):
    """Liveness response."""

    status: str = Field(..., pattern=r"^(healthy|unhealthy)$")
    service: str = Field(..., min_length=1)
    timestamp: datetime = Field(..., description="Time the check ran")
