"""API response patterns following Result[T,E] + HTTP semantics."""

from typing import TypeVar, Union

from beartype import beartype
from fastapi import Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.errors import ErrorKind, ServiceError
from ..core.result_types import Result
from ..schemas.common import ErrorResponse

T = TypeVar("T")


@beartype
def error_response(
    error: ServiceError, response: Response, instance: str | None = None
) -> ErrorResponse:
    """Set the status code for ``error`` and build its response body."""
    response.status_code = error.http_status
    return ErrorResponse(
        status=error.http_status,
        error=error.message,
        error_code=error.kind.value,
        details=list(error.details),
        instance=instance,
    )


@beartype
def handle_result(
    result: Result[T, ServiceError],
    response: Response,
    instance: str | None = None,
    success_status: int = 200,
) -> Union[T, ErrorResponse]:
    """Convert a service Result to the success value or an ErrorResponse.

    Args:
        result: Service layer Result
        response: FastAPI Response object to set status code
        instance: Request path reported in error bodies
        success_status: HTTP status for successful operations

    Returns:
        Either the unwrapped success value or ErrorResponse
    """
    if result.is_err():
        return error_response(result.unwrap_err(), response, instance)

    response.status_code = success_status
    return result.unwrap()


@beartype
def not_found_response(message: str, response: Response, instance: str) -> ErrorResponse:
    """Build a 404 body for a resource that does not exist."""
    response.status_code = status.HTTP_404_NOT_FOUND
    return ErrorResponse(
        status=status.HTTP_404_NOT_FOUND,
        error=message,
        error_code="NOT_FOUND",
        details=[message],
        instance=instance,
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request bodies and parameters as 400 errors."""
    details = [
        f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    body = ErrorResponse(
        status=status.HTTP_400_BAD_REQUEST,
        error="Request validation failed",
        error_code=ErrorKind.VALIDATION_FAILED.value,
        details=details,
        instance=request.url.path,
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
    )
