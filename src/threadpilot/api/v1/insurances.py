"""Person insurances endpoints.

Both endpoints answer the same question, the body variant keeps the
identifier out of URLs and access logs.
"""

import asyncio
from typing import Union

from beartype import beartype
from fastapi import APIRouter, Depends, Request, Response

from ...core.config import Settings
from ...core.errors import ServiceError
from ...core.logging_utils import get_logger
from ...core.result_types import Err, Result
from ...schemas.common import ErrorResponse
from ...schemas.insurance import GetPersonInsurancesRequest, PersonInsurancesResult
from ...services.insurance_service import PersonInsurancesService
from ..dependencies import get_app_settings, get_person_insurances_service
from ..response_patterns import handle_result

logger = get_logger(__name__)

router = APIRouter()

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ErrorResponse, "description": "Invalid identifier"},
    500: {"model": ErrorResponse, "description": "Insurances could not be retrieved"},
    504: {"model": ErrorResponse, "description": "Request timed out"},
}


async def _query(
    service: PersonInsurancesService,
    personal_identification_number: str | None,
    timeout_seconds: float,
) -> Result[PersonInsurancesResult, ServiceError]:
    try:
        return await asyncio.wait_for(
            service.get_person_insurances(personal_identification_number),
            timeout=timeout_seconds,
        )
    except asyncio.TimeoutError:
        logger.error("Person insurances query exceeded %.1fs", timeout_seconds)
        return Err(ServiceError.timeout("Request timed out"))


@router.post(
    "",
    response_model=Union[PersonInsurancesResult, ErrorResponse],
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
@beartype
async def get_person_insurances(
    body: GetPersonInsurancesRequest,
    request: Request,
    response: Response,
    service: PersonInsurancesService = Depends(get_person_insurances_service),
    settings: Settings = Depends(get_app_settings),
) -> Union[PersonInsurancesResult, ErrorResponse]:
    """Get all insurances of a person and their total monthly cost."""
    result = await _query(
        service, body.personal_identification_number, settings.request_timeout_seconds
    )
    return handle_result(result, response, instance=request.url.path)


@router.get(
    "/{personal_identification_number}",
    response_model=Union[PersonInsurancesResult, ErrorResponse],
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
@beartype
async def get_person_insurances_by_path(
    personal_identification_number: str,
    request: Request,
    response: Response,
    service: PersonInsurancesService = Depends(get_person_insurances_service),
    settings: Settings = Depends(get_app_settings),
) -> Union[PersonInsurancesResult, ErrorResponse]:
    """Get all insurances of a person identified in the path."""
    result = await _query(
        service, personal_identification_number, settings.request_timeout_seconds
    )
    return handle_result(result, response, instance=request.url.path)
