"""Vehicle information endpoint."""

from typing import Union

from beartype import beartype
from fastapi import APIRouter, Depends, Request, Response

from ...schemas.common import ErrorResponse
from ...schemas.vehicle import VehicleInfo
from ...services.vehicle_service import VehicleService
from ..dependencies import get_vehicle_service
from ..response_patterns import error_response, not_found_response

router = APIRouter()


@router.get(
    "/{registration_number}",
    response_model=Union[VehicleInfo, ErrorResponse],
    response_model_exclude_none=True,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid registration number"},
        404: {"model": ErrorResponse, "description": "Vehicle not found"},
        500: {"model": ErrorResponse, "description": "Vehicle lookup failed"},
    },
)
@beartype
async def get_vehicle(
    registration_number: str,
    request: Request,
    response: Response,
    service: VehicleService = Depends(get_vehicle_service),
) -> Union[VehicleInfo, ErrorResponse]:
    """Get vehicle details by registration number."""
    result = await service.get_vehicle(registration_number)
    if result.is_err():
        return error_response(result.unwrap_err(), response, request.url.path)

    vehicle = result.unwrap()
    if vehicle is None:
        return not_found_response(
            f"Vehicle with registration number {registration_number.strip().upper()} "
            "not found",
            response,
            request.url.path,
        )
    return vehicle
