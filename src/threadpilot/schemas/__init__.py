"""API request/response schemas."""

from .common import ApiSchema, ErrorResponse, HealthResponse
from .insurance import (
    GetPersonInsurancesRequest,
    InsuranceResponse,
    PersonInsurancesResult,
)
from .vehicle import VehicleInfo

__all__ = [
    "ApiSchema",
    "ErrorResponse",
    "HealthResponse",
    "GetPersonInsurancesRequest",
    "InsuranceResponse",
    "PersonInsurancesResult",
    "VehicleInfo",
]
