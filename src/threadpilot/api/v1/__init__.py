"""API v1 router aggregation.

Each service mounts only its own routers; the liveness endpoint lives
outside the versioned prefix.
"""

from fastapi import APIRouter

from .health import router as health_router
from .insurances import router as insurances_router
from .vehicles import router as vehicles_router

# Insurance service routes
insurance_router = APIRouter(prefix="/api/v1")
insurance_router.include_router(
    insurances_router, prefix="/insurances", tags=["insurances"]
)

# Vehicle service routes
vehicle_router = APIRouter(prefix="/api/v1")
vehicle_router.include_router(vehicles_router, prefix="/vehicles", tags=["vehicles"])


__all__ = ["health_router", "insurance_router", "vehicle_router"]
