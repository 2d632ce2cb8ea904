# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""FastAPI dependencies for services and settings.

Services are built once per application in the lifespan handler and kept
on ``app.state``; these providers hand them to endpoints and can be
replaced through ``app.dependency_overrides`` in tests.
"""

from beartype import beartype
from fastapi import Request

from ..core.config import Settings
from ..services.insurance_service import PersonInsurancesService
from ..services.vehicle_service import VehicleService


@beartype
def get_app_settings(request: Request) -> Settings:
    """Provide the settings the application was created with."""
    return request.app.state.settings


@beartype
def get_person_insurances_service(request: Request) -> PersonInsurancesService:
    """Provide the person insurances service.

    Raises:
        RuntimeError: If the application was started without it
    """
    service = getattr(request.app.state, "person_insurances_service", None)
    if service is None:
        raise RuntimeError("Person insurances service is not configured")
    return service


@beartype
def get_vehicle_service(request: Request) -> VehicleService:
    """Provide the vehicle service."""
    service = getattr(request.app.state, "vehicle_service", None)
    if service is None:
        raise RuntimeError("Vehicle service is not configured")
    return service
