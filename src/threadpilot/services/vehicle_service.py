# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Vehicle query service."""

from beartype import beartype

from ..core.errors import ServiceError
from ..core.logging_utils import get_logger
from ..core.result_types import Err, Ok, Result
from ..repositories.vehicle_repository import VehicleRepository
from ..schemas.vehicle import VehicleInfo
from .validation import validate_registration_number

logger = get_logger(__name__)


class VehicleService:
    """Looks up vehicle details by registration number."""

    def __init__(self, repository: VehicleRepository) -> None:
        """Initialize vehicle service."""
        self._repository = repository

    @beartype
    async def get_vehicle(
        self, registration_number: str | None
    ) -> Result[VehicleInfo | None, ServiceError]:
        """Get a vehicle by registration number.

        Returns ``Ok(None)`` when the number is well formed but unknown.
        """
        validated = validate_registration_number(registration_number)
        if isinstance(validated, Err):
            logger.warning(
                "Rejected registration number %r: %s",
                registration_number,
                validated.error.message,
            )
            return validated

        reg = validated.unwrap()
        found = await self._repository.get_by_registration_number(reg)
        if isinstance(found, Err):
            return Err(
                ServiceError.vehicle_lookup_failed(
                    f"Vehicle lookup failed for registration number {reg}",
                    found.error,
                )
            )

        vehicle = found.unwrap()
        if vehicle is None:
            logger.info("Vehicle not found: %s", reg)
            return Ok(None)

        logger.info("Retrieved vehicle %s", reg)
        return Ok(VehicleInfo.from_vehicle(vehicle))
