# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Person insurances aggregation.

Combines a person's policies with optional vehicle details for car
policies and the total monthly cost. Only an invalid identifier or a
failing policy store fail the request; a failed vehicle lookup leaves the
policy without vehicle details.
"""

import asyncio

from beartype import beartype

from ..core.errors import ServiceError
from ..core.features import ENABLE_DETAILED_VEHICLE_INFO, FeatureToggle
from ..core.logging_utils import get_logger
from ..core.result_types import Err, Ok, Result
from ..models.insurance import Insurance
from ..repositories.insurance_repository import InsuranceRepository
from ..schemas.insurance import InsuranceResponse, PersonInsurancesResult
from ..schemas.vehicle import VehicleInfo
from .validation import (
    IdentifierParser,
    parse_swedish_personal_number,
    validate_personal_identification_number,
)
from .vehicle_client import VehicleLookup

logger = get_logger(__name__)


class PersonInsurancesService:
    """Service answering "which insurances does this person have"."""

    def __init__(
        self,
        repository: InsuranceRepository,
        vehicle_lookup: VehicleLookup,
        feature_toggle: FeatureToggle,
        parse_identifier: IdentifierParser = parse_swedish_personal_number,
    ) -> None:
        """Initialize with the policy store, vehicle lookup and feature toggle."""
        self._repository = repository
        self._vehicle_lookup = vehicle_lookup
        self._feature_toggle = feature_toggle
        self._parse_identifier = parse_identifier

    @beartype
    async def get_person_insurances(
        self, personal_identification_number: str | None
    ) -> Result[PersonInsurancesResult, ServiceError]:
        """Get all insurances of a person with their total monthly cost.

        Args:
            personal_identification_number: Identifier exactly as received

        Returns:
            Ok with the aggregated result (possibly empty), or Err with a
            VALIDATION_FAILED or AGGREGATION_FAILED error
        """
        validated = validate_personal_identification_number(
            personal_identification_number, self._parse_identifier
        )
        if isinstance(validated, Err):
            logger.warning(
                "Validation failed for person insurances query: %s",
                validated.error.message,
            )
            return validated

        pin = validated.unwrap()
        stored = await self._repository.get_by_personal_id(pin)
        if isinstance(stored, Err):
            logger.error(
                "Failed to load insurances for %s: %s", pin.masked(), stored.error
            )
            return Err(
                ServiceError.aggregation_failed(
                    "Insurances could not be retrieved", stored.error
                )
            )

        insurances = stored.unwrap()
        if not insurances:
            logger.info("No insurances found for person: %s", pin.masked())
            return Ok(PersonInsurancesResult.from_insurances(pin.value, []))

        vehicles = await self._fetch_vehicle_details(insurances)
        responses = [
            InsuranceResponse.from_insurance(insurance, vehicles[index])
            for index, insurance in enumerate(insurances)
        ]
        return Ok(PersonInsurancesResult.from_insurances(pin.value, responses))

    async def _fetch_vehicle_details(
        self, insurances: list[Insurance]
    ) -> list[VehicleInfo | None]:
        """Vehicle details per insurance, ``None`` where not attached."""
        details: list[VehicleInfo | None] = [None] * len(insurances)
        pending: list[tuple[int, str]] = []
        for index, insurance in enumerate(insurances):
            reg = insurance.vehicle_registration_number
            if insurance.requires_vehicle_lookup and reg is not None:
                pending.append((index, reg))
        if not pending:
            return details

        if not self._feature_toggle.is_enabled(ENABLE_DETAILED_VEHICLE_INFO):
            logger.debug("%s is disabled", ENABLE_DETAILED_VEHICLE_INFO)
            return details

        found = await asyncio.gather(*(self._lookup_vehicle(reg) for _, reg in pending))
        for (index, _), vehicle in zip(pending, found):
            details[index] = vehicle
        return details

    async def _lookup_vehicle(self, registration_number: str) -> VehicleInfo | None:
        try:
            result = await self._vehicle_lookup.get_vehicle_info(registration_number)
        except Exception as e:
            logger.error(
                "Vehicle lookup raised for registration number %s: %r",
                registration_number,
                e,
            )
            return None

        if isinstance(result, Err):
            logger.error(
                "Error fetching vehicle info for registration number %s: %s",
                registration_number,
                result.error,
            )
            return None

        vehicle = result.unwrap()
        if vehicle is None:
            logger.info("No vehicle info for registration number %s", registration_number)
        return vehicle
