# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Vehicle lookup adapters used to enrich car insurances.

A lookup answers ``Ok(VehicleInfo)``, ``Ok(None)`` when the vehicle is not
registered, or ``Err`` when the vehicle source could not be reached. It
never raises for an unavailable vehicle source.
"""

import asyncio
from typing import Protocol, runtime_checkable
from urllib.parse import quote

import httpx
from attrs import field, frozen
from beartype import beartype
from pydantic import ValidationError

from ..core.config import Settings
from ..core.logging_utils import get_logger
from ..core.result_types import Err, Ok, Result
from ..schemas.vehicle import VehicleInfo
from .vehicle_service import VehicleService

logger = get_logger(__name__)


@runtime_checkable
class VehicleLookup(Protocol):
    """Fetches vehicle details by registration number."""

    async def get_vehicle_info(
        self, registration_number: str
    ) -> Result[VehicleInfo | None, str]: ...


@frozen
class RetryConfig:
    """Retry policy for calls to the vehicle service."""

    max_attempts: int = field(default=3)
    initial_delay_seconds: float = field(default=0.2)
    exponential_backoff: bool = field(default=True)

    @beartype
    def delay_before(self, attempt: int) -> float:
        """Seconds to wait before retry number ``attempt`` (1-based)."""
        if not self.exponential_backoff:
            return self.initial_delay_seconds
        return self.initial_delay_seconds * (2 ** (attempt - 1))


class HttpVehicleLookup:
    """Vehicle lookup against the vehicle service HTTP API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        retry: RetryConfig | None = None,
    ) -> None:
        self._client = client
        self._retry = retry or RetryConfig()

    @classmethod
    @beartype
    def from_settings(cls, settings: Settings) -> "HttpVehicleLookup":
        if settings.vehicle_service_base_url is None:
            raise ValueError("vehicle_service_base_url is not configured")
        client = httpx.AsyncClient(
            base_url=settings.vehicle_service_base_url,
            timeout=settings.vehicle_service_timeout_seconds,
            headers={"Accept": "application/json"},
        )
        retry = RetryConfig(
            max_attempts=settings.vehicle_service_max_attempts,
            initial_delay_seconds=settings.vehicle_service_retry_delay_seconds,
        )
        return cls(client, retry)

    @beartype
    async def get_vehicle_info(
        self, registration_number: str
    ) -> Result[VehicleInfo | None, str]:
        path = f"/api/v1/vehicles/{quote(registration_number, safe='')}"
        last_error = "no attempt made"

        for attempt in range(1, self._retry.max_attempts + 1):
            if attempt > 1:
                await asyncio.sleep(self._retry.delay_before(attempt - 1))

            try:
                response = await self._client.get(path)
            except httpx.HTTPError as e:
                last_error = f"Vehicle service request failed: {e!r}"
                logger.warning(
                    "Vehicle lookup attempt %d/%d for %s failed: %s",
                    attempt,
                    self._retry.max_attempts,
                    registration_number,
                    last_error,
                )
                continue

            if response.status_code == httpx.codes.NOT_FOUND:
                logger.info("Vehicle not found: %s", registration_number)
                return Ok(None)

            if response.status_code >= 500:
                last_error = f"Vehicle service returned HTTP {response.status_code}"
                logger.warning(
                    "Vehicle lookup attempt %d/%d for %s failed: %s",
                    attempt,
                    self._retry.max_attempts,
                    registration_number,
                    last_error,
                )
                continue

            if response.is_error:
                return Err(f"Vehicle service returned HTTP {response.status_code}")

            try:
                return Ok(VehicleInfo.model_validate_json(response.content))
            except ValidationError as e:
                return Err(f"Invalid vehicle payload: {e.error_count()} errors")

        return Err(last_error)

    @beartype
    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()


class LocalVehicleLookup:
    """Vehicle lookup served by an in-process ``VehicleService``."""

    def __init__(self, service: VehicleService) -> None:
        self._service = service

    @beartype
    async def get_vehicle_info(
        self, registration_number: str
    ) -> Result[VehicleInfo | None, str]:
        result = await self._service.get_vehicle(registration_number)
        return result.map_err(lambda error: error.message)
