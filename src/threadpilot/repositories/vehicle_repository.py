# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Vehicle store."""

from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

from beartype import beartype

from ..core.database import Database
from ..core.logging_utils import get_logger
from ..core.result_types import Err, Ok, Result
from ..models.identifiers import RegistrationNumber
from ..models.vehicle import Vehicle
from .insurance_repository import STORE_ERRORS

logger = get_logger(__name__)


@runtime_checkable
class VehicleRepository(Protocol):
    """Read access to registered vehicles."""

    async def get_by_registration_number(
        self, registration_number: RegistrationNumber
    ) -> Result[Vehicle | None, str]:
        """Return the vehicle, or ``Ok(None)`` when it is not registered."""
        ...


class InMemoryVehicleRepository:
    """Vehicle store over a fixed set of records."""

    def __init__(self, vehicles: Iterable[Vehicle] = ()) -> None:
        self._vehicles = {v.registration_number: v for v in vehicles}

    @beartype
    async def get_by_registration_number(
        self, registration_number: RegistrationNumber
    ) -> Result[Vehicle | None, str]:
        return Ok(self._vehicles.get(registration_number.value))


class PostgresVehicleRepository:
    """Vehicle store backed by the ``vehicles`` table."""

    _SELECT_BY_REGISTRATION = """
        SELECT id, registration_number, make, model, year, color,
               created_at, updated_at
        FROM vehicles
        WHERE registration_number = $1
    """

    def __init__(self, db: Database) -> None:
        self._db = db

    @beartype
    async def get_by_registration_number(
        self, registration_number: RegistrationNumber
    ) -> Result[Vehicle | None, str]:
        if not self._db.is_connected:
            logger.error(
                "Vehicle query for %s without a database connection",
                registration_number,
            )
            return Err("Database error: not connected")
        try:
            row = await self._db.fetchrow(
                self._SELECT_BY_REGISTRATION, registration_number.value
            )
            if row is None:
                return Ok(None)
            return Ok(self._row_to_vehicle(row))
        except STORE_ERRORS as e:
            logger.error("Vehicle query failed for %s: %s", registration_number, e)
            return Err(f"Database error: {str(e)}")

    @staticmethod
    def _row_to_vehicle(row: Any) -> Vehicle:
        return Vehicle.model_validate(dict(row))
