# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Insurance policy store."""

import asyncio
from collections.abc import Iterable
from typing import Any, Protocol, runtime_checkable

import asyncpg
from beartype import beartype
from pydantic import ValidationError

from ..core.database import Database
from ..core.logging_utils import get_logger
from ..core.result_types import Err, Ok, Result
from ..models.identifiers import PersonalIdentificationNumber
from ..models.insurance import Insurance

logger = get_logger(__name__)

STORE_ERRORS = (
    asyncpg.PostgresError,
    asyncpg.InterfaceError,
    asyncio.TimeoutError,
    OSError,
    ValidationError,
)


@runtime_checkable
class InsuranceRepository(Protocol):
    """Read access to a person's insurance policies."""

    async def get_by_personal_id(
        self, personal_id: PersonalIdentificationNumber
    ) -> Result[list[Insurance], str]:
        """Return all policies owned by ``personal_id``; empty when none."""
        ...


class InMemoryInsuranceRepository:
    """Policy store over a fixed set of records, kept in insertion order."""

    def __init__(self, insurances: Iterable[Insurance] = ()) -> None:
        self._insurances = tuple(insurances)

    @beartype
    async def get_by_personal_id(
        self, personal_id: PersonalIdentificationNumber
    ) -> Result[list[Insurance], str]:
        return Ok([i for i in self._insurances if i.personal_id == personal_id.value])


class PostgresInsuranceRepository:
    """Policy store backed by the ``insurances`` table."""

    _SELECT_BY_PERSONAL_ID = """
        SELECT id, personal_id, monthly_cost, insurance_type,
               vehicle_registration_number, created_at, updated_at
        FROM insurances
        WHERE personal_id = $1
        ORDER BY created_at, id
    """

    def __init__(self, db: Database) -> None:
        self._db = db

    @beartype
    async def get_by_personal_id(
        self, personal_id: PersonalIdentificationNumber
    ) -> Result[list[Insurance], str]:
        if not self._db.is_connected:
            logger.error(
                "Insurance query for %s without a database connection",
                personal_id.masked(),
            )
            return Err("Database error: not connected")
        try:
            rows = await self._db.fetch(self._SELECT_BY_PERSONAL_ID, personal_id.value)
            return Ok([self._row_to_insurance(row) for row in rows])
        except STORE_ERRORS as e:
            logger.error("Insurance query failed for %s: %s", personal_id.masked(), e)
            return Err(f"Database error: {str(e)}")

    @staticmethod
    def _row_to_insurance(row: Any) -> Insurance:
        return Insurance.model_validate(
            {
                "id": row["id"],
                "personal_id": row["personal_id"],
                "monthly_cost": row["monthly_cost"],
                "type": row["insurance_type"],
                "vehicle_registration_number": row["vehicle_registration_number"],
                "created_at": row["created_at"],
                "updated_at": row["updated_at"],
            }
        )
