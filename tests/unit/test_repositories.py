"""Unit tests for the insurance and vehicle stores."""

import asyncio
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any
from unittest.mock import AsyncMock
from uuid import uuid4

import asyncpg
import pytest

from threadpilot.core.config import Settings
from threadpilot.core import database as database_module
from threadpilot.core.database import Database, DatabaseConfig, get_database
from threadpilot.core.result_types import Err, Ok
from threadpilot.models.identifiers import PersonalIdentificationNumber, RegistrationNumber
from threadpilot.models.insurance import InsuranceType
from threadpilot.repositories.insurance_repository import (
    InMemoryInsuranceRepository,
    InsuranceRepository,
    PostgresInsuranceRepository,
)
from threadpilot.repositories.seed_data import SEED_INSURANCES, SEED_VEHICLES
from threadpilot.repositories.vehicle_repository import (
    InMemoryVehicleRepository,
    PostgresVehicleRepository,
    VehicleRepository,
)
from tests.fixtures.test_data import (
    CAR_AND_PET_OWNER,
    HEALTH_AND_PET_OWNER,
    PERSON_WITHOUT_POLICIES,
)

NOW = datetime(2025, 1, 1, tzinfo=timezone.utc)

DRIVER_ERRORS = [
    asyncpg.PostgresError("relation \"insurances\" does not exist"),
    asyncpg.InterfaceError("pool is closed"),
    OSError("connection refused"),
    asyncio.TimeoutError(),
]


def _pin(value: str) -> PersonalIdentificationNumber:
    return PersonalIdentificationNumber(value=value)


def _insurance_row(**overrides: Any) -> dict[str, Any]:
    row: dict[str, Any] = {
        "id": uuid4(),
        "personal_id": CAR_AND_PET_OWNER,
        "monthly_cost": Decimal("30.00"),
        "insurance_type": "Car",
        "vehicle_registration_number": "ABC123",
        "created_at": NOW,
        "updated_at": None,
    }
    row.update(overrides)
    return row


def _vehicle_row(**overrides: Any) -> dict[str, Any]:
    row: dict[str, Any] = {
        "id": uuid4(),
        "registration_number": "ABC123",
        "make": "Volvo",
        "model": "XC90",
        "year": 2022,
        "color": "Black",
        "created_at": NOW,
        "updated_at": None,
    }
    row.update(overrides)
    return row


class TestSeedData:
    def test_seeded_insurances(self) -> None:
        by_owner = {
            owner: [(i.type, i.monthly_cost) for i in SEED_INSURANCES if i.personal_id == owner]
            for owner in (HEALTH_AND_PET_OWNER, CAR_AND_PET_OWNER)
        }

        assert by_owner[HEALTH_AND_PET_OWNER] == [
            (InsuranceType.PERSONAL_HEALTH, Decimal("20.00")),
            (InsuranceType.PET, Decimal("10.00")),
        ]
        assert by_owner[CAR_AND_PET_OWNER] == [
            (InsuranceType.CAR, Decimal("30.00")),
            (InsuranceType.PET, Decimal("10.00")),
        ]

    def test_seeded_vehicles(self) -> None:
        assert [v.registration_number for v in SEED_VEHICLES] == [
            "ABC123",
            "DEF456",
            "GHI789",
        ]


class TestInMemoryInsuranceRepository:
    async def test_returns_owner_policies_in_insertion_order(self) -> None:
        repository = InMemoryInsuranceRepository(SEED_INSURANCES)

        result = await repository.get_by_personal_id(_pin(CAR_AND_PET_OWNER))

        assert [i.type for i in result.unwrap()] == [InsuranceType.CAR, InsuranceType.PET]

    async def test_no_policies_is_empty_list(self) -> None:
        repository = InMemoryInsuranceRepository(SEED_INSURANCES)

        result = await repository.get_by_personal_id(_pin(PERSON_WITHOUT_POLICIES))

        assert result == Ok([])

    def test_satisfies_protocol(self) -> None:
        assert isinstance(InMemoryInsuranceRepository(), InsuranceRepository)


class TestPostgresInsuranceRepository:
    async def test_maps_rows(self) -> None:
        db = AsyncMock(spec=Database)
        db.fetch.return_value = [
            _insurance_row(),
            _insurance_row(
                monthly_cost=Decimal("10.00"),
                insurance_type="Pet",
                vehicle_registration_number=None,
            ),
        ]
        repository = PostgresInsuranceRepository(db)

        result = await repository.get_by_personal_id(_pin(CAR_AND_PET_OWNER))

        car, pet = result.unwrap()
        assert car.type == InsuranceType.CAR
        assert car.vehicle_registration_number == "ABC123"
        assert pet.type == InsuranceType.PET
        query, personal_id = db.fetch.await_args.args
        assert "ORDER BY created_at, id" in query
        assert personal_id == CAR_AND_PET_OWNER

    async def test_no_rows_is_empty_list(self) -> None:
        db = AsyncMock(spec=Database)
        db.fetch.return_value = []

        result = await PostgresInsuranceRepository(db).get_by_personal_id(
            _pin(PERSON_WITHOUT_POLICIES)
        )

        assert result == Ok([])

    @pytest.mark.parametrize("error", DRIVER_ERRORS)
    async def test_driver_errors_become_err(self, error: Exception) -> None:
        db = AsyncMock(spec=Database)
        db.fetch.side_effect = error

        result = await PostgresInsuranceRepository(db).get_by_personal_id(
            _pin(CAR_AND_PET_OWNER)
        )

        assert isinstance(result, Err)
        assert result.error.startswith("Database error")

    async def test_malformed_row_becomes_err(self) -> None:
        db = AsyncMock(spec=Database)
        db.fetch.return_value = [_insurance_row(monthly_cost=Decimal("-1.00"))]

        result = await PostgresInsuranceRepository(db).get_by_personal_id(
            _pin(CAR_AND_PET_OWNER)
        )

        assert isinstance(result, Err)

    async def test_unconnected_database_becomes_err(self) -> None:
        db = Database(DatabaseConfig(url="postgresql://localhost/threadpilot"))

        result = await PostgresInsuranceRepository(db).get_by_personal_id(
            _pin(CAR_AND_PET_OWNER)
        )

        assert result == Err("Database error: not connected")

    async def test_cancellation_propagates(self) -> None:
        db = AsyncMock(spec=Database)
        db.fetch.side_effect = asyncio.CancelledError()

        with pytest.raises(asyncio.CancelledError):
            await PostgresInsuranceRepository(db).get_by_personal_id(
                _pin(CAR_AND_PET_OWNER)
            )


class TestVehicleRepositories:
    async def test_in_memory_lookup(self) -> None:
        repository = InMemoryVehicleRepository(SEED_VEHICLES)

        found = await repository.get_by_registration_number(
            RegistrationNumber(value="GHI789")
        )
        missing = await repository.get_by_registration_number(
            RegistrationNumber(value="ZZZ999")
        )

        assert found.unwrap() is not None
        assert found.unwrap().make == "Audi"
        assert missing == Ok(None)

    def test_satisfies_protocol(self) -> None:
        assert isinstance(InMemoryVehicleRepository(), VehicleRepository)

    async def test_postgres_maps_row(self) -> None:
        db = AsyncMock(spec=Database)
        db.fetchrow.return_value = _vehicle_row()

        result = await PostgresVehicleRepository(db).get_by_registration_number(
            RegistrationNumber(value="ABC123")
        )

        assert result.unwrap() is not None
        assert result.unwrap().model == "XC90"
        db.fetchrow.assert_awaited_once()

    async def test_postgres_missing_row(self) -> None:
        db = AsyncMock(spec=Database)
        db.fetchrow.return_value = None

        result = await PostgresVehicleRepository(db).get_by_registration_number(
            RegistrationNumber(value="ABC123")
        )

        assert result == Ok(None)

    @pytest.mark.parametrize("error", DRIVER_ERRORS)
    async def test_postgres_driver_errors(self, error: Exception) -> None:
        db = AsyncMock(spec=Database)
        db.fetchrow.side_effect = error

        result = await PostgresVehicleRepository(db).get_by_registration_number(
            RegistrationNumber(value="ABC123")
        )

        assert isinstance(result, Err)


    async def test_postgres_unconnected_database(self) -> None:
        db = Database(DatabaseConfig(url="postgresql://localhost/threadpilot"))

        result = await PostgresVehicleRepository(db).get_by_registration_number(
            RegistrationNumber(value="ABC123")
        )

        assert result == Err("Database error: not connected")

class TestDatabase:
    async def test_acquire_requires_connection(self) -> None:
        db = Database(DatabaseConfig(url="postgresql://localhost/threadpilot"))

        assert not db.is_connected
        with pytest.raises(RuntimeError, match="Database not connected"):
            async with db.acquire():
                pass

    def test_config_requires_url(self, settings: Settings) -> None:
        with pytest.raises(ValueError, match="database_url"):
            DatabaseConfig.from_settings(settings)

    def test_get_database_is_process_wide(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DATABASE_URL", "postgresql://localhost/threadpilot")
        monkeypatch.setattr(database_module, "_database", None)

        db = get_database()

        assert get_database() is db
        assert not db.is_connected
