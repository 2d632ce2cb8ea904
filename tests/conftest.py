"""Test configuration and fixtures.

Applications are built from explicit ``Settings`` and injected stores so
no test depends on the process environment, a database or the network.
"""

from collections.abc import Generator, Iterator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from threadpilot.core.config import Settings, clear_settings_cache
from threadpilot.core.features import ENABLE_DETAILED_VEHICLE_INFO, StaticFeatureToggle
from threadpilot.core.result_types import Ok
from threadpilot.main import create_insurance_app, create_vehicle_app
from threadpilot.repositories.insurance_repository import InMemoryInsuranceRepository
from threadpilot.repositories.seed_data import SEED_INSURANCES, SEED_VEHICLES
from threadpilot.repositories.vehicle_repository import InMemoryVehicleRepository
from threadpilot.services.insurance_service import PersonInsurancesService
from threadpilot.services.vehicle_client import LocalVehicleLookup, VehicleLookup
from threadpilot.services.vehicle_service import VehicleService
from tests.fixtures.test_data import VOLVO


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Iterator[None]:
    """Every test starts without a cached Settings instance."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def settings() -> Settings:
    """Settings for an in-memory, in-process deployment."""
    return Settings(
        database_url=None,
        vehicle_service_base_url=None,
        api_env="development",
        log_level="DEBUG",
        request_timeout_seconds=5.0,
    )


@pytest.fixture
def insurance_repository() -> InMemoryInsuranceRepository:
    return InMemoryInsuranceRepository(SEED_INSURANCES)


@pytest.fixture
def vehicle_repository() -> InMemoryVehicleRepository:
    return InMemoryVehicleRepository(SEED_VEHICLES)


@pytest.fixture
def vehicle_service(vehicle_repository: InMemoryVehicleRepository) -> VehicleService:
    return VehicleService(vehicle_repository)


@pytest.fixture
def toggle_on() -> StaticFeatureToggle:
    return StaticFeatureToggle({ENABLE_DETAILED_VEHICLE_INFO: True})


@pytest.fixture
def toggle_off() -> StaticFeatureToggle:
    return StaticFeatureToggle({ENABLE_DETAILED_VEHICLE_INFO: False})


@pytest.fixture
def vehicle_lookup() -> AsyncMock:
    """Vehicle lookup that finds the seeded Volvo for any registration number."""
    lookup = AsyncMock(spec=VehicleLookup)
    lookup.get_vehicle_info.return_value = Ok(VOLVO)
    return lookup


@pytest.fixture
def insurance_service(
    insurance_repository: InMemoryInsuranceRepository,
    vehicle_service: VehicleService,
    toggle_on: StaticFeatureToggle,
) -> PersonInsurancesService:
    """Service wired to the seed data and the in-process vehicle service."""
    return PersonInsurancesService(
        repository=insurance_repository,
        vehicle_lookup=LocalVehicleLookup(vehicle_service),
        feature_toggle=toggle_on,
    )


@pytest.fixture
def insurance_client(
    settings: Settings,
    insurance_repository: InMemoryInsuranceRepository,
    vehicle_service: VehicleService,
    toggle_on: StaticFeatureToggle,
) -> Generator[TestClient, None, None]:
    """Test client for the insurance service with seeded stores."""
    app = create_insurance_app(
        settings,
        repository=insurance_repository,
        vehicle_lookup=LocalVehicleLookup(vehicle_service),
        feature_toggle=toggle_on,
    )
    with TestClient(app) as client:
        yield client


@pytest.fixture
def vehicle_client(
    settings: Settings, vehicle_repository: InMemoryVehicleRepository
) -> Generator[TestClient, None, None]:
    """Test client for the vehicle service with seeded vehicles."""
    app = create_vehicle_app(settings, repository=vehicle_repository)
    with TestClient(app) as client:
        yield client
