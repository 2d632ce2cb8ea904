"""ThreadPilot - application factories for the insurance and vehicle services."""

import logging
from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager, AsyncExitStack, asynccontextmanager

import uvicorn
from beartype import beartype
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api.response_patterns import request_validation_error_handler
from .api.v1 import health_router, insurance_router, vehicle_router
from .core.config import Settings, get_settings
from .core.database import Database, DatabaseConfig
from .core.features import FeatureToggle, SettingsFeatureToggle
from .core.logging_utils import configure_logging, get_logger
from .repositories.insurance_repository import (
    InMemoryInsuranceRepository,
    InsuranceRepository,
    PostgresInsuranceRepository,
)
from .repositories.seed_data import SEED_INSURANCES, SEED_VEHICLES
from .repositories.vehicle_repository import (
    InMemoryVehicleRepository,
    PostgresVehicleRepository,
    VehicleRepository,
)
from .services.insurance_service import PersonInsurancesService
from .services.vehicle_client import HttpVehicleLookup, LocalVehicleLookup, VehicleLookup
from .services.vehicle_service import VehicleService

logger = get_logger(__name__)

Lifespan = Callable[[FastAPI], AbstractAsyncContextManager[None]]


async def _open_database(settings: Settings, stack: AsyncExitStack) -> Database | None:
    """Connect the pool when a database is configured; ``None`` otherwise."""
    if not settings.uses_database:
        return None

    db = Database(DatabaseConfig.from_settings(settings))
    await db.connect()
    stack.push_async_callback(db.disconnect)
    return db


def _vehicle_repository(db: Database | None) -> VehicleRepository:
    if db is None:
        logger.info("No database configured, serving seeded vehicles")
        return InMemoryVehicleRepository(SEED_VEHICLES)
    return PostgresVehicleRepository(db)


def _insurance_repository(db: Database | None) -> InsuranceRepository:
    if db is None:
        logger.info("No database configured, serving seeded insurances")
        return InMemoryInsuranceRepository(SEED_INSURANCES)
    return PostgresInsuranceRepository(db)


def _configure(settings: Settings) -> None:
    configure_logging(level=settings.log_level)
    logging.getLogger("threadpilot").setLevel(settings.log_level)


def _base_app(
    service: str, description: str, settings: Settings, lifespan: Lifespan
) -> FastAPI:
    app = FastAPI(
        title=f"{settings.app_name} {service.capitalize()} Service",
        description=description,
        version=__version__,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json" if not settings.is_production else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.service_name = f"{settings.app_name} {service}"

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api_cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.include_router(health_router, tags=["health"])
    return app


@beartype
def create_insurance_app(
    settings: Settings | None = None,
    *,
    repository: InsuranceRepository | None = None,
    vehicle_lookup: VehicleLookup | None = None,
    feature_toggle: FeatureToggle | None = None,
) -> FastAPI:
    """Create the insurance service application.

    Args:
        settings: Application settings, read from the environment if omitted
        repository: Policy store; seeded in-memory or PostgreSQL if omitted
        vehicle_lookup: Vehicle lookup; HTTP client when
            ``vehicle_service_base_url`` is set, in-process otherwise
        feature_toggle: Feature flags; environment backed if omitted

    Returns:
        FastAPI: Configured application instance
    """
    settings = settings or get_settings()
    _configure(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info(
            "Starting %s insurance service in %s mode", settings.app_name, settings.api_env
        )
        async with AsyncExitStack() as stack:
            needs_store = repository is None or (
                vehicle_lookup is None and settings.vehicle_service_base_url is None
            )
            db = await _open_database(settings, stack) if needs_store else None

            lookup = vehicle_lookup
            if lookup is None and settings.vehicle_service_base_url is not None:
                http_lookup = HttpVehicleLookup.from_settings(settings)
                stack.push_async_callback(http_lookup.aclose)
                lookup = http_lookup
            elif lookup is None:
                lookup = LocalVehicleLookup(VehicleService(_vehicle_repository(db)))

            app.state.person_insurances_service = PersonInsurancesService(
                repository=_insurance_repository(db) if repository is None else repository,
                vehicle_lookup=lookup,
                feature_toggle=(
                    SettingsFeatureToggle() if feature_toggle is None else feature_toggle
                ),
            )
            yield
            logger.info("Shutting down %s insurance service", settings.app_name)

    app = _base_app(
        "insurance",
        "Lists a person's insurances with vehicle details and total monthly cost",
        settings,
        lifespan,
    )
    app.include_router(insurance_router)
    return app


@beartype
def create_vehicle_app(
    settings: Settings | None = None,
    *,
    repository: VehicleRepository | None = None,
) -> FastAPI:
    """Create the vehicle service application."""
    settings = settings or get_settings()
    _configure(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info(
            "Starting %s vehicle service in %s mode", settings.app_name, settings.api_env
        )
        async with AsyncExitStack() as stack:
            db = await _open_database(settings, stack) if repository is None else None
            app.state.vehicle_service = VehicleService(
                _vehicle_repository(db) if repository is None else repository
            )
            yield
            logger.info("Shutting down %s vehicle service", settings.app_name)

    app = _base_app(
        "vehicle",
        "Vehicle information by registration number",
        settings,
        lifespan,
    )
    app.include_router(vehicle_router)
    return app


@beartype
def main() -> None:
    """Run the service selected by ``settings.service``."""
    settings = get_settings()
    factory = (
        "threadpilot.main:create_vehicle_app"
        if settings.service == "vehicle"
        else "threadpilot.main:create_insurance_app"
    )

    uvicorn.run(
        factory,
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.is_development,
        log_level="info" if not settings.is_production else "error",
    )


if __name__ == "__main__":
    main()
