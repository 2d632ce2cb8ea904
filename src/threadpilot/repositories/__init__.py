"""Read-only stores for insurances and vehicles."""

from .insurance_repository import (
    InMemoryInsuranceRepository,
    InsuranceRepository,
    PostgresInsuranceRepository,
)
from .vehicle_repository import (
    InMemoryVehicleRepository,
    PostgresVehicleRepository,
    VehicleRepository,
)

__all__ = [
    "InsuranceRepository",
    "InMemoryInsuranceRepository",
    "PostgresInsuranceRepository",
    "VehicleRepository",
    "InMemoryVehicleRepository",
    "PostgresVehicleRepository",
]
