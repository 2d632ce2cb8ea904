"""Vehicle response schema."""

from pydantic import Field

from ..models.vehicle import Vehicle
from .common import ApiSchema


class VehicleInfo(ApiSchema):
    """Vehicle attributes returned by the vehicle service."""

    registration_number: str = Field(..., min_length=1)
    make: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    year: int = Field(..., ge=1900)
    color: str = Field(..., min_length=1)

    @classmethod
    def from_vehicle(cls, vehicle: Vehicle) -> "VehicleInfo":
        return cls(
            registration_number=vehicle.registration_number,
            make=vehicle.make,
            model=vehicle.model,
            year=vehicle.year,
            color=vehicle.color,
        )
