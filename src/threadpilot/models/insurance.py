# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Insurance domain models with strict validation and business rules."""

from decimal import Decimal
from enum import Enum

from beartype import beartype
from pydantic import Field, field_validator, model_validator

from .base import IdentifiableModel


class InsuranceType(str, Enum):
    """Enumeration of available insurance types."""

    PERSONAL_HEALTH = "PersonalHealth"
    CAR = "Car"
    PET = "Pet"


@beartype
class Insurance(IdentifiableModel):
    """One insurance policy owned by a person."""

    personal_id: str = Field(
        ..., min_length=1, description="Owner's personal identification number"
    )

    monthly_cost: Decimal = Field(
        ...,
        gt=Decimal("0"),
        decimal_places=2,
        max_digits=10,
        description="Monthly cost of the policy",
    )

    type: InsuranceType = Field(..., description="Type of insurance policy")

    vehicle_registration_number: str | None = Field(
        default=None,
        max_length=20,
        description="Insured vehicle, for car insurance only",
    )

    @field_validator("vehicle_registration_number")
    @classmethod
    def empty_registration_is_none(cls, v: str | None) -> str | None:
        """Treat a blank registration number as missing."""
        return v or None

    @model_validator(mode="after")
    @beartype
    def validate_vehicle_link(self) -> "Insurance":
        """Only car insurances may reference a vehicle."""
        if self.vehicle_registration_number and self.type != InsuranceType.CAR:
            raise ValueError(
                "Vehicle registration number is only allowed for car insurance"
            )
        return self

    @property
    def requires_vehicle_lookup(self) -> bool:
        """Whether the policy can be enriched with vehicle details."""
        return (
            self.type == InsuranceType.CAR
            and self.vehicle_registration_number is not None
        )
