# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Vehicle domain model."""

from datetime import datetime

from beartype import beartype
from pydantic import Field, field_validator

from .base import IdentifiableModel


@beartype
class Vehicle(IdentifiableModel):
    """A registered vehicle."""

    registration_number: str = Field(
        ...,
        pattern=r"^[A-Z]{3}[0-9]{3}$",
        description="Registration number in ABC123 format",
    )
    make: str = Field(..., min_length=1, max_length=100)
    model: str = Field(..., min_length=1, max_length=100)
    year: int = Field(..., ge=1900, description="Model year")
    color: str = Field(..., min_length=1, max_length=50)

    @field_validator("year")
    @classmethod
    @beartype
    def validate_year(cls, v: int) -> int:
        """Model year cannot be later than next year."""
        latest = datetime.now().year + 1
        if v > latest:
            raise ValueError(f"Invalid year: {v}; must be between 1900 and {latest}")
        return v
