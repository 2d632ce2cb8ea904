# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Identifier value objects shared by the insurance and vehicle domains."""

from beartype import beartype
from pydantic import Field, field_validator

from ..core.logging_utils import mask_identifier
from .base import BaseModelConfig


@beartype
class PersonalIdentificationNumber(BaseModelConfig):
    """A person's identification number; never empty once constructed."""

    value: str = Field(..., min_length=1, description="Identification number")

    @beartype
    def masked(self) -> str:
        """Identification number with its serial digits hidden, for logs."""
        return mask_identifier(self.value)

    def __str__(self) -> str:
        return self.value


@beartype
class RegistrationNumber(BaseModelConfig):
    """Vehicle registration number in the ``ABC123`` format."""

    value: str = Field(
        ...,
        pattern=r"^[A-Z]{3}[0-9]{3}$",
        description="Registration number, three letters followed by three digits",
    )

    @field_validator("value", mode="before")
    @classmethod
    def normalize_case(cls, v: object) -> object:
        """Registration numbers are case-insensitive; store them upper-case."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    def __str__(self) -> str:
        return self.value
