# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Runtime feature toggles.

Flags are passed to services as a ``FeatureToggle`` capability instead of
being read from global state. ``SettingsFeatureToggle`` re-reads the
``FEATURE_*`` environment on every call so flips take effect on the next
request without a restart.
"""

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from beartype import beartype
from pydantic import Field, ValidationError
from pydantic.alias_generators import to_snake
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_utils import get_logger

logger = get_logger(__name__)

ENABLE_DETAILED_VEHICLE_INFO = "EnableDetailedVehicleInfo"


@runtime_checkable
class FeatureToggle(Protocol):
    """Answers whether a named feature is currently enabled."""

    def is_enabled(self, flag_name: str) -> bool: ...


class FeatureFlags(BaseSettings):
    """Feature flag values read from ``FEATURE_<NAME>`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FEATURE_",
        frozen=True,
        extra="ignore",
    )

    enable_detailed_vehicle_info: bool = Field(
        default=True,
        description="Attach vehicle details to car insurances",
    )


class SettingsFeatureToggle:
    """Feature toggle backed by a freshly loaded ``FeatureFlags`` per query.

    A flag whose environment value cannot be parsed as a boolean is off.
    """

    @beartype
    def is_enabled(self, flag_name: str) -> bool:
        try:
            flags = FeatureFlags()
        except ValidationError as e:
            logger.error(
                "Invalid feature flag configuration, treating %s as disabled: %s",
                flag_name,
                e,
            )
            return False
        value = getattr(flags, to_snake(flag_name), None)
        return value is True


class StaticFeatureToggle:
    """Feature toggle with a fixed set of flags; unknown flags are off."""

    @beartype
    def __init__(self, flags: Mapping[str, bool] | None = None) -> None:
        self._flags = dict(flags or {})

    @beartype
    def is_enabled(self, flag_name: str) -> bool:
        return self._flags.get(flag_name, False)
