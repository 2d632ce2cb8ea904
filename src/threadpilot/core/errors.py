# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Service-level error values carried inside ``Err`` results."""

from enum import Enum

from attrs import field, frozen
from beartype import beartype


class ErrorKind(str, Enum):
    """Failure conditions that cross a service boundary."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    AGGREGATION_FAILED = "AGGREGATION_FAILED"
    VEHICLE_LOOKUP_FAILED = "VEHICLE_LOOKUP_FAILED"
    TIMEOUT = "TIMEOUT"


_HTTP_STATUS: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION_FAILED: 400,
    ErrorKind.AGGREGATION_FAILED: 500,
    ErrorKind.VEHICLE_LOOKUP_FAILED: 500,
    ErrorKind.TIMEOUT: 504,
}


@frozen
class ServiceError:
    """A single, clear failure signal returned by a service."""

    kind: ErrorKind = field()
    message: str = field()
    details: tuple[str, ...] = field(default=(), converter=tuple)

    @property
    def http_status(self) -> int:
        """HTTP status code the API layer reports for this error."""
        return _HTTP_STATUS[self.kind]

    @property
    def is_client_error(self) -> bool:
        """Whether the caller can fix the request to resolve this error."""
        return self.http_status < 500

    @classmethod
    @beartype
    def validation_failed(cls, message: str, *details: str) -> "ServiceError":
        return cls(ErrorKind.VALIDATION_FAILED, message, details or (message,))

    @classmethod
    @beartype
    def aggregation_failed(cls, message: str, *details: str) -> "ServiceError":
        return cls(ErrorKind.AGGREGATION_FAILED, message, details)

    @classmethod
    @beartype
    def vehicle_lookup_failed(cls, message: str, *details: str) -> "ServiceError":
        return cls(ErrorKind.VEHICLE_LOOKUP_FAILED, message, details)

    @classmethod
    @beartype
    def timeout(cls, message: str) -> "ServiceError":
        return cls(ErrorKind.TIMEOUT, message)
