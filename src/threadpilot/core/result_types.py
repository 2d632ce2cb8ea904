# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Two-valued results for store, lookup and service calls.

Every expected outcome (found, not found, rejected input, unreachable
backend) comes back as ``Ok`` or ``Err``; exceptions are left for
programming errors and cancellation.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar

from attrs import frozen
from beartype import beartype

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")


@frozen
class Ok(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T

    @beartype
    def is_ok(self) -> bool:
        return True

    @beartype
    def is_err(self) -> bool:
        return False

    @property
    def ok_value(self) -> T:
        return self.value

    @property
    def err_value(self) -> None:
        return None

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def unwrap_err(self) -> NoReturn:
        raise ValueError("Called unwrap_err on Ok value")

    def map(self, fn: Callable[[T], U]) -> "Ok[U]":
        """Transform the carried value."""
        return Ok(fn(self.value))

    def map_err(self, fn: Callable[[Any], Any]) -> "Ok[T]":
        """Leave a success untouched."""
        return self


@frozen
class Err(Generic[E]):
    """Failed outcome carrying ``error``."""

    error: E

    @beartype
    def is_ok(self) -> bool:
        return False

    @beartype
    def is_err(self) -> bool:
        return True

    @property
    def ok_value(self) -> None:
        return None

    @property
    def err_value(self) -> E:
        return self.error

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Called unwrap on Err value: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    def unwrap_err(self) -> E:
        return self.error

    def map(self, fn: Callable[[Any], Any]) -> "Err[E]":
        """Leave a failure untouched."""
        return self

    def map_err(self, fn: Callable[[E], F]) -> "Err[F]":
        """Transform the carried error, e.g. to a plainer message."""
        return Err(fn(self.error))


if TYPE_CHECKING:
    Result = Ok[T] | Err[E]
else:

    class Result(Generic[T, E]):
        """``Result[T, E]`` for annotations, plus ``ok``/``err`` factories."""

        @staticmethod
        def ok(value: T) -> Ok[T]:
            return Ok(value)

        @staticmethod
        def err(error: E) -> Err[E]:
            return Err(error)

        def __class_getitem__(cls, params: Any) -> Any:
            # Runtime checkers only need to see the two concrete classes
            return Ok[Any] | Err[Any]
