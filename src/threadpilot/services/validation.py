# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Request identifier validation.

Identification numbers are checked by a replaceable parser: a callable that
returns the canonical form of a valid number or ``None``. The default parser
understands Swedish personal identity numbers (personnummer) in both ten
and twelve digit forms. It also accepts coordination numbers (samordningsnummer,
birth day plus 60), which stricter personnummer parsers reject as a separate
identifier type; replace the parser to narrow this.
"""

import re
from collections.abc import Callable
from datetime import date

from beartype import beartype
from pydantic import ValidationError

from ..core.errors import ServiceError
from ..core.result_types import Err, Ok, Result
from ..models.identifiers import PersonalIdentificationNumber, RegistrationNumber

IdentifierParser = Callable[[str], str | None]

MAX_PERSONAL_NUMBER_LENGTH = 13
COORDINATION_DAY_OFFSET = 60

PIN_REQUIRED = "Personal identification number is required."
PIN_TOO_LONG = (
    f"Personal identification number must not exceed "
    f"{MAX_PERSONAL_NUMBER_LENGTH} characters."
)
PIN_INVALID = "Personal identification number is invalid."

_PERSONAL_NUMBER = re.compile(
    r"^(?P<century>\d{2})?(?P<yy>\d{2})(?P<mm>\d{2})(?P<dd>\d{2})"
    r"(?P<delimiter>[-+]?)(?P<serial>\d{3})(?P<check>\d)$"
)
_REGISTRATION_CHARACTERS = re.compile(r"^[a-zA-Z0-9]+$")


def _luhn_check_digit_valid(digits: str) -> bool:
    total = 0
    for index, char in enumerate(digits[:-1]):
        product = int(char) * (2 if index % 2 == 0 else 1)
        total += product // 10 + product % 10
    return (10 - total % 10) % 10 == int(digits[-1])


def _birth_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        return None


@beartype
def parse_swedish_personal_number(raw: str, *, today: date | None = None) -> str | None:
    """Return ``raw`` as ``YYYYMMDD-NNNN`` if it is a valid personnummer.

    Ten digit numbers get the most recent century that does not put the
    birth date in the future; a ``+`` delimiter marks a person aged 100 or
    more and moves the date back another century.
    """
    match = _PERSONAL_NUMBER.match(raw.strip())
    if match is None:
        return None

    today = today or date.today()
    yy, mm, dd = match["yy"], match["mm"], match["dd"]
    month = int(mm)
    day = int(dd)
    if day > COORDINATION_DAY_OFFSET:
        day -= COORDINATION_DAY_OFFSET

    if match["century"] is not None:
        year = int(match["century"] + yy)
        born = _birth_date(year, month, day)
    else:
        year = today.year - (today.year - int(yy)) % 100
        born = _birth_date(year, month, day)
        if born is not None and born > today:
            year -= 100
            born = _birth_date(year, month, day)
        if match["delimiter"] == "+":
            year -= 100
            born = _birth_date(year, month, day)

    if born is None or born > today:
        return None

    if not _luhn_check_digit_valid(f"{yy}{mm}{dd}{match['serial']}{match['check']}"):
        return None

    return f"{year:04d}{mm}{dd}-{match['serial']}{match['check']}"


@beartype
def is_valid_swedish_personal_number(raw: str) -> bool:
    return parse_swedish_personal_number(raw) is not None


@beartype
def validate_personal_identification_number(
    raw: str | None,
    parser: IdentifierParser = parse_swedish_personal_number,
) -> Result[PersonalIdentificationNumber, ServiceError]:
    """Validate and normalize a raw identification number.

    Args:
        raw: Identification number exactly as received
        parser: Format check returning the canonical form or None

    Returns:
        Result containing the normalized identifier or a validation error
    """
    if raw is None or not raw.strip():
        return Err(ServiceError.validation_failed(PIN_REQUIRED))

    value = raw.strip()
    if len(value) > MAX_PERSONAL_NUMBER_LENGTH:
        return Err(ServiceError.validation_failed(PIN_TOO_LONG))

    canonical = parser(value)
    if canonical is None:
        return Err(ServiceError.validation_failed(PIN_INVALID))

    return Ok(PersonalIdentificationNumber(value=canonical))


@beartype
def validate_registration_number(
    raw: str | None,
) -> Result[RegistrationNumber, ServiceError]:
    """Validate a raw vehicle registration number."""
    if raw is None or not raw.strip():
        return Err(ServiceError.validation_failed("Registration number is required."))

    value = raw.strip()
    if not 2 <= len(value) <= 20:
        return Err(
            ServiceError.validation_failed(
                "Registration number must be between 2 and 20 characters."
            )
        )
    if not _REGISTRATION_CHARACTERS.match(value):
        return Err(
            ServiceError.validation_failed(
                "Registration number must contain only letters and numbers."
            )
        )

    try:
        return Ok(RegistrationNumber(value=value))
    except ValidationError:
        return Err(
            ServiceError.validation_failed(
                f"Invalid registration number format: {value.upper()}. "
                "Expected format: ABC123"
            )
        )
