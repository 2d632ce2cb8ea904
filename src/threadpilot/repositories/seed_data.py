"""Seed records served when no database is configured.

The same rows are inserted by the initial alembic migration.
"""

from datetime import datetime, timezone
from decimal import Decimal
from uuid import UUID

from ..models.insurance import Insurance, InsuranceType
from ..models.vehicle import Vehicle

SEEDED_AT = datetime(2025, 1, 1, tzinfo=timezone.utc)

SEED_INSURANCES: tuple[Insurance, ...] = (
    Insurance(
        id=UUID("33333333-3333-3333-3333-333333333333"),
        personal_id="19620421-3323",
        monthly_cost=Decimal("20.00"),
        type=InsuranceType.PERSONAL_HEALTH,
        created_at=SEEDED_AT,
    ),
    Insurance(
        id=UUID("44444444-4444-4444-4444-444444444444"),
        personal_id="19631002-4622",
        monthly_cost=Decimal("30.00"),
        type=InsuranceType.CAR,
        vehicle_registration_number="ABC123",
        created_at=SEEDED_AT,
    ),
    Insurance(
        id=UUID("55555555-5555-5555-5555-555555555555"),
        personal_id="19620421-3323",
        monthly_cost=Decimal("10.00"),
        type=InsuranceType.PET,
        created_at=SEEDED_AT,
    ),
    Insurance(
        id=UUID("66666666-6666-6666-6666-666666666666"),
        personal_id="19631002-4622",
        monthly_cost=Decimal("10.00"),
        type=InsuranceType.PET,
        created_at=SEEDED_AT,
    ),
)

SEED_VEHICLES: tuple[Vehicle, ...] = (
    Vehicle(
        id=UUID("33333333-3333-3333-3333-333333333333"),
        registration_number="ABC123",
        make="Volvo",
        model="XC90",
        year=2022,
        color="Black",
        created_at=SEEDED_AT,
    ),
    Vehicle(
        id=UUID("44444444-4444-4444-4444-444444444444"),
        registration_number="DEF456",
        make="BMW",
        model="X5",
        year=2021,
        color="White",
        created_at=SEEDED_AT,
    ),
    Vehicle(
        id=UUID("55555555-5555-5555-5555-555555555555"),
        registration_number="GHI789",
        make="Audi",
        model="Q7",
        year=2023,
        color="Silver",
        created_at=SEEDED_AT,
    ),
)
