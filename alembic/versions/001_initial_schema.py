"""Initial insurances and vehicles schema with seed rows.

Revision ID: 001
Revises:
Create Date: 2025-01-01

"""

from collections.abc import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op
from threadpilot.repositories.seed_data import SEED_INSURANCES, SEED_VEHICLES

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create the insurances and vehicles tables and insert seed rows."""
    insurances = op.create_table(
        "insurances",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("personal_id", sa.String(13), nullable=False),
        sa.Column("monthly_cost", sa.Numeric(10, 2), nullable=False),
        sa.Column("insurance_type", sa.String(32), nullable=False),
        sa.Column("vehicle_registration_number", sa.String(20), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_insurances")),
        sa.CheckConstraint("monthly_cost > 0", name=op.f("ck_insurances_monthly_cost")),
        sa.CheckConstraint(
            "insurance_type IN ('PersonalHealth', 'Car', 'Pet')",
            name=op.f("ck_insurances_insurance_type"),
        ),
        sa.CheckConstraint(
            "vehicle_registration_number IS NULL OR insurance_type = 'Car'",
            name=op.f("ck_insurances_vehicle_registration_number"),
        ),
    )

    # Lookups are always by person
    op.create_index(
        op.f("ix_insurances_personal_id"),
        "insurances",
        ["personal_id"],
        unique=False,
    )

    vehicles = op.create_table(
        "vehicles",
        sa.Column("id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("registration_number", sa.String(20), nullable=False),
        sa.Column("make", sa.String(100), nullable=False),
        sa.Column("model", sa.String(100), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("color", sa.String(50), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text("CURRENT_TIMESTAMP"),
        ),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_vehicles")),
        sa.UniqueConstraint(
            "registration_number", name=op.f("uq_vehicles_registration_number")
        ),
        sa.CheckConstraint("year >= 1900", name=op.f("ck_vehicles_year")),
    )

    op.bulk_insert(
        insurances,
        [
            {
                "id": insurance.id,
                "personal_id": insurance.personal_id,
                "monthly_cost": insurance.monthly_cost,
                "insurance_type": insurance.type.value,
                "vehicle_registration_number": insurance.vehicle_registration_number,
                "created_at": insurance.created_at,
            }
            for insurance in SEED_INSURANCES
        ],
    )
    op.bulk_insert(
        vehicles,
        [
            {
                "id": vehicle.id,
                "registration_number": vehicle.registration_number,
                "make": vehicle.make,
                "model": vehicle.model,
                "year": vehicle.year,
                "color": vehicle.color,
                "created_at": vehicle.created_at,
            }
            for vehicle in SEED_VEHICLES
        ],
    )


def downgrade() -> None:
    """Drop the insurances and vehicles tables."""
    op.drop_table("vehicles")
    op.drop_index(op.f("ix_insurances_personal_id"), table_name="insurances")
    op.drop_table("insurances")
