"""Insurance request and response schemas.

``PersonInsurancesResult`` is the aggregated answer for one person: every
policy in store order, optional vehicle details on car policies, and a
total that always equals the sum of the listed monthly costs.
"""

from collections.abc import Sequence
from decimal import Decimal

from pydantic import Field, model_validator

from ..models.insurance import Insurance, InsuranceType
from .common import ApiSchema
from .vehicle import VehicleInfo


class GetPersonInsurancesRequest(ApiSchema):
    """Request body for the person insurances query."""

    personal_identification_number: str | None = Field(
        default=None,
        description="Swedish personal identity number, YYYYMMDD-NNNN or YYMMDD-NNNN",
    )


class InsuranceResponse(ApiSchema):
    """One insurance in a person's result."""

    monthly_cost: Decimal = Field(..., description="Monthly cost of the policy")
    type: InsuranceType = Field(..., description="Insurance type")
    vehicle_info: VehicleInfo | None = Field(
        default=None, description="Vehicle details, car insurance only"
    )

    @classmethod
    def from_insurance(
        cls, insurance: Insurance, vehicle_info: VehicleInfo | None = None
    ) -> "InsuranceResponse":
        return cls(
            monthly_cost=insurance.monthly_cost,
            type=insurance.type,
            vehicle_info=vehicle_info,
        )


class PersonInsurancesResult(ApiSchema):
    """All insurances of a person and their total monthly cost."""

    personal_identification_number: str = Field(..., min_length=1)
    insurances: list[InsuranceResponse] = Field(default_factory=list)
    total_monthly_cost: Decimal = Field(default=Decimal("0"))

    @model_validator(mode="after")
    def validate_total(self) -> "PersonInsurancesResult":
        """The total must equal the sum of the listed costs."""
        expected = sum((i.monthly_cost for i in self.insurances), Decimal("0"))
        if self.total_monthly_cost != expected:
            raise ValueError(
                f"total_monthly_cost {self.total_monthly_cost} does not match "
                f"sum of insurances {expected}"
            )
        return self

    @classmethod
    def from_insurances(
        cls,
        personal_identification_number: str,
        insurances: Sequence[InsuranceResponse],
    ) -> "PersonInsurancesResult":
        """Build a result, computing the total from the given entries."""
        return cls(
            personal_identification_number=personal_identification_number,
            insurances=list(insurances),
            total_monthly_cost=sum(
                (i.monthly_cost for i in insurances), Decimal("0")
            ),
        )
