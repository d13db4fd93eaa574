"""Comparison request — bundles the three trucks and the shared settings."""

from pydantic import BaseModel, Field, field_validator

from truck_tco.config.constants import MAX_HORIZON_YEARS, MIN_HORIZON_YEARS
from truck_tco.config.incentives import DEFAULT_REGION, REGIONAL_INCENTIVES
from truck_tco.config.operation import OperationProfile
from truck_tco.config.truck import TruckParameters


class ComparisonRequest(BaseModel):
    """Complete input bundle for one diesel-vs-two-electrics comparison."""

    diesel_truck: TruckParameters = Field(description="Baseline truck (projected without subsidy)")
    electric_truck_1: TruckParameters = Field(description="First alternative")
    electric_truck_2: TruckParameters = Field(description="Second alternative")
    timeframe_years: int = Field(
        default=10, ge=MIN_HORIZON_YEARS, le=MAX_HORIZON_YEARS,
        description="Analysis horizon (years)",
    )
    tax_incentive_region: str = Field(
        default=DEFAULT_REGION,
        description="Key into the regional incentive table; applied to both alternatives.",
    )
    operation_profile: OperationProfile = Field(default_factory=OperationProfile)
    sync_mileage: bool = Field(
        default=False,
        description="Replace each truck's annual mileage with the one implied by the operation profile.",
    )

    @field_validator("tax_incentive_region")
    @classmethod
    def _known_region(cls, value: str) -> str:
        if value not in REGIONAL_INCENTIVES:
            raise ValueError(f"unknown incentive region {value!r}")
        return value

    def resolved_trucks(self) -> tuple[TruckParameters, TruckParameters, TruckParameters]:
        """Return (diesel, electric 1, electric 2), mileage-synced if requested."""
        trucks = (self.diesel_truck, self.electric_truck_1, self.electric_truck_2)
        if not self.sync_mileage:
            return trucks
        mileage = self.operation_profile.annual_mileage()
        return tuple(t.model_copy(update={"annual_mileage": mileage}) for t in trucks)
