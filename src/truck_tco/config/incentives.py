"""Regional purchase incentives for electric trucks.

The engine only ever consumes ``total_incentive``; the breakdown is kept for
display.  The same amount is deducted from both electric alternatives'
year-1 purchase cost.
"""

from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field


class UnknownRegionError(KeyError):
    """Raised when an incentive region key is not in the table."""


class RegionalIncentive(BaseModel):
    """One row of the incentive table."""

    model_config = ConfigDict(frozen=True)

    region: str = Field(description="Display label")
    federal_credit: float = Field(default=0.0, ge=0)
    state_credit: float = Field(default=0.0, ge=0)
    total_incentive: float = Field(default=0.0, ge=0, description="Amount deducted from the purchase price (€)")
    description: str = ""


REGIONAL_INCENTIVES = MappingProxyType({
    "bundesfoerderung": RegionalIncentive(
        region="Bundesförderung (DE)",
        federal_credit=80_000.0,
        state_credit=0.0,
        total_incentive=80_000.0,
        description="Federal grant for climate-friendly commercial vehicles, "
                    "paid against the purchase price of each electric truck.",
    ),
    "none": RegionalIncentive(
        region="Keine Förderung",
        total_incentive=0.0,
        description="No purchase incentive applied.",
    ),
})

DEFAULT_REGION = "bundesfoerderung"


def get_incentive(region: str) -> RegionalIncentive:
    """Look up an incentive record by region key."""
    try:
        return REGIONAL_INCENTIVES[region]
    except KeyError:
        raise UnknownRegionError(
            f"Unknown incentive region {region!r}; expected one of {sorted(REGIONAL_INCENTIVES)}"
        ) from None
