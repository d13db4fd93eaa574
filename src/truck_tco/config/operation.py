"""Operation profile — shared by all trucks in one comparison.

Every field has a default.  With the defaults, the infrastructure and
downtime terms of the projection are zero, so a request without a profile
reduces to the plain purchase/fuel/maintenance/insurance/depreciation model.
"""

import math

from pydantic import BaseModel, ConfigDict, Field


class OperationProfile(BaseModel):
    """Daily duty cycle, charging strategy, downtime and depot infrastructure."""

    model_config = ConfigDict(frozen=True)

    # --- Duty cycle ---
    daily_km: float = Field(default=0.0, ge=0, description="Typical daily distance (km)")
    daily_km_p90: float = Field(
        default=0.0, ge=0,
        description="Distance on a 'hard' day — the worst ~10% of operating days (km)",
    )
    stops_per_day: int = Field(default=0, ge=0, description="Delivery stops per day (display only)")
    stop_minutes: float = Field(default=0.0, ge=0, description="Dwell time per stop (display only)")
    work_days_per_year: int = Field(default=250, ge=0, le=366, description="Operating days per year")
    use_p90_for_calc: bool = Field(
        default=False,
        description="Derive annual mileage from the P90 distance instead of the typical one.",
    )

    # --- Charging ---
    opportunity_charging: bool = Field(default=False, description="Mid-day / destination charging available")
    opportunity_charge_minutes: float = Field(default=0.0, ge=0, description="Opportunity charging per day (min)")
    opportunity_charge_power_kw: float = Field(default=150.0, ge=0, description="Opportunity charger power (kW)")
    public_charge_share: float = Field(
        default=0.0, ge=0, le=100,
        description="Share of energy bought at public chargers (percent, 0–100). Electric trucks only.",
    )
    public_charge_cost_per_kwh: float = Field(default=0.0, ge=0, description="Public charging price (€/kWh)")

    # --- Downtime heuristic ---
    p90_share_percent: float = Field(
        default=10.0, ge=0, le=100,
        description="Percent of work days that are P90 days. A configured count, not a percentile.",
    )
    downtime_cost_per_day: float = Field(default=0.0, ge=0, description="Cost of one lost operating day (€)")

    # --- Depot infrastructure (electric only) ---
    infrastructure_capex: float = Field(default=0.0, ge=0, description="Depot charger capital cost (€)")
    infrastructure_opex_annual: float = Field(default=0.0, ge=0, description="Depot charger running cost (€/year)")
    infrastructure_lifetime_years: int = Field(
        default=10, ge=0, le=30,
        description="Depreciation life of the depot infrastructure (years)",
    )

    def annual_mileage(self) -> float:
        """Annual distance implied by the duty cycle.

        Uses ``daily_km_p90`` when ``use_p90_for_calc`` is set, otherwise
        ``daily_km``, times ``work_days_per_year``, rounded half-up.
        """
        base_daily_km = self.daily_km_p90 if self.use_p90_for_calc else self.daily_km
        return float(max(0, math.floor(base_daily_km * self.work_days_per_year + 0.5)))
