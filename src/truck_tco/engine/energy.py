"""Energy price, range, and downtime-risk helpers for the projector.

The downtime model is a deterministic heuristic.  "P90 day" means a
configured share of work days on which the truck must cover
``daily_km_p90``; it is not a percentile computed from any distribution.

  effective_range = base_range + opportunity_charge_range
  risk            = min(1, (p90_km − effective_range) / p90_km)   if p90_km > range
  annual_downtime = cost_per_day × round(work_days × p90_share) × risk
"""

from __future__ import annotations

import math

from truck_tco.config.constants import OPPORTUNITY_CHARGE_EFFICIENCY
from truck_tco.config.operation import OperationProfile
from truck_tco.config.truck import TruckParameters


def _clamp_percent(value: float) -> float:
    """Percent (0–100) → fraction (0–1), clamped."""
    return min(max(value, 0.0), 100.0) / 100.0


def round_half_up(value: float) -> int:
    """Round halves up, as JavaScript's ``Math.round`` does (break-even months, P90 days)."""
    return int(math.floor(value + 0.5))


def effective_unit_price(truck: TruckParameters, profile: OperationProfile) -> float:
    """Per-unit energy price after blending in public charging.

    Electric: ``base × (1 − share) + public × share``.
    Diesel: ``fuel_cost_per_unit`` unchanged.
    """
    if not truck.is_electric:
        return truck.fuel_cost_per_unit
    share = _clamp_percent(profile.public_charge_share)
    if share <= 0:
        return truck.fuel_cost_per_unit
    return truck.fuel_cost_per_unit * (1 - share) + profile.public_charge_cost_per_kwh * share


def estimate_base_range_km(truck: TruckParameters) -> float | None:
    """Stated range, else battery capacity / consumption, else None."""
    if not truck.is_electric:
        return None
    specs = truck.technical_specs
    if specs is None:
        return None
    if specs.range_km:
        return specs.range_km
    if specs.battery_capacity_kwh:
        return specs.battery_capacity_kwh * 100 / max(1.0, truck.fuel_efficiency)
    return None


def opportunity_charge_range_km(truck: TruckParameters, profile: OperationProfile) -> float:
    """Extra daily range gained from mid-day charging."""
    if not (
        truck.is_electric
        and profile.opportunity_charging
        and profile.opportunity_charge_minutes > 0
        and profile.opportunity_charge_power_kw > 0
    ):
        return 0.0
    energy_kwh = (
        (profile.opportunity_charge_minutes / 60)
        * profile.opportunity_charge_power_kw
        * OPPORTUNITY_CHARGE_EFFICIENCY
    )
    return energy_kwh * 100 / max(1.0, truck.fuel_efficiency)


def effective_range_km(truck: TruckParameters, profile: OperationProfile) -> float | None:
    base = estimate_base_range_km(truck)
    if base is None:
        return None
    return base + opportunity_charge_range_km(truck, profile)


def downtime_risk_factor(range_km: float | None, p90_km: float) -> float:
    """Linear shortfall ratio in [0, 1]; 0 if range is unknown or sufficient."""
    if range_km is None or p90_km <= range_km:
        return 0.0
    return min(1.0, (p90_km - range_km) / max(1.0, p90_km))


def p90_days_per_year(profile: OperationProfile) -> int:
    return round_half_up(profile.work_days_per_year * _clamp_percent(profile.p90_share_percent))


def annual_downtime_cost(truck: TruckParameters, profile: OperationProfile) -> float:
    """Expected yearly cost of P90 days the truck cannot cover.

    Same amount every year.  Zero for diesel trucks, for a zero day rate,
    and when no range can be estimated.
    """
    if not truck.is_electric or profile.downtime_cost_per_day <= 0:
        return 0.0
    risk = downtime_risk_factor(effective_range_km(truck, profile), profile.daily_km_p90)
    return profile.downtime_cost_per_day * p90_days_per_year(profile) * risk
