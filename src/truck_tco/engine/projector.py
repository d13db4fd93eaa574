"""Truck cost projector — year-by-year TCO for one truck.

Per year y = 1..horizon:

  purchase       = price − subsidy                    (y == 1 only)
  fuel           = mileage / 100 × consumption × effective unit price
  maintenance    = flat annual figure
  insurance      = flat annual figure
  depreciation   = price × 0.8 / lifespan             (y ≤ lifespan)
  infrastructure = capex / life + opex                (electric, y ≤ infra life)
  downtime       = P90 shortfall heuristic            (electric, every year)

The subsidy never touches the depreciation base.  The function is pure:
no validation, no I/O, no rounding.
"""

from __future__ import annotations

from truck_tco.config.constants import EMISSION_FACTORS, FUEL_UNITS, RESIDUAL_VALUE_SHARE
from truck_tco.config.operation import OperationProfile
from truck_tco.config.truck import TruckParameters
from truck_tco.engine.energy import annual_downtime_cost, effective_unit_price
from truck_tco.models.results import EnvironmentalImpact, TruckAnalysis, YearCostBreakdown


def annual_consumption(truck: TruckParameters) -> float:
    """Litres or kWh per year."""
    return (truck.annual_mileage / 100) * truck.fuel_efficiency


def project_truck(
    truck: TruckParameters,
    operation_profile: OperationProfile,
    horizon_years: int,
    purchase_subsidy: float = 0.0,
) -> TruckAnalysis:
    """Project one truck's costs over ``horizon_years``."""
    profile = operation_profile
    electric = truck.is_electric

    # ── Constant-per-year terms ────────────────────────────────────────
    effective_purchase_price = truck.purchase_price - purchase_subsidy
    annual_depreciation = (
        truck.purchase_price * (1 - RESIDUAL_VALUE_SHARE) / truck.expected_lifespan_years
    )
    fuel_cost = annual_consumption(truck) * effective_unit_price(truck, profile)

    infrastructure_annual = (
        profile.infrastructure_capex / max(1, profile.infrastructure_lifetime_years)
        + profile.infrastructure_opex_annual
        if electric else 0.0
    )
    downtime_annual = annual_downtime_cost(truck, profile)

    # ── Yearly loop ────────────────────────────────────────────────────
    years: list[YearCostBreakdown] = []
    cumulative = 0.0

    for year in range(1, horizon_years + 1):
        purchase_cost = effective_purchase_price if year == 1 else 0.0
        depreciation_cost = annual_depreciation if year <= truck.expected_lifespan_years else 0.0
        infrastructure_cost = (
            infrastructure_annual
            if electric and year <= profile.infrastructure_lifetime_years else 0.0
        )

        total_cost = (
            purchase_cost
            + fuel_cost
            + truck.maintenance_cost_annual
            + truck.insurance_cost_annual
            + depreciation_cost
            + infrastructure_cost
            + downtime_annual
        )
        cumulative += total_cost

        years.append(YearCostBreakdown(
            year=year,
            purchase_cost=purchase_cost,
            fuel_cost=fuel_cost,
            maintenance_cost=truck.maintenance_cost_annual,
            insurance_cost=truck.insurance_cost_annual,
            depreciation_cost=depreciation_cost,
            infrastructure_cost=infrastructure_cost,
            downtime_cost=downtime_annual,
            total_cost=total_cost,
            cumulative_cost=cumulative,
        ))

    # ── Environmental impact ───────────────────────────────────────────
    total_fuel_consumed = annual_consumption(truck) * horizon_years
    impact = EnvironmentalImpact(
        total_fuel_consumed=total_fuel_consumed,
        total_co2_emissions=total_fuel_consumed * EMISSION_FACTORS[truck.type],
        fuel_unit=FUEL_UNITS[truck.type],
    )

    return TruckAnalysis(
        name=truck.name,
        type=truck.type,
        total_cost_of_ownership=cumulative,
        yearly_breakdown=years,
        total_fuel_cost=sum(y.fuel_cost for y in years),
        total_maintenance_cost=sum(y.maintenance_cost for y in years),
        total_insurance_cost=sum(y.insurance_cost for y in years),
        depreciation=sum(y.depreciation_cost for y in years),
        total_infrastructure_cost=sum(y.infrastructure_cost for y in years),
        total_downtime_cost=sum(y.downtime_cost for y in years),
        environmental_impact=impact,
        technical_specs=truck.technical_specs,
    )
