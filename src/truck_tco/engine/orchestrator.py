"""Comparison orchestrator — diesel baseline vs. two electric alternatives.

Runs the projector three times (diesel without subsidy, both electrics with
the region's incentive), the break-even finder twice, then picks the
cheaper electric option and computes the savings and CO₂ delta.
"""

from __future__ import annotations

import logging

from truck_tco.config.incentives import get_incentive
from truck_tco.config.scenario import ComparisonRequest
from truck_tco.engine.break_even import find_break_even
from truck_tco.engine.projector import project_truck
from truck_tco.models.results import ComparisonResult, EnvironmentalComparison

logger = logging.getLogger(__name__)


def run_comparison(request: ComparisonRequest) -> ComparisonResult:
    """Run the full three-truck comparison for one validated request."""
    horizon = request.timeframe_years
    profile = request.operation_profile
    incentive = get_incentive(request.tax_incentive_region).total_incentive
    diesel_truck, electric_truck_1, electric_truck_2 = request.resolved_trucks()

    diesel = project_truck(diesel_truck, profile, horizon, 0.0)
    electric1 = project_truck(electric_truck_1, profile, horizon, incentive)
    electric2 = project_truck(electric_truck_2, profile, horizon, incentive)

    vs_electric1 = find_break_even(diesel, electric1, horizon)
    vs_electric2 = find_break_even(diesel, electric2, horizon)

    # Ties go to the second alternative.
    if electric1.total_cost_of_ownership < electric2.total_cost_of_ownership:
        best_option, best = "electric1", electric1
    else:
        best_option, best = "electric2", electric2

    max_savings = diesel.total_cost_of_ownership - best.total_cost_of_ownership
    co2_saved = (
        diesel.environmental_impact.total_co2_emissions
        - best.environmental_impact.total_co2_emissions
    )

    logger.debug(
        "comparison over %d years: best=%s max_savings=%.2f co2_saved=%.1f kg",
        horizon, best.name, max_savings, co2_saved,
    )

    return ComparisonResult(
        diesel_analysis=diesel,
        electric1_analysis=electric1,
        electric2_analysis=electric2,
        diesel_vs_electric1=vs_electric1,
        diesel_vs_electric2=vs_electric2,
        best_electric_option=best_option,
        max_savings=max_savings,
        timeframe_years=horizon,
        environmental_comparison=EnvironmentalComparison(
            best_electric_co2_saved=co2_saved,
            best_electric_name=best.name,
        ),
    )
