"""Result types — the contract between engine, API, and dashboard.

All values are final: consumers render them and never re-derive.
Nothing here is rounded; rounding is a presentation concern.
"""

from __future__ import annotations

from typing import Literal

import pandas as pd
from pydantic import BaseModel

from truck_tco.config.truck import Powertrain, TechnicalSpecs


# ═══════════════════════════════════════════════════════════════════════════
# Per-truck projection
# ═══════════════════════════════════════════════════════════════════════════

class YearCostBreakdown(BaseModel):
    """One year of projected costs for one truck."""

    year: int
    """1-based year index."""

    purchase_cost: float
    """Price after subsidy in year 1, zero afterwards."""

    fuel_cost: float
    maintenance_cost: float
    insurance_cost: float

    depreciation_cost: float
    """price × 0.8 / lifespan while year ≤ lifespan, else 0.
    Always based on the pre-subsidy price."""

    infrastructure_cost: float = 0.0
    """Depot charging capex share + opex while year ≤ infrastructure life.  Electric only."""

    downtime_cost: float = 0.0
    """Expected cost of range shortfall on P90 days.  Electric only."""

    total_cost: float
    cumulative_cost: float


class EnvironmentalImpact(BaseModel):
    """Energy use and CO₂ over the full horizon."""

    total_fuel_consumed: float
    """Litres (diesel) or kWh (electric), per ``fuel_unit``."""

    total_co2_emissions: float
    """kg CO₂."""

    fuel_unit: Literal["liters", "kWh"]


class TruckAnalysis(BaseModel):
    """Full projection for one truck."""

    name: str
    type: Powertrain
    total_cost_of_ownership: float
    """Equals ``yearly_breakdown[-1].cumulative_cost``."""

    yearly_breakdown: list[YearCostBreakdown]

    total_fuel_cost: float
    total_maintenance_cost: float
    total_insurance_cost: float
    depreciation: float
    total_infrastructure_cost: float = 0.0
    total_downtime_cost: float = 0.0

    environmental_impact: EnvironmentalImpact
    technical_specs: TechnicalSpecs | None = None

    @property
    def total_purchase_cost(self) -> float:
        return sum(y.purchase_cost for y in self.yearly_breakdown)

    def to_dataframe(self) -> pd.DataFrame:
        """Yearly breakdown as a DataFrame, one row per year."""
        return pd.DataFrame(
            [y.model_dump() for y in self.yearly_breakdown],
            columns=list(YearCostBreakdown.model_fields),
        )


# ═══════════════════════════════════════════════════════════════════════════
# Pairwise comparison
# ═══════════════════════════════════════════════════════════════════════════

class BreakEvenAnalysis(BaseModel):
    """Crossover between a baseline and one alternative."""

    truck1_name: str
    """Baseline."""

    truck2_name: str
    """Alternative."""

    break_even_year: int | None
    """0-based index of the year during which the alternative's cumulative
    cost drops to or below the baseline's.  0 = cheaper from year 1.
    None = no crossover within the horizon."""

    break_even_month: int | None
    """Estimated month within that year (0 when cheaper from year 1).
    None when the year is unknown, or when the crossover year is known but
    the month could not be interpolated."""

    total_savings: float
    """baseline TCO − alternative TCO.  Negative if the alternative costs more."""


class EnvironmentalComparison(BaseModel):
    best_electric_co2_saved: float
    """Baseline CO₂ − best alternative CO₂ (kg).  Negative = more emissions."""

    best_electric_name: str


class ComparisonResult(BaseModel):
    """Top-level output: three projections, two break-evens, the verdict."""

    diesel_analysis: TruckAnalysis
    electric1_analysis: TruckAnalysis
    electric2_analysis: TruckAnalysis
    diesel_vs_electric1: BreakEvenAnalysis
    diesel_vs_electric2: BreakEvenAnalysis
    best_electric_option: Literal["electric1", "electric2"]
    max_savings: float
    timeframe_years: int
    environmental_comparison: EnvironmentalComparison

    @property
    def best_electric_analysis(self) -> TruckAnalysis:
        if self.best_electric_option == "electric1":
            return self.electric1_analysis
        return self.electric2_analysis

    @property
    def best_break_even(self) -> BreakEvenAnalysis:
        if self.best_electric_option == "electric1":
            return self.diesel_vs_electric1
        return self.diesel_vs_electric2

    def analyses(self) -> list[TruckAnalysis]:
        return [self.diesel_analysis, self.electric1_analysis, self.electric2_analysis]
