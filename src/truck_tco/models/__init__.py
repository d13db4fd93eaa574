"""Result models — calculation output contracts."""

from truck_tco.models.results import (
    BreakEvenAnalysis,
    ComparisonResult,
    EnvironmentalComparison,
    EnvironmentalImpact,
    TruckAnalysis,
    YearCostBreakdown,
)

__all__ = [
    "BreakEvenAnalysis",
    "ComparisonResult",
    "EnvironmentalComparison",
    "EnvironmentalImpact",
    "TruckAnalysis",
    "YearCostBreakdown",
]
