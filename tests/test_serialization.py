"""Serialization tests — result models survive JSON encode/decode.

Downstream consumers (API clients, CSV export) rely on stable field names.
"""

from __future__ import annotations

import json

from truck_tco.engine.orchestrator import run_comparison
from truck_tco.models.results import ComparisonResult


def test_comparison_result_round_trip(comparison_request):
    original = run_comparison(comparison_request)
    restored = ComparisonResult.model_validate_json(original.model_dump_json())
    assert restored == original


def test_result_field_names(comparison_request):
    data = json.loads(run_comparison(comparison_request).model_dump_json())
    assert set(data) >= {
        "diesel_analysis",
        "electric1_analysis",
        "electric2_analysis",
        "diesel_vs_electric1",
        "diesel_vs_electric2",
        "best_electric_option",
        "max_savings",
        "environmental_comparison",
        "timeframe_years",
    }
    year = data["diesel_analysis"]["yearly_breakdown"][0]
    assert set(year) == {
        "year", "purchase_cost", "fuel_cost", "maintenance_cost", "insurance_cost",
        "depreciation_cost", "infrastructure_cost", "downtime_cost",
        "total_cost", "cumulative_cost",
    }
    assert data["diesel_analysis"]["environmental_impact"]["fuel_unit"] == "liters"
