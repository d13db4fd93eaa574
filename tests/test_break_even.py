"""Tests for the break-even finder.

Curves are built directly from cumulative-cost lists so every boundary
case (immediate, tie, exact crossover, none, degenerate) is explicit.
"""

from __future__ import annotations

import pytest

from truck_tco.engine.break_even import find_break_even
from truck_tco.engine.projector import project_truck
from truck_tco.models.results import EnvironmentalImpact, TruckAnalysis, YearCostBreakdown


def _analysis(name: str, cumulative: list[float]) -> TruckAnalysis:
    """Minimal TruckAnalysis whose yearly totals produce ``cumulative``."""
    years = []
    prev = 0.0
    for i, cum in enumerate(cumulative, start=1):
        total = cum - prev
        years.append(YearCostBreakdown(
            year=i,
            purchase_cost=0.0,
            fuel_cost=total,
            maintenance_cost=0.0,
            insurance_cost=0.0,
            depreciation_cost=0.0,
            total_cost=total,
            cumulative_cost=cum,
        ))
        prev = cum
    return TruckAnalysis(
        name=name,
        type="diesel",
        total_cost_of_ownership=cumulative[-1],
        yearly_breakdown=years,
        total_fuel_cost=cumulative[-1],
        total_maintenance_cost=0.0,
        total_insurance_cost=0.0,
        depreciation=0.0,
        environmental_impact=EnvironmentalImpact(
            total_fuel_consumed=0.0, total_co2_emissions=0.0, fuel_unit="liters",
        ),
    )


# ═══════════════════════════════════════════════════════════════════════════
# Boundary cases
# ═══════════════════════════════════════════════════════════════════════════

class TestBreakEvenBoundaries:

    def test_cheaper_every_year_is_immediate(self):
        base = _analysis("diesel", [100, 200, 300, 400])
        alt = _analysis("ev", [90, 180, 270, 360])
        be = find_break_even(base, alt, 4)
        assert be.break_even_year == 0
        assert be.break_even_month == 0

    def test_tie_in_year_one_is_immediate(self):
        base = _analysis("diesel", [100, 200, 300])
        alt = _analysis("ev", [100, 190, 280])
        be = find_break_even(base, alt, 3)
        assert be.break_even_year == 0
        assert be.break_even_month == 0

    def test_tie_throughout_is_immediate(self):
        base = _analysis("diesel", [100, 200, 300])
        alt = _analysis("ev", [100, 200, 300])
        be = find_break_even(base, alt, 3)
        assert be.break_even_year == 0
        assert be.total_savings == 0

    def test_more_expensive_every_year_is_none(self):
        base = _analysis("diesel", [100, 200, 300, 400])
        alt = _analysis("ev", [150, 260, 370, 480])
        be = find_break_even(base, alt, 4)
        assert be.break_even_year is None
        assert be.break_even_month is None
        assert be.total_savings == -80

    def test_exact_tie_after_being_higher(self):
        # Higher through year 4, equal in year 5 → crossover during index 4.
        base = _analysis("diesel", [100, 200, 300, 400, 500])
        alt = _analysis("ev", [150, 230, 310, 420, 500])
        be = find_break_even(base, alt, 5)
        assert be.break_even_year == 4
        # gap 20 / rate difference (100 − 80) × 12
        assert be.break_even_month == 12

    def test_crossover_mid_year(self):
        base = _analysis("diesel", [100, 200, 300])
        alt = _analysis("ev", [160, 190, 220])
        # index 1: gap 60, rates 100 vs 30 → 60 / 70 × 12 = 10.29 → 10
        be = find_break_even(base, alt, 3)
        assert be.break_even_year == 1
        assert be.break_even_month == 10

    def test_month_interpolation(self):
        base = _analysis("diesel", [100, 200])
        # gap 25 / (100 − 50) × 12 = 6.0
        assert find_break_even(base, _analysis("ev", [125, 175]), 2).break_even_month == 6
        # gap 2.5 / (100 − 75) × 12 = 1.2 → 1
        assert find_break_even(base, _analysis("ev", [102.5, 177.5]), 2).break_even_month == 1

    def test_month_rounds_half_up(self):
        base = _analysis("diesel", [100, 200])
        alt = _analysis("ev", [103, 195])
        # gap 3 / (100 − 92) × 12 = 4.5 → 5
        assert find_break_even(base, alt, 2).break_even_month == 5

    def test_only_first_crossover_reported(self):
        base = _analysis("diesel", [100, 200, 300, 400])
        alt = _analysis("ev", [150, 190, 310, 390])
        be = find_break_even(base, alt, 4)
        assert be.break_even_year == 1

    def test_degenerate_rate_difference_leaves_month_unknown(self):
        # 1e16 − 1 rounds to 1e16, so both curves accrue the "same" amount
        # in year 2 even though the alternative started higher.
        base = _analysis("diesel", [0.0, 1e16])
        alt = _analysis("ev", [1.0, 1e16])
        be = find_break_even(base, alt, 2)
        assert be.break_even_year == 1
        assert be.break_even_month is None

    def test_names_and_savings(self):
        base = _analysis("diesel", [100, 200])
        alt = _analysis("ev", [150, 170])
        be = find_break_even(base, alt, 2)
        assert be.truck1_name == "diesel"
        assert be.truck2_name == "ev"
        assert be.total_savings == 30


# ═══════════════════════════════════════════════════════════════════════════
# With projected trucks
# ═══════════════════════════════════════════════════════════════════════════

class TestBreakEvenWithProjections:

    def test_subsidised_electric_breaks_even_immediately(self, diesel_truck, electric_truck, empty_profile):
        diesel = project_truck(diesel_truck, empty_profile, 10, 0)
        ev = project_truck(electric_truck, empty_profile, 10, 80_000)
        be = find_break_even(diesel, ev, 10)
        assert be.break_even_year == 0
        assert be.break_even_month == 0
        assert be.total_savings == pytest.approx(
            diesel.total_cost_of_ownership - ev.total_cost_of_ownership
        )

    def test_expensive_electric_crosses_later(self, diesel_truck, electric_truck, empty_profile):
        diesel = project_truck(diesel_truck, empty_profile, 10, 0)
        pricey = electric_truck.model_copy(update={"purchase_price": 250_000})
        ev = project_truck(pricey, empty_profile, 10, 0)
        be = find_break_even(diesel, ev, 10)
        # Year-1 gap 77 540 €, yearly advantage 17 460 € → gap 7 700 € left
        # after index 4, closed 7 700 / 17 460 × 12 ≈ 5.3 months into index 5.
        assert be.break_even_year == 5
        assert be.break_even_month == 5
