"""Tests for the three-truck comparison orchestrator."""

from __future__ import annotations

import logging

import pytest

from truck_tco.config import ComparisonRequest, OperationProfile
from truck_tco.engine.orchestrator import run_comparison
from truck_tco.engine.projector import project_truck


class TestRunComparison:

    def test_incentive_applies_to_electrics_only(self, comparison_request):
        result = run_comparison(comparison_request)
        assert result.diesel_analysis.yearly_breakdown[0].purchase_cost == 155_000
        assert result.electric1_analysis.yearly_breakdown[0].purchase_cost == 90_000
        assert result.electric2_analysis.yearly_breakdown[0].purchase_cost == 240_000

    def test_no_incentive_region(self, comparison_request):
        req = comparison_request.model_copy(update={"tax_incentive_region": "none"})
        result = run_comparison(req)
        assert result.electric1_analysis.yearly_breakdown[0].purchase_cost == 170_000

    def test_best_option_is_lower_tco(self, comparison_request):
        result = run_comparison(comparison_request)
        e1 = result.electric1_analysis.total_cost_of_ownership
        e2 = result.electric2_analysis.total_cost_of_ownership
        assert e1 < e2
        assert result.best_electric_option == "electric1"
        assert result.max_savings == pytest.approx(
            result.diesel_analysis.total_cost_of_ownership - e1
        )
        assert result.environmental_comparison.best_electric_name == "Elektro-Sattelzug 1"

    def test_second_option_wins_when_cheaper(self, comparison_request, electric_truck):
        cheap = electric_truck.model_copy(update={"name": "Cheap EV", "purchase_price": 100_000})
        req = comparison_request.model_copy(update={"electric_truck_2": cheap})
        result = run_comparison(req)
        assert result.best_electric_option == "electric2"
        assert result.best_electric_analysis.name == "Cheap EV"
        assert result.best_break_even is result.diesel_vs_electric2

    def test_tie_goes_to_second_option(self, comparison_request, electric_truck):
        twin = electric_truck.model_copy(update={"name": "Twin"})
        req = comparison_request.model_copy(update={"electric_truck_2": twin})
        result = run_comparison(req)
        assert result.best_electric_option == "electric2"

    def test_break_evens_match_direct_calls(self, comparison_request):
        result = run_comparison(comparison_request)
        assert result.diesel_vs_electric1.truck1_name == "Diesel-Sattelzug"
        assert result.diesel_vs_electric1.truck2_name == "Elektro-Sattelzug 1"
        assert result.diesel_vs_electric2.truck2_name == "Elektro-Sattelzug 2"
        assert result.diesel_vs_electric1.total_savings == pytest.approx(
            result.diesel_analysis.total_cost_of_ownership
            - result.electric1_analysis.total_cost_of_ownership
        )

    def test_co2_saved(self, comparison_request):
        result = run_comparison(comparison_request)
        # diesel 384 000 L × 2.64 − electric 1 440 000 kWh × 0.38
        assert result.environmental_comparison.best_electric_co2_saved == pytest.approx(
            384_000 * 2.64 - 1_440_000 * 0.38
        )

    def test_negative_co2_delta_is_kept(self, comparison_request, electric_truck):
        # Cheap to run, but 800 kWh/100 km on the assumed grid mix out-emits diesel.
        hungry = electric_truck.model_copy(
            update={"fuel_efficiency": 800, "fuel_cost_per_unit": 0.01, "purchase_price": 100_000},
        )
        req = comparison_request.model_copy(update={"electric_truck_1": hungry})
        result = run_comparison(req)
        assert result.best_electric_option == "electric1"
        assert result.environmental_comparison.best_electric_co2_saved < 0

    def test_horizon_propagates(self, comparison_request):
        req = comparison_request.model_copy(update={"timeframe_years": 3})
        result = run_comparison(req)
        assert result.timeframe_years == 3
        for a in result.analyses():
            assert len(a.yearly_breakdown) == 3

    def test_profile_shared_by_all_trucks(self, comparison_request, depot_profile):
        req = comparison_request.model_copy(update={"operation_profile": depot_profile})
        result = run_comparison(req)
        expected = project_truck(req.electric_truck_1, depot_profile, 10, 80_000)
        assert result.electric1_analysis == expected
        assert result.diesel_analysis.total_infrastructure_cost == 0

    def test_sync_mileage_overrides_trucks(self, comparison_request):
        profile = OperationProfile(daily_km=200, daily_km_p90=250, work_days_per_year=250)
        req = comparison_request.model_copy(
            update={"operation_profile": profile, "sync_mileage": True},
        )
        result = run_comparison(req)
        # 200 km × 250 days = 50 000 km → 500 × 32 L
        env = result.diesel_analysis.environmental_impact
        assert env.total_fuel_consumed == pytest.approx(500 * 32 * 10)
        # inputs untouched
        assert req.diesel_truck.annual_mileage == 120_000

    def test_logs_summary_at_debug(self, comparison_request, caplog):
        with caplog.at_level(logging.DEBUG, logger="truck_tco.engine.orchestrator"):
            run_comparison(comparison_request)
        assert "best=Elektro-Sattelzug 1" in caplog.text

    def test_repeatable(self, comparison_request):
        assert (
            run_comparison(comparison_request).model_dump_json()
            == run_comparison(comparison_request).model_dump_json()
        )


class TestRequestHelpers:

    def test_annual_mileage_typical(self):
        assert OperationProfile(daily_km=170, work_days_per_year=250).annual_mileage() == 42_500

    def test_annual_mileage_p90(self):
        profile = OperationProfile(daily_km=170, daily_km_p90=200, work_days_per_year=250, use_p90_for_calc=True)
        assert profile.annual_mileage() == 50_000

    def test_resolved_trucks_without_sync(self, comparison_request):
        trucks = comparison_request.resolved_trucks()
        assert trucks[0] is comparison_request.diesel_truck

    def test_resolved_trucks_with_sync(self, comparison_request):
        req = ComparisonRequest(
            **{**comparison_request.model_dump(), "sync_mileage": True,
               "operation_profile": {"daily_km": 80, "work_days_per_year": 250}},
        )
        assert [t.annual_mileage for t in req.resolved_trucks()] == [20_000] * 3
