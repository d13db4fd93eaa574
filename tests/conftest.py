"""Shared test fixtures — trucks and profiles matching the default presets."""

from __future__ import annotations

import pytest

from truck_tco.config import (
    ComparisonRequest,
    OperationProfile,
    TechnicalSpecs,
    TruckParameters,
)


@pytest.fixture
def diesel_truck() -> TruckParameters:
    return TruckParameters(
        name="Diesel-Sattelzug",
        type="diesel",
        purchase_price=155_000,
        annual_mileage=120_000,
        fuel_cost_per_unit=1.65,
        maintenance_cost_annual=14_000,
        insurance_cost_annual=11_000,
        expected_lifespan_years=12,
        fuel_efficiency=32,
        technical_specs=TechnicalSpecs(tank_capacity_l=400, range_km=1_200),
    )


@pytest.fixture
def electric_truck() -> TruckParameters:
    return TruckParameters(
        name="Elektro-Sattelzug 1",
        type="electric",
        purchase_price=170_000,
        annual_mileage=120_000,
        fuel_cost_per_unit=0.35,
        maintenance_cost_annual=7_500,
        insurance_cost_annual=10_000,
        expected_lifespan_years=15,
        fuel_efficiency=120,
        technical_specs=TechnicalSpecs(battery_capacity_kwh=600, range_km=500),
    )


@pytest.fixture
def electric_truck_2() -> TruckParameters:
    return TruckParameters(
        name="Elektro-Sattelzug 2",
        type="electric",
        purchase_price=320_000,
        annual_mileage=100_000,
        fuel_cost_per_unit=0.35,
        maintenance_cost_annual=8_500,
        insurance_cost_annual=11_000,
        expected_lifespan_years=12,
        fuel_efficiency=130,
        technical_specs=TechnicalSpecs(battery_capacity_kwh=624, range_km=530),
    )


@pytest.fixture
def empty_profile() -> OperationProfile:
    """All defaults — infrastructure and downtime terms are zero."""
    return OperationProfile()


@pytest.fixture
def depot_profile() -> OperationProfile:
    """General-cargo duty cycle with depot infrastructure and downtime cost."""
    return OperationProfile(
        daily_km=200,
        daily_km_p90=250,
        stops_per_day=12,
        stop_minutes=20,
        work_days_per_year=250,
        opportunity_charging=False,
        public_charge_share=20,
        public_charge_cost_per_kwh=0.55,
        p90_share_percent=10,
        downtime_cost_per_day=1_200,
        infrastructure_capex=50_000,
        infrastructure_opex_annual=1_800,
        infrastructure_lifetime_years=10,
    )


@pytest.fixture
def comparison_request(
    diesel_truck: TruckParameters,
    electric_truck: TruckParameters,
    electric_truck_2: TruckParameters,
) -> ComparisonRequest:
    return ComparisonRequest(
        diesel_truck=diesel_truck,
        electric_truck_1=electric_truck,
        electric_truck_2=electric_truck_2,
        timeframe_years=10,
        tax_incentive_region="bundesfoerderung",
    )
