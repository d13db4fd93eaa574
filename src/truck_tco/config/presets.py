"""Operation-profile presets and default trucks.

Presets cover the three typical urban/regional duty cycles.  "custom" is
not a table entry — callers supply their own ``OperationProfile``.
"""

from types import MappingProxyType

from truck_tco.config.operation import OperationProfile
from truck_tco.config.truck import TechnicalSpecs, TruckParameters


OPERATION_PROFILE_PRESETS = MappingProxyType({
    # Parcel delivery: many stops, short distances, depot charging only.
    "kep": OperationProfile(
        daily_km=80,
        daily_km_p90=130,
        stops_per_day=95,
        stop_minutes=8,
        opportunity_charging=False,
        opportunity_charge_minutes=0,
        opportunity_charge_power_kw=0,
        public_charge_share=0,
        public_charge_cost_per_kwh=0.55,
        p90_share_percent=10,
        downtime_cost_per_day=800,
        infrastructure_capex=35_000,
        infrastructure_opex_annual=1_200,
        infrastructure_lifetime_years=10,
    ),
    # General cargo / wholesale: few stops, longer tours.
    "stueckgut": OperationProfile(
        daily_km=200,
        daily_km_p90=250,
        stops_per_day=12,
        stop_minutes=20,
        opportunity_charging=True,
        opportunity_charge_minutes=30,
        opportunity_charge_power_kw=150,
        public_charge_share=20,
        public_charge_cost_per_kwh=0.55,
        p90_share_percent=10,
        downtime_cost_per_day=1_200,
        infrastructure_capex=50_000,
        infrastructure_opex_annual=1_800,
        infrastructure_lifetime_years=10,
    ),
    # Retail store supply: hub to city, stable tours.
    "filial": OperationProfile(
        daily_km=170,
        daily_km_p90=200,
        stops_per_day=10,
        stop_minutes=20,
        opportunity_charging=True,
        opportunity_charge_minutes=30,
        opportunity_charge_power_kw=150,
        public_charge_share=15,
        public_charge_cost_per_kwh=0.55,
        p90_share_percent=10,
        downtime_cost_per_day=1_200,
        infrastructure_capex=55_000,
        infrastructure_opex_annual=2_000,
        infrastructure_lifetime_years=10,
    ),
})

DEFAULT_PRESET = "stueckgut"


DEFAULT_TRUCKS = MappingProxyType({
    "diesel": TruckParameters(
        name="Diesel-Sattelzug",
        type="diesel",
        purchase_price=155_000,
        annual_mileage=120_000,
        fuel_cost_per_unit=1.65,
        maintenance_cost_annual=14_000,
        insurance_cost_annual=11_000,
        expected_lifespan_years=12,
        fuel_efficiency=32,
        technical_specs=TechnicalSpecs(
            gross_vehicle_weight_kg=18_000,
            gross_combination_weight_kg=40_000,
            axle_configuration="4x2",
            payload_kg=26_000,
            power_kw=350,
            power_ps=476,
            torque_nm=2_300,
            tank_capacity_l=400,
            range_km=1_200,
            cabin_type="Fernverkehr",
            length_mm=6_200,
            height_mm=3_950,
        ),
    ),
    "electric1": TruckParameters(
        name="Elektro-Sattelzug 1",
        type="electric",
        purchase_price=170_000,
        annual_mileage=120_000,
        fuel_cost_per_unit=0.35,
        maintenance_cost_annual=7_500,
        insurance_cost_annual=10_000,
        expected_lifespan_years=15,
        fuel_efficiency=120,
        technical_specs=TechnicalSpecs(
            gross_vehicle_weight_kg=27_000,
            gross_combination_weight_kg=40_000,
            axle_configuration="6x2",
            payload_kg=22_000,
            power_kw=400,
            power_ps=544,
            torque_nm=2_100,
            battery_capacity_kwh=600,
            range_km=500,
            charging_power_ac_kw=22,
            charging_power_dc_kw=400,
            cabin_type="Fernverkehr",
            length_mm=6_400,
            height_mm=3_950,
        ),
    ),
    "electric2": TruckParameters(
        name="Elektro-Sattelzug 2",
        type="electric",
        purchase_price=320_000,
        annual_mileage=100_000,
        fuel_cost_per_unit=0.35,
        maintenance_cost_annual=8_500,
        insurance_cost_annual=11_000,
        expected_lifespan_years=12,
        fuel_efficiency=130,
        technical_specs=TechnicalSpecs(
            gross_vehicle_weight_kg=27_000,
            gross_combination_weight_kg=44_000,
            axle_configuration="6x4",
            payload_kg=23_000,
            power_kw=450,
            power_ps=612,
            torque_nm=2_200,
            battery_capacity_kwh=624,
            range_km=530,
            charging_power_ac_kw=43,
            charging_power_dc_kw=375,
            cabin_type="Fernverkehr",
            length_mm=6_450,
            height_mm=4_000,
        ),
    ),
})
