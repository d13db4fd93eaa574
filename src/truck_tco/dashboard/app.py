"""Truck TCO Streamlit dashboard.

Layout: sidebar inputs (operation preset + editable profile, horizon,
incentive region, fleet size, three trucks) → main area with fleet-scaled
headline metrics, amortization chart, category breakdown, yearly table,
technical data and narrative.

Run with:
    streamlit run src/truck_tco/dashboard/app.py
"""

from __future__ import annotations

import streamlit as st

from truck_tco.api.narrative import generate_narrative, headline_metrics
from truck_tco.config import (
    DEFAULT_TRUCKS,
    OPERATION_PROFILE_PRESETS,
    REGIONAL_INCENTIVES,
    ComparisonRequest,
    OperationProfile,
    TruckParameters,
)
from truck_tco.config.constants import MAX_FLEET_SIZE, MIN_FLEET_SIZE
from truck_tco.config.incentives import DEFAULT_REGION
from truck_tco.config.presets import DEFAULT_PRESET
from truck_tco.dashboard.charts import (
    build_amortization_figure,
    build_cost_breakdown_figure,
    breakdown_table,
    technical_specs_table,
)
from truck_tco.engine.orchestrator import run_comparison

st.set_page_config(page_title="Truck TCO", page_icon="🚚", layout="wide")


# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------

def _truck_inputs(key: str, default: TruckParameters) -> TruckParameters:
    with st.sidebar.expander(default.name, expanded=key == "diesel"):
        name = st.text_input("Name", default.name, key=f"{key}_name")
        c1, c2 = st.columns(2)
        price = c1.number_input("Purchase price €", 0.0, 1_000_000.0, default.purchase_price, 5_000.0, key=f"{key}_price")
        mileage = c2.number_input("km / year", 0.0, 500_000.0, default.annual_mileage, 5_000.0, key=f"{key}_km")
        c1, c2 = st.columns(2)
        unit = "€/L" if default.type == "diesel" else "€/kWh"
        fuel_price = c1.number_input(unit, 0.0, 10.0, default.fuel_cost_per_unit, 0.01, key=f"{key}_fuel")
        cons_unit = "L/100km" if default.type == "diesel" else "kWh/100km"
        consumption = c2.number_input(cons_unit, 0.0, 500.0, default.fuel_efficiency, 1.0, key=f"{key}_cons")
        c1, c2 = st.columns(2)
        maintenance = c1.number_input("Maintenance €/yr", 0.0, 100_000.0, default.maintenance_cost_annual, 500.0, key=f"{key}_maint")
        insurance = c2.number_input("Insurance €/yr", 0.0, 100_000.0, default.insurance_cost_annual, 500.0, key=f"{key}_ins")
        lifespan = st.slider("Service life (years)", 1, 30, default.expected_lifespan_years, key=f"{key}_life")
    return default.model_copy(update={
        "name": name or default.name,
        "purchase_price": price,
        "annual_mileage": mileage,
        "fuel_cost_per_unit": fuel_price,
        "fuel_efficiency": consumption,
        "maintenance_cost_annual": maintenance,
        "insurance_cost_annual": insurance,
        "expected_lifespan_years": lifespan,
    })


def _profile_inputs(preset: str, seed: OperationProfile) -> OperationProfile:
    """Editable operation profile, seeded from the selected preset."""
    k = f"op_{preset}"
    with st.sidebar.expander("Operation profile", expanded=preset == "custom"):
        c1, c2 = st.columns(2)
        daily_km = c1.number_input("km / day", 0.0, 2_000.0, seed.daily_km, 10.0, key=f"{k}_km")
        daily_km_p90 = c2.number_input("km on a hard day", 0.0, 2_000.0, seed.daily_km_p90, 10.0, key=f"{k}_p90")
        c1, c2 = st.columns(2)
        stops = c1.number_input("Stops / day", 0, 500, seed.stops_per_day, 1, key=f"{k}_stops")
        stop_minutes = c2.number_input("Minutes / stop", 0.0, 240.0, seed.stop_minutes, 1.0, key=f"{k}_stopmin")
        work_days = st.slider("Work days / year", 0, 366, seed.work_days_per_year, key=f"{k}_days")
        use_p90 = st.checkbox("Mileage from hard-day km", seed.use_p90_for_calc, key=f"{k}_usep90")

        opportunity = st.checkbox("Opportunity charging", seed.opportunity_charging, key=f"{k}_opp")
        c1, c2 = st.columns(2)
        opp_minutes = c1.number_input(
            "Charge min / day", 0.0, 600.0, seed.opportunity_charge_minutes, 5.0,
            key=f"{k}_oppmin", disabled=not opportunity,
        )
        opp_power = c2.number_input(
            "Charger kW", 0.0, 1_000.0, seed.opportunity_charge_power_kw, 10.0,
            key=f"{k}_oppkw", disabled=not opportunity,
        )
        c1, c2 = st.columns(2)
        public_share = c1.slider("Public charging %", 0.0, 100.0, seed.public_charge_share, 5.0, key=f"{k}_pubshare")
        public_price = c2.number_input(
            "Public €/kWh", 0.0, 5.0, seed.public_charge_cost_per_kwh, 0.01, key=f"{k}_pubprice",
        )
        c1, c2 = st.columns(2)
        p90_share = c1.slider("Hard days %", 0.0, 100.0, seed.p90_share_percent, 1.0, key=f"{k}_p90share")
        downtime = c2.number_input("Downtime €/day", 0.0, 20_000.0, seed.downtime_cost_per_day, 100.0, key=f"{k}_down")

        c1, c2 = st.columns(2)
        capex = c1.number_input("Depot capex €", 0.0, 2_000_000.0, seed.infrastructure_capex, 5_000.0, key=f"{k}_capex")
        opex = c2.number_input("Depot opex €/yr", 0.0, 200_000.0, seed.infrastructure_opex_annual, 100.0, key=f"{k}_opex")
        infra_life = st.slider("Depot life (years)", 0, 30, seed.infrastructure_lifetime_years, key=f"{k}_life")
    return seed.model_copy(update={
        "daily_km": daily_km,
        "daily_km_p90": daily_km_p90,
        "stops_per_day": stops,
        "stop_minutes": stop_minutes,
        "work_days_per_year": work_days,
        "use_p90_for_calc": use_p90,
        "opportunity_charging": opportunity,
        "opportunity_charge_minutes": opp_minutes,
        "opportunity_charge_power_kw": opp_power,
        "public_charge_share": public_share,
        "public_charge_cost_per_kwh": public_price,
        "p90_share_percent": p90_share,
        "downtime_cost_per_day": downtime,
        "infrastructure_capex": capex,
        "infrastructure_opex_annual": opex,
        "infrastructure_lifetime_years": infra_life,
    })


st.sidebar.header("Inputs")

_PRESETS = list(OPERATION_PROFILE_PRESETS) + ["custom"]
preset = st.sidebar.selectbox("Operation profile", _PRESETS, index=_PRESETS.index(DEFAULT_PRESET))
# "custom" starts from the default preset's values.
profile = _profile_inputs(preset, OPERATION_PROFILE_PRESETS.get(preset, OPERATION_PROFILE_PRESETS[DEFAULT_PRESET]))
sync_mileage = st.sidebar.checkbox(
    f"Derive km/year from profile ({profile.annual_mileage():,.0f} km)", value=True,
)

horizon = st.sidebar.slider("Horizon (years)", 1, 30, 10)
_REGIONS = list(REGIONAL_INCENTIVES)
region = st.sidebar.selectbox(
    "Incentive region", _REGIONS,
    index=_REGIONS.index(DEFAULT_REGION),
    format_func=lambda k: REGIONAL_INCENTIVES[k].region,
)
fleet_size = st.sidebar.slider("Fleet size (vehicles)", MIN_FLEET_SIZE, MAX_FLEET_SIZE, 1)

diesel = _truck_inputs("diesel", DEFAULT_TRUCKS["diesel"])
electric1 = _truck_inputs("electric1", DEFAULT_TRUCKS["electric1"])
electric2 = _truck_inputs("electric2", DEFAULT_TRUCKS["electric2"])

request = ComparisonRequest(
    diesel_truck=diesel,
    electric_truck_1=electric1,
    electric_truck_2=electric2,
    timeframe_years=horizon,
    tax_incentive_region=region,
    operation_profile=profile,
    sync_mileage=sync_mileage,
)
result = run_comparison(request)


# ---------------------------------------------------------------------------
# Main area
# ---------------------------------------------------------------------------

st.title("Diesel vs. electric — total cost of ownership")

metrics = headline_metrics(result, fleet_size)
if fleet_size > 1:
    st.caption(f"{horizon}-year comparison · {fleet_size} vehicles per option")
c1, c2, c3, c4 = st.columns(4)
c1.metric("Best electric option", metrics["best_electric_name"])
c2.metric("Savings vs. diesel", f"€{metrics['max_savings']:,.0f}")
c3.metric("Break-even", metrics["break_even"])
co2 = metrics["co2_saved_kg"]
c4.metric("CO₂ saved" if co2 >= 0 else "Additional CO₂", f"{abs(co2) / 1000:,.1f} t")

st.subheader("Cumulative cost")
st.plotly_chart(build_amortization_figure(result), use_container_width=True)

st.subheader("Cost categories")
st.plotly_chart(build_cost_breakdown_figure(result), use_container_width=True)

st.subheader("Yearly cost")
table = breakdown_table(result)
st.dataframe(table, use_container_width=True, hide_index=True)
st.download_button(
    "Download CSV", table.to_csv(index=False), file_name="tco_yearly.csv", mime="text/csv",
)

st.subheader("Technical data")
specs = technical_specs_table(result)
if specs.empty:
    st.info("No technical data entered for these trucks.")
else:
    st.dataframe(specs, use_container_width=True)

with st.expander("Narrative"):
    st.text(generate_narrative(result, fleet_size))
