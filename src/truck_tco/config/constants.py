"""Fixed modeling constants.

None of these are user-configurable.  Emission factors describe an assumed
fuel / grid mix, not live data.
"""

from types import MappingProxyType

# kg CO₂ per litre of diesel burned / per kWh drawn from the assumed grid mix
EMISSION_FACTORS = MappingProxyType({
    "diesel": 2.64,
    "electric": 0.38,
})

FUEL_UNITS = MappingProxyType({
    "diesel": "liters",
    "electric": "kWh",
})

CO2_UNIT = "kg"

# Share of the purchase price assumed left at end of service life.
RESIDUAL_VALUE_SHARE = 0.2

# Wall-to-battery efficiency for opportunity charging.
OPPORTUNITY_CHARGE_EFFICIENCY = 0.9

MIN_HORIZON_YEARS = 1
MAX_HORIZON_YEARS = 30

# Vehicles per fleet for scaling per-truck results in reports.
MIN_FLEET_SIZE = 1
MAX_FLEET_SIZE = 500
