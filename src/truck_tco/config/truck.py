"""Truck parameters — one vehicle's cost and technical inputs."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Powertrain = Literal["diesel", "electric"]


class TechnicalSpecs(BaseModel):
    """Display-only technical data.

    Carried through to the result unmodified.  Only ``battery_capacity_kwh``
    and ``range_km`` are read by the engine, and only to estimate daily range
    for the downtime heuristic.
    """

    model_config = ConfigDict(frozen=True)

    gross_vehicle_weight_kg: float | None = Field(default=None, ge=0, description="Permissible gross weight (kg)")
    gross_combination_weight_kg: float | None = Field(default=None, ge=0, description="Gross combination weight (kg)")
    axle_configuration: str | None = Field(default=None, description="e.g. '4x2', '6x2'")
    payload_kg: float | None = Field(default=None, ge=0, description="Payload (kg)")
    power_kw: float | None = Field(default=None, ge=0, description="Rated power (kW)")
    power_ps: float | None = Field(default=None, ge=0, description="Rated power (PS)")
    torque_nm: float | None = Field(default=None, ge=0, description="Peak torque (Nm)")
    tank_capacity_l: float | None = Field(default=None, ge=0, description="Diesel tank capacity (L)")
    battery_capacity_kwh: float | None = Field(default=None, ge=0, description="Usable battery capacity (kWh)")
    range_km: float | None = Field(default=None, ge=0, description="Stated range on one charge / tank (km)")
    charging_power_ac_kw: float | None = Field(default=None, ge=0, description="AC charging power (kW)")
    charging_power_dc_kw: float | None = Field(default=None, ge=0, description="DC charging power (kW)")
    cabin_type: str | None = Field(default=None, description="Cabin type, e.g. 'Fernverkehr'")
    length_mm: float | None = Field(default=None, ge=0, description="Overall length (mm)")
    height_mm: float | None = Field(default=None, ge=0, description="Overall height (mm)")


class TruckParameters(BaseModel):
    """One truck, fixed for the duration of a calculation."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="Human label")
    type: Powertrain = Field(description="Powertrain kind")
    purchase_price: float = Field(ge=0, description="List price before any subsidy (€)")
    annual_mileage: float = Field(ge=0, description="Distance driven per year (km)")
    fuel_cost_per_unit: float = Field(ge=0, description="Diesel price per litre or grid price per kWh (€)")
    maintenance_cost_annual: float = Field(ge=0, description="Flat maintenance cost per year (€)")
    insurance_cost_annual: float = Field(ge=0, description="Flat insurance cost per year (€)")
    expected_lifespan_years: int = Field(ge=1, le=30, description="Service life used for depreciation (years)")
    fuel_efficiency: float = Field(
        ge=0,
        description="Consumption per 100 km — litres for diesel, kWh for electric.",
    )
    technical_specs: TechnicalSpecs | None = Field(default=None, description="Display-only specs")

    @property
    def is_electric(self) -> bool:
        return self.type == "electric"
