"""In-memory scenario store — named sets of raw comparison inputs.

Only inputs are stored (three trucks, horizon, incentive region).  Results
are always recomputed.  One lock guards all operations; concurrent updates
to the same scenario are last-writer-wins.
"""

from __future__ import annotations

import itertools
import threading
from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator

from truck_tco.config.constants import MAX_HORIZON_YEARS, MIN_HORIZON_YEARS
from truck_tco.config.incentives import DEFAULT_REGION, REGIONAL_INCENTIVES
from truck_tco.config.truck import TruckParameters


class ScenarioInput(BaseModel):
    """Body for creating a scenario."""

    name: str = Field(min_length=1, description="Scenario label")
    diesel_truck: TruckParameters
    electric_truck_1: TruckParameters
    electric_truck_2: TruckParameters
    timeframe_years: int = Field(default=10, ge=MIN_HORIZON_YEARS, le=MAX_HORIZON_YEARS)
    tax_incentive_region: str = DEFAULT_REGION

    @field_validator("tax_incentive_region")
    @classmethod
    def _known_region(cls, value: str) -> str:
        if value not in REGIONAL_INCENTIVES:
            raise ValueError(f"unknown incentive region {value!r}")
        return value


class ScenarioUpdate(BaseModel):
    """Body for a partial update.  Omitted fields keep their stored value."""

    name: str | None = Field(default=None, min_length=1)
    diesel_truck: TruckParameters | None = None
    electric_truck_1: TruckParameters | None = None
    electric_truck_2: TruckParameters | None = None
    timeframe_years: int | None = Field(default=None, ge=MIN_HORIZON_YEARS, le=MAX_HORIZON_YEARS)
    tax_incentive_region: str | None = None

    @field_validator("tax_incentive_region")
    @classmethod
    def _known_region(cls, value: str | None) -> str | None:
        if value is not None and value not in REGIONAL_INCENTIVES:
            raise ValueError(f"unknown incentive region {value!r}")
        return value


class StoredScenario(ScenarioInput):
    id: int
    created_at: datetime
    updated_at: datetime


def _now() -> datetime:
    return datetime.now(timezone.utc)


class ScenarioStore:
    """Thread-safe dict of ``StoredScenario`` keyed by auto-increment id."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._scenarios: dict[int, StoredScenario] = {}

    def list_all(self) -> list[StoredScenario]:
        with self._lock:
            return sorted(self._scenarios.values(), key=lambda s: s.id)

    def get(self, scenario_id: int) -> StoredScenario | None:
        with self._lock:
            return self._scenarios.get(scenario_id)

    def create(self, data: ScenarioInput) -> StoredScenario:
        with self._lock:
            now = _now()
            scenario = StoredScenario(
                id=next(self._ids),
                created_at=now,
                updated_at=now,
                **data.model_dump(),
            )
            self._scenarios[scenario.id] = scenario
            return scenario

    def update(self, scenario_id: int, data: ScenarioUpdate) -> StoredScenario | None:
        with self._lock:
            current = self._scenarios.get(scenario_id)
            if current is None:
                return None
            changes = data.model_dump(exclude_unset=True, exclude_none=True)
            merged = current.model_dump()
            merged.update(changes)
            merged["updated_at"] = _now()
            scenario = StoredScenario(**merged)
            self._scenarios[scenario_id] = scenario
            return scenario

    def delete(self, scenario_id: int) -> bool:
        with self._lock:
            return self._scenarios.pop(scenario_id, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._scenarios.clear()
