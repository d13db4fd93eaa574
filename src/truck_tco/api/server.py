"""FastAPI server — HTTP access to the truck TCO comparison.

Run with:
    uvicorn truck_tco.api.server:app --reload --port 8000

Or:
    python -m truck_tco.api.server

Endpoints:
    GET    /health                   — liveness probe
    GET    /incentives               — regional incentive table
    GET    /presets                  — operation-profile presets + default trucks
    POST   /calculate-tco            — full ComparisonResult
    POST   /calculate-tco/narrative  — plain-English interpretation + headline metrics
    POST   /calculate-tco/csv        — yearly breakdown of all three trucks as CSV
    GET    /scenarios                — list saved input sets
    GET    /scenarios/{id}           — one saved input set
    POST   /scenarios                — save an input set
    PATCH  /scenarios/{id}           — partial update
    DELETE /scenarios/{id}           — delete
"""

from __future__ import annotations

import logging
import os
from typing import Any

import pandas as pd
from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from starlette.exceptions import HTTPException as StarletteHTTPException

from truck_tco import __version__, configure_logging
from truck_tco.api.narrative import generate_narrative, headline_metrics
from truck_tco.api.store import ScenarioInput, ScenarioStore, ScenarioUpdate, StoredScenario
from truck_tco.config.constants import MAX_FLEET_SIZE, MIN_FLEET_SIZE
from truck_tco.config.incentives import REGIONAL_INCENTIVES
from truck_tco.config.presets import DEFAULT_TRUCKS, OPERATION_PROFILE_PRESETS
from truck_tco.config.scenario import ComparisonRequest
from truck_tco.engine.orchestrator import run_comparison
from truck_tco.models.results import ComparisonResult

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="Truck TCO Comparator API",
    version=__version__,
    description=(
        "Total cost of ownership for a diesel truck versus two electric "
        "alternatives: yearly cost projection, break-even timing, savings "
        "and CO₂ impact."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

store = ScenarioStore()


@app.exception_handler(RequestValidationError)
async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("rejected %s %s: %d validation errors", request.method, request.url.path, len(exc.errors()))
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request data", "details": jsonable_errors(exc)},
    )


@app.exception_handler(StarletteHTTPException)
async def _http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


def jsonable_errors(exc: RequestValidationError) -> list[dict[str, Any]]:
    """Validation errors reduced to location + message."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class NarrativeRequest(ComparisonRequest):
    """Comparison inputs plus the number of identical trucks to report for."""

    fleet_size: int = Field(
        default=MIN_FLEET_SIZE, ge=MIN_FLEET_SIZE, le=MAX_FLEET_SIZE,
        description="Vehicles per option; scales money, fuel and CO₂ totals",
    )


class NarrativeResponse(BaseModel):
    narrative: str
    headline_metrics: dict[str, Any]


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _compute(req: ComparisonRequest) -> ComparisonResult:
    """Run the comparison; unexpected failures become a generic 500."""
    try:
        return run_comparison(req)
    except Exception:
        logger.exception("TCO calculation failed")
        raise HTTPException(status_code=500, detail="TCO calculation failed") from None


def breakdown_frame(result: ComparisonResult) -> pd.DataFrame:
    """Yearly breakdown of all three trucks stacked, with a ``truck`` column."""
    frames = []
    for a in result.analyses():
        df = a.to_dataframe()
        df.insert(0, "truck", a.name)
        frames.append(df)
    return pd.concat(frames, ignore_index=True)


def _get_or_404(scenario_id: int) -> StoredScenario:
    scenario = store.get(scenario_id)
    if scenario is None:
        raise HTTPException(status_code=404, detail="Scenario not found")
    return scenario


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/")
def root():
    return {
        "name": "Truck TCO Comparator API",
        "version": __version__,
        "start_here": "POST /calculate-tco",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/incentives")
def get_incentives():
    """Regional incentive table keyed by region."""
    return {key: inc.model_dump() for key, inc in REGIONAL_INCENTIVES.items()}


@app.get("/presets")
def get_presets():
    """Operation-profile presets and the default three trucks."""
    return {
        "operation_profiles": {k: p.model_dump() for k, p in OPERATION_PROFILE_PRESETS.items()},
        "trucks": {k: t.model_dump() for k, t in DEFAULT_TRUCKS.items()},
    }


@app.post("/calculate-tco", response_model=ComparisonResult)
def calculate_tco(req: ComparisonRequest):
    """Project all three trucks and compare each electric option to diesel."""
    return _compute(req)


@app.post("/calculate-tco/narrative", response_model=NarrativeResponse)
def calculate_tco_narrative(req: NarrativeRequest):
    """Same calculation, returned as prose plus a few headline numbers.

    ``fleet_size`` scales totals only; the engine always projects one truck.
    """
    result = _compute(req)
    return NarrativeResponse(
        narrative=generate_narrative(result, req.fleet_size),
        headline_metrics=headline_metrics(result, req.fleet_size),
    )


@app.post("/calculate-tco/csv")
def calculate_tco_csv(req: ComparisonRequest):
    """Yearly breakdown as CSV, one row per truck and year."""
    result = _compute(req)
    csv_text = breakdown_frame(result).to_csv(index=False)
    return Response(
        content=csv_text,
        media_type="text/csv",
        headers={"Content-Disposition": 'attachment; filename="tco_breakdown.csv"'},
    )


@app.get("/scenarios", response_model=list[StoredScenario])
def list_scenarios():
    return store.list_all()


@app.get("/scenarios/{scenario_id}", response_model=StoredScenario)
def get_scenario(scenario_id: int):
    return _get_or_404(scenario_id)


@app.post("/scenarios", response_model=StoredScenario, status_code=201)
def create_scenario(data: ScenarioInput):
    scenario = store.create(data)
    logger.info("created scenario %d (%s)", scenario.id, scenario.name)
    return scenario


@app.patch("/scenarios/{scenario_id}", response_model=StoredScenario)
def update_scenario(scenario_id: int, data: ScenarioUpdate):
    scenario = store.update(scenario_id, data)
    if scenario is None:
        raise HTTPException(status_code=404, detail="Scenario not found")
    return scenario


@app.delete("/scenarios/{scenario_id}", status_code=204)
def delete_scenario(scenario_id: int):
    if not store.delete(scenario_id):
        raise HTTPException(status_code=404, detail="Scenario not found")
    return Response(status_code=204)


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn

    configure_logging()
    uvicorn.run(
        "truck_tco.api.server:app",
        host=os.getenv("TRUCK_TCO_HOST", "0.0.0.0"),
        port=int(os.getenv("TRUCK_TCO_PORT", "8000")),
        reload=True,
    )


if __name__ == "__main__":
    main()
