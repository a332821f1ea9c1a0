"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import Body, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from domecost.engine import ENGINE_VERSION
from domecost.exceptions import DomeCostError

if TYPE_CHECKING:
    from domecost.engine import CostEngine
    from domecost.models.estimate import EstimateResult

logger = logging.getLogger(__name__)

# 2,000 SF single dome on a flat site with standard options
SAMPLE_PROJECT: dict[str, Any] = {
    "floor_area_sf": 2000,
    "region_factor": 1.0,
    "finish_level": "standard",
    "dome_count": 1,
    "shell_height": "standard",
    "glazing": 0.20,
    "basement_type": "none",
    "site_complexity": "flat",
    "mechanical_tier": "standard",
    "bathroom_count": 2,
    "include_sitework": True,
    "contingency_pct": 10,
    "shell_thickness_in": 4,
    "mix_type": "standard",
    "remote_access": "easy",
    "inflation_power": "onsite",
}


def _response(result: EstimateResult) -> dict[str, Any]:
    return {
        "estimate": result.model_dump(mode="json"),
        "summary_dict": result.to_summary_dict(),
        "export_dict": result.to_export_dict(),
    }


def create_app(*, cost_engine: CostEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    cost_engine
        Optional pre-built cost engine for dependency injection (e.g. tests).
        If not provided, one is created via create_engine_from_env on first
        request.
    """
    app = FastAPI(title="domecost", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject engines
    app.state.cost_engine = cost_engine

    def _get_cost_engine() -> CostEngine:
        eng: CostEngine | None = app.state.cost_engine
        if eng is not None:
            return eng
        from domecost.factory import create_engine_from_env

        try:
            eng = create_engine_from_env()
        except DomeCostError as exc:
            logger.exception("Could not create cost engine")
            raise HTTPException(status_code=500, detail=str(exc)) from exc
        app.state.cost_engine = eng
        return eng

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(project: dict[str, Any] = Body(...)) -> dict[str, Any]:
        engine = _get_cost_engine()
        return _response(engine.estimate(project))

    # ------------------------------------------------------------------
    # GET /api/sample-estimate
    # ------------------------------------------------------------------

    @app.get("/api/sample-estimate")
    def sample_estimate() -> dict[str, Any]:
        engine = _get_cost_engine()
        return _response(engine.estimate(SAMPLE_PROJECT))

    # ------------------------------------------------------------------
    # GET /api/config
    # ------------------------------------------------------------------

    @app.get("/api/config")
    def config() -> dict[str, Any]:
        engine = _get_cost_engine()
        return engine.table.config.model_dump(mode="json")

    return app
