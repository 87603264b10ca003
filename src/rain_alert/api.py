"""FastAPI REST backend for flood-aware route evaluation."""
from __future__ import annotations

import logging
import random
from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

import requests
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from rain_alert.core.display import format_distance, format_duration, format_eta
from rain_alert.core.engine import calculate_routes
from rain_alert.core.models import AlertLevel, Coordinate, FloodedArea, LiveRoute, RiskLevel
from rain_alert.core.selection import check_navigation, select_route, simulate_live_routes
from rain_alert.providers.combined import build_provider
from rain_alert.providers.reports import ReportsFloodProvider
from rain_alert.routers import notifications

log = logging.getLogger(__name__)

app = FastAPI(title="Rain Alert", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(notifications.router)


# ---------------------------------------------------------------------------
# Module-level provider singletons
# ---------------------------------------------------------------------------
_provider_cache: Dict[str, Any] = {}


def _get_provider(provider_str: str):
    if provider_str not in _provider_cache:
        _provider_cache[provider_str] = build_provider(provider_str)
    return _provider_cache[provider_str]


def _load_areas(provider_str: str) -> List[FloodedArea]:
    try:
        return _get_provider(provider_str).get_flooded_areas()
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except (requests.RequestException, RuntimeError) as e:
        log.error("Flood area provider '%s' failed: %s", provider_str, e)
        raise HTTPException(status_code=502, detail=f"Flood data unavailable: {e}")


def _rng(seed: Optional[int]) -> Optional[random.Random]:
    return random.Random(seed) if seed is not None else None


# ---------------------------------------------------------------------------
# Request / Response models
# ---------------------------------------------------------------------------

class CalculateRoutesRequest(BaseModel):
    start: Coordinate
    end: Coordinate
    provider: str = "mock"
    # When given, used instead of the provider
    flooded_areas: Optional[List[FloodedArea]] = None
    seed: Optional[int] = None


class RouteOut(BaseModel):
    id: str
    name: str
    distance_km: float
    duration_min: int
    distance: str
    duration: str
    flood_risk: RiskLevel
    has_flooding: bool
    coordinates: List[Coordinate]


class CalculateRoutesResponse(BaseModel):
    routes: List[RouteOut]
    flooded_area_count: int


class LiveRoutesRequest(BaseModel):
    start: Coordinate
    end: Coordinate
    mode: Literal["car", "bicycle", "motorcycle"] = "car"
    seed: Optional[int] = None


class LiveRouteOut(BaseModel):
    id: str
    title: str
    distance_km: float
    duration_min: int
    distance: str
    duration: str
    eta: str
    coordinates: List[Coordinate]
    is_fastest: bool
    has_flood: bool
    has_warning: bool


class SelectionOut(BaseModel):
    selected_id: str
    flood_alert: bool
    reason: str


class LiveRoutesResponse(BaseModel):
    routes: List[LiveRouteOut]
    selection: SelectionOut


class SelectRequest(BaseModel):
    candidates: List[LiveRoute] = Field(..., min_length=1)


class NavigateRequest(BaseModel):
    route: LiveRoute


class NavigationOut(BaseModel):
    allowed: bool
    level: str
    message: str


class ReportIn(BaseModel):
    latitude: float
    longitude: float
    level: AlertLevel
    description: str = ""
    address: Optional[str] = None


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@app.get("/health")
def health():
    redis_ok = False
    try:
        from rain_alert.cache.redis_client import get_redis
        r = get_redis()
        if r is not None:
            r.ping()
            redis_ok = True
    except Exception as exc:
        log.warning("Redis health check failed: %s", exc)

    return {"status": "ok", "redis": redis_ok}


@app.get("/flooded-areas", response_model=List[FloodedArea])
def flooded_areas(provider: str = Query(default="mock")):
    return _load_areas(provider)


@app.post("/routes/calculate", response_model=CalculateRoutesResponse)
def routes_calculate(req: CalculateRoutesRequest):
    areas = req.flooded_areas if req.flooded_areas is not None else _load_areas(req.provider)
    try:
        routes = calculate_routes(req.start, req.end, areas, rng=_rng(req.seed))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return CalculateRoutesResponse(
        routes=[
            RouteOut(
                id=r.id,
                name=r.name,
                distance_km=r.distance_km,
                duration_min=r.duration_min,
                distance=format_distance(r.distance_km),
                duration=format_duration(r.duration_min),
                flood_risk=r.flood_risk,
                has_flooding=r.has_flooding,
                coordinates=list(r.coordinates),
            )
            for r in routes
        ],
        flooded_area_count=len(areas),
    )


def _selection_out(candidates: List[LiveRoute]) -> SelectionOut:
    sel = select_route(candidates)
    if sel.flood_alert:
        log.info("Flood on fastest route; selected %s (%s)", sel.selected_id, sel.reason)
    return SelectionOut(selected_id=sel.selected_id, flood_alert=sel.flood_alert, reason=sel.reason)


@app.post("/routes/live", response_model=LiveRoutesResponse)
def routes_live(req: LiveRoutesRequest):
    try:
        candidates = simulate_live_routes(req.start, req.end, mode=req.mode, rng=_rng(req.seed))
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    now = datetime.now()
    return LiveRoutesResponse(
        routes=[
            LiveRouteOut(
                **r.model_dump(exclude={"coordinates"}),
                coordinates=list(r.coordinates),
                distance=format_distance(r.distance_km),
                duration=format_duration(r.duration_min),
                eta=format_eta(r.duration_min, now=now),
            )
            for r in candidates
        ],
        selection=_selection_out(candidates),
    )


@app.post("/routes/select", response_model=SelectionOut)
def routes_select(req: SelectRequest):
    return _selection_out(req.candidates)


@app.post("/routes/navigate", response_model=NavigationOut)
def routes_navigate(req: NavigateRequest):
    chk = check_navigation(req.route)
    return NavigationOut(allowed=chk.allowed, level=chk.level, message=chk.message)


@app.post("/reports", status_code=201)
def submit_report(body: ReportIn):
    try:
        location = Coordinate(latitude=body.latitude, longitude=body.longitude)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    try:
        return ReportsFloodProvider().submit_report(location, body.level, body.description, address=body.address)
    except requests.RequestException as e:
        log.error("Submitting flood report failed: %s", e)
        raise HTTPException(status_code=502, detail=f"Report submission failed: {e}")
