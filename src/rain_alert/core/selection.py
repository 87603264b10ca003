"""
Live-map routing: candidate simulation, recommended-route selection and the
start-navigation gate.

Candidates here carry plain ``has_flood`` / ``has_warning`` flags rather than a
risk score. A flood on the fastest route triggers the flood alert and a search
for a clear alternative; a warning is advisory and never moves the selection.
"""
from __future__ import annotations

import random
from typing import Dict, List, Optional, Sequence

from rain_alert.contracts.route_contract import NavigationCheck, RouteSelection
from rain_alert.core.geo import distance, shifted
from rain_alert.core.models import Coordinate, LiveRoute

# Average speeds in m/s
SPEED_MPS: Dict[str, float] = {
    "car": 13.89,
    "motorcycle": 11.11,
    "bicycle": 5.56,
}


def _primary(candidates: Sequence[LiveRoute]) -> LiveRoute:
    for r in candidates:
        if r.is_fastest:
            return r
    return candidates[0]


def select_route(candidates: Sequence[LiveRoute]) -> RouteSelection:
    if not candidates:
        raise ValueError("no candidate routes to select from")

    primary = _primary(candidates)

    if not primary.has_flood:
        if primary.has_warning:
            return RouteSelection(primary.id, False, "fastest route has a warning; kept as advisory")
        return RouteSelection(primary.id, False, "fastest route is clear")

    # Primary is flooded: look for a dry alternative, clear ones first
    dry_clear: Optional[LiveRoute] = None
    dry_warned: Optional[LiveRoute] = None
    for r in candidates:
        if r.has_flood:
            continue
        if not r.has_warning:
            if dry_clear is None:
                dry_clear = r
        elif dry_warned is None:
            dry_warned = r

    if dry_clear is not None:
        return RouteSelection(dry_clear.id, True, "fastest route flooded; switched to clear alternative")
    if dry_warned is not None:
        return RouteSelection(dry_warned.id, True, "fastest route flooded; switched to alternative with warning")
    return RouteSelection(primary.id, True, "all routes flooded; keeping fastest route")


def check_navigation(route: LiveRoute) -> NavigationCheck:
    if route.has_flood:
        return NavigationCheck(
            allowed=False,
            level="danger",
            message=(
                "Danger Ahead! The selected route has a detected flood and might be "
                "impassable. Please consider an alternative route."
            ),
        )
    if route.has_warning:
        return NavigationCheck(
            allowed=True,
            level="warning",
            message="Warning! The selected route has a warning. Proceed with caution.",
        )
    return NavigationCheck(allowed=True, level="ok", message="Route is clear.")


def _offset(start: Coordinate, end: Coordinate, lat_frac: float, lon_frac: float) -> Coordinate:
    return Coordinate(
        latitude=start.latitude + (end.latitude - start.latitude) * lat_frac,
        longitude=start.longitude + (end.longitude - start.longitude) * lon_frac,
    )


def simulate_live_routes(
    start: Coordinate,
    end: Coordinate,
    mode: str = "car",
    rng: Optional[random.Random] = None,
) -> List[LiveRoute]:
    """
    Three simulated candidates with fixed shapes and random hazard flags.

    Placeholder for a directions API: lengths are 1.0x, 1.2x and 1.5x the
    straight-line distance, and flood/warning flags are drawn from ``rng``.
    """
    speed = SPEED_MPS.get(mode.lower().strip())
    if speed is None:
        raise ValueError(f"Unknown transport mode: '{mode}' (supported: {', '.join(SPEED_MPS)})")
    rng = rng if rng is not None else random.Random()

    base_m = distance(start, end) * 1000.0

    def _metrics(factor: float) -> Dict[str, float]:
        d_m = base_m * factor
        return {"distance_km": d_m / 1000.0, "duration_min": round(d_m / speed / 60)}

    fastest = LiveRoute(
        id="route-1",
        title="Fastest Route",
        coordinates=(start, _offset(start, end, 0.3, 0.2), _offset(start, end, 0.7, 0.9), end),
        is_fastest=True,
        has_flood=rng.random() > 0.8,
        has_warning=False,
        **_metrics(1.0),
    )
    alternative = LiveRoute(
        id="route-2",
        title="Alternative",
        coordinates=(start, _offset(start, end, 0.1, 0.5), _offset(start, end, 0.8, 0.1), end),
        has_flood=rng.random() > 0.9,
        has_warning=rng.random() > 0.5,
        **_metrics(1.2),
    )
    longer = LiveRoute(
        id="route-3",
        title="Longer Path",
        coordinates=(
            start,
            shifted(start, -0.01, 0.005),
            shifted(end, 0.005, -0.01),
            end,
        ),
        has_flood=rng.random() > 0.7,
        has_warning=False,
        **_metrics(1.5),
    )
    return [fastest, alternative, longer]
