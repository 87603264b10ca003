"""Route generation: straight-line routes and randomly perturbed alternatives."""
from __future__ import annotations

import random
from typing import List, Optional

from rain_alert.core.geo import shifted
from rain_alert.core.models import Coordinate


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _interpolate_point(start: Coordinate, end: Coordinate, frac: float) -> Coordinate:
    """Linear interpolation between two geographic points (frac in [0,1])."""
    return Coordinate(
        latitude=start.latitude + (end.latitude - start.latitude) * frac,
        longitude=start.longitude + (end.longitude - start.longitude) * frac,
    )


def _perturbed(route: List[Coordinate], rng: random.Random, max_offset_deg: float) -> List[Coordinate]:
    out = list(route)
    for i in range(1, len(out) - 1):
        dlat = rng.uniform(-max_offset_deg, max_offset_deg)
        dlon = rng.uniform(-max_offset_deg, max_offset_deg)
        out[i] = shifted(out[i], dlat, dlon)
    return out


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def generate_route(start: Coordinate, end: Coordinate, steps: int = 5) -> List[Coordinate]:
    """
    Straight route from ``start`` to ``end`` as ``steps + 1`` collinear points.

    Stand-in for a real directions API. The first and last points are the
    given endpoints, unchanged.
    """
    if steps < 1:
        raise ValueError(f"steps must be >= 1, got {steps}")

    route = [start]
    for i in range(1, steps):
        route.append(_interpolate_point(start, end, i / steps))
    route.append(end)
    return route


def generate_alternatives(
    start: Coordinate,
    end: Coordinate,
    rng: Optional[random.Random] = None,
    steps: int = 5,
    max_offset_deg: float = 0.005,
) -> List[List[Coordinate]]:
    """
    Returns ``[main, alt1, alt2]``.

    Each alternative moves every interior point of the main route by an
    independent uniform offset in ``[-max_offset_deg, max_offset_deg]`` on both
    axes. Pass a seeded ``random.Random`` to make the output reproducible.
    """
    rng = rng if rng is not None else random.Random()
    main = generate_route(start, end, steps=steps)
    alt1 = _perturbed(main, rng, max_offset_deg)
    alt2 = _perturbed(main, rng, max_offset_deg)
    return [main, alt1, alt2]
