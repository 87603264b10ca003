from __future__ import annotations

import random
from typing import List, Optional, Sequence

from rain_alert.config import settings
from rain_alert.core.flooding import check_route_for_flooding
from rain_alert.core.geo import total_distance
from rain_alert.core.models import Coordinate, FloodedArea, Route
from rain_alert.core.route import generate_alternatives

# 30 km/h average speed
MINUTES_PER_KM = 2


def calculate_routes(
    start: Coordinate,
    end: Coordinate,
    flooded_areas: Sequence[FloodedArea],
    rng: Optional[random.Random] = None,
) -> List[Route]:
    candidates = generate_alternatives(
        start,
        end,
        rng=rng,
        steps=settings.route_steps,
        max_offset_deg=settings.perturbation_deg,
    )

    routes: List[Route] = []
    for index, coords in enumerate(candidates):
        check = check_route_for_flooding(coords, flooded_areas)
        km = total_distance(coords)
        routes.append(
            Route(
                id=f"route{index + 1}",
                name="Main Route" if index == 0 else f"Alternative Route {index}",
                distance_km=km,
                duration_min=round(km * MINUTES_PER_KM),
                flood_risk=check.risk,
                has_flooding=check.has_flooding,
                coordinates=tuple(coords),
            )
        )

    # sorted() is stable: equal-risk routes keep generation order
    return sorted(routes, key=lambda r: r.flood_risk.ordinal)
