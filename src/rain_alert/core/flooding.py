from __future__ import annotations

import logging
from typing import Sequence

from rain_alert.contracts.route_contract import FloodCheck
from rain_alert.core.geo import distance
from rain_alert.core.models import AlertLevel, Coordinate, FloodedArea, RiskLevel

log = logging.getLogger(__name__)


def _classify(severe: int, moderate: int, caution: int) -> FloodCheck:
    """
    First match wins:
      any severe hit            -> high
      more than one moderate    -> high
      one moderate / >2 caution -> medium
      any caution               -> low (but flooded)
    """
    counts = {"severe_hits": severe, "moderate_hits": moderate, "caution_hits": caution}
    if severe > 0:
        return FloodCheck(True, RiskLevel.HIGH, **counts)
    if moderate > 1:
        return FloodCheck(True, RiskLevel.HIGH, **counts)
    if moderate == 1 or caution > 2:
        return FloodCheck(True, RiskLevel.MEDIUM, **counts)
    if caution > 0:
        return FloodCheck(True, RiskLevel.LOW, **counts)
    return FloodCheck(False, RiskLevel.LOW, **counts)


def check_route_for_flooding(
    route: Sequence[Coordinate],
    flooded_areas: Sequence[FloodedArea],
) -> FloodCheck:
    """
    Count (point, area) pairs where the point lies inside the area's circle.

    A point inside two areas counts twice, and a route that re-enters an area
    counts it again for every point inside.
    """
    if not route:
        raise ValueError("route must contain at least one coordinate")

    severe = moderate = caution = 0
    for point in route:
        for area in flooded_areas:
            if distance(point, area.location) <= area.radius / 1000.0:
                if area.level is AlertLevel.SEVERE:
                    severe += 1
                elif area.level is AlertLevel.MODERATE:
                    moderate += 1
                else:
                    caution += 1

    result = _classify(severe, moderate, caution)
    log.debug(
        "Flood check: %d points, %d areas -> %s (severe=%d moderate=%d caution=%d)",
        len(route), len(flooded_areas), result.risk.value, severe, moderate, caution,
    )
    return result
