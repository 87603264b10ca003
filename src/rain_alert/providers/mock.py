from __future__ import annotations

from rain_alert.core.models import AlertLevel, Coordinate, FloodedArea
from rain_alert.providers.base import FloodAreaProvider

# (lat, lon, level): downtown San Francisco demo zones
_MOCK_AREAS = [
    (37.7749, -122.4194, AlertLevel.SEVERE),
    (37.7833, -122.4167, AlertLevel.MODERATE),
    (37.8025, -122.4382, AlertLevel.CAUTION),
    (37.7923, -122.4102, AlertLevel.MODERATE),
    (37.7899, -122.4303, AlertLevel.CAUTION),
]


class MockFloodProvider(FloodAreaProvider):
    """
    Static flood zones so the pipeline runs end-to-end without the backend.
    Each zone uses the default radius for its level.
    """

    def get_flooded_areas(self) -> list[FloodedArea]:
        return [
            FloodedArea(
                location=Coordinate(latitude=lat, longitude=lon),
                level=level,
                radius=level.default_radius_m,
            )
            for lat, lon, level in _MOCK_AREAS
        ]
