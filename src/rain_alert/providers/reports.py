from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from rain_alert.cache.keys import flood_reports
from rain_alert.cache.redis_client import cache_delete, cache_get_json, cache_set_json
from rain_alert.config import settings
from rain_alert.core.models import AlertLevel, Coordinate, FloodedArea
from rain_alert.providers.base import FloodAreaProvider
from rain_alert.providers.http import HTTPClient

log = logging.getLogger(__name__)


def report_to_area(row: Dict[str, Any]) -> FloodedArea:
    """
    Convert one backend report row into a flood zone.

    Rows look like ``{"latitude": "15.03", "longitude": "120.69", "level":
    "moderate", ...}``; coordinates may arrive as numeric strings and
    ``radius`` (metres) is optional.
    """
    level = AlertLevel(str(row["level"]).strip().lower())
    radius = row.get("radius")
    return FloodedArea(
        location=Coordinate(latitude=float(row["latitude"]), longitude=float(row["longitude"])),
        level=level,
        radius=float(radius) if radius is not None else level.default_radius_m,
    )


class ReportsFloodProvider(FloodAreaProvider):
    """User-submitted flood reports from the backend's ``/reports`` endpoint."""

    def __init__(self, http: Optional[HTTPClient] = None):
        self.http = http or HTTPClient(
            base_url=settings.backend_url,
            timeout_s=settings.http_timeout_s,
            tries=settings.http_tries,
        )

    def _cache_key(self) -> str:
        return flood_reports(self.http.base_url)

    def fetch_reports(self, use_cache: bool = True) -> List[Dict[str, Any]]:
        key = self._cache_key()
        if use_cache:
            cached = cache_get_json(key)
            if cached is not None:
                return cached

        rows = self.http.get_json("/reports")
        if not isinstance(rows, list):
            raise RuntimeError(f"Unexpected /reports payload: {type(rows).__name__}")

        log.info("Fetched %d flood reports from %s", len(rows), self.http.base_url)
        cache_set_json(key, rows, ttl=settings.ttl_flood_reports)
        return rows

    def get_flooded_areas(self) -> list[FloodedArea]:
        areas: list[FloodedArea] = []
        for row in self.fetch_reports():
            try:
                areas.append(report_to_area(row))
            except (KeyError, TypeError, ValueError, ValidationError) as exc:
                ref = row.get("id", "?") if isinstance(row, dict) else repr(row)
                log.warning("Skipping malformed flood report %s: %s", ref, exc)
        return areas

    def submit_report(
        self,
        location: Coordinate,
        level: AlertLevel,
        description: str,
        address: Optional[str] = None,
    ) -> Dict[str, Any]:
        resp = self.http.post_json(
            "/reports",
            {
                "latitude": location.latitude,
                "longitude": location.longitude,
                "address": address,
                "level": level.value,
                "description": description,
            },
        )
        log.info("Submitted %s flood report at (%.5f, %.5f)", level.value, location.latitude, location.longitude)
        # Next read must see the new report
        cache_delete(self._cache_key())
        return resp
