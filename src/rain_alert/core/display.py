"""Display strings for route metrics (route cards, CLI tables, API payloads)."""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional


def format_distance(km: float) -> str:
    return f"{km:.1f} km"


def format_duration(minutes: int) -> str:
    return f"{minutes} min"


def format_eta(minutes: int, now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    return f"ETA {(now + timedelta(minutes=minutes)).strftime('%H:%M')}"
