"""Redis key naming conventions for the rain-alert cache layer."""
from __future__ import annotations

import hashlib

_PREFIX = "ra"


# ── Flood reports ────────────────────────────────────────────────────────

def flood_reports(base_url: str) -> str:
    """Key for the backend /reports listing (per backend URL)."""
    h = hashlib.sha256(base_url.encode()).hexdigest()[:16]
    return f"{_PREFIX}:reports:{h}"


# ── Worker ───────────────────────────────────────────────────────────────

def worker_last_refresh() -> str:
    return f"{_PREFIX}:worker:last_refresh"
