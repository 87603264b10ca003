# path: rain-alert/src/rain_alert/contracts/route_contract.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal

from rain_alert.core.models import RiskLevel


@dataclass(frozen=True)
class FloodCheck:
    has_flooding: bool
    risk: RiskLevel
    severe_hits: int = 0
    moderate_hits: int = 0
    caution_hits: int = 0


@dataclass(frozen=True)
class RouteSelection:
    selected_id: str
    flood_alert: bool  # primary route is flooded; surface the alert banner
    reason: str


@dataclass(frozen=True)
class NavigationCheck:
    allowed: bool
    level: Literal["ok", "warning", "danger"]
    message: str
