from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field


class AlertLevel(str, Enum):
    CAUTION = "caution"
    MODERATE = "moderate"
    SEVERE = "severe"

    @property
    def default_radius_m(self) -> float:
        """Radius drawn for a reported area that carries none of its own."""
        return _DEFAULT_RADIUS_M[self]


_DEFAULT_RADIUS_M: Dict[AlertLevel, float] = {
    AlertLevel.CAUTION: 300.0,
    AlertLevel.MODERATE: 500.0,
    AlertLevel.SEVERE: 800.0,
}


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def ordinal(self) -> int:
        return _RISK_ORDINAL[self]


_RISK_ORDINAL: Dict[RiskLevel, int] = {
    RiskLevel.LOW: 0,
    RiskLevel.MEDIUM: 1,
    RiskLevel.HIGH: 2,
}


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90.0, le=90.0, allow_inf_nan=False)
    longitude: float = Field(..., ge=-180.0, le=180.0, allow_inf_nan=False)

    @classmethod
    def parse(cls, text: str) -> "Coordinate":
        """Parse ``"lat,lon"`` (CLI / query-string form)."""
        parts = [p.strip() for p in text.split(",")]
        if len(parts) != 2:
            raise ValueError(f"Expected 'lat,lon', got {text!r}")
        return cls(latitude=float(parts[0]), longitude=float(parts[1]))


class FloodedArea(BaseModel):
    """Circular flood zone; ``radius`` is in metres."""

    model_config = ConfigDict(frozen=True)

    location: Coordinate
    level: AlertLevel
    radius: float = Field(..., ge=0.0, allow_inf_nan=False)


class Route(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    distance_km: float
    duration_min: int
    flood_risk: RiskLevel
    has_flooding: bool
    coordinates: Tuple[Coordinate, ...] = Field(..., min_length=2)


class LiveRoute(BaseModel):
    """Candidate route of the live map, flagged instead of risk-scored."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    distance_km: float
    duration_min: int
    coordinates: Tuple[Coordinate, ...] = Field(..., min_length=2)
    is_fastest: bool = False
    has_flood: bool = False
    has_warning: bool = False
