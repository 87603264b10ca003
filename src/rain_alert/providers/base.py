from __future__ import annotations

from abc import ABC, abstractmethod
from rain_alert.core.models import FloodedArea


class FloodAreaProvider(ABC):
    """Supply the flood zones routes are checked against."""

    @abstractmethod
    def get_flooded_areas(self) -> list[FloodedArea]:
        raise NotImplementedError
