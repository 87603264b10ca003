from __future__ import annotations

from typing import List

from rain_alert.core.models import FloodedArea
from rain_alert.providers.base import FloodAreaProvider


class ChainProvider(FloodAreaProvider):
    """
    Concatenates the zones of several providers, in order.

    Intended use:
      MockFloodProvider()    -> modelled demo zones
      ReportsFloodProvider() -> user reports from the backend
    """

    def __init__(self, providers: List[FloodAreaProvider]):
        self.providers = providers

    def get_flooded_areas(self) -> list[FloodedArea]:
        out: list[FloodedArea] = []
        for prov in self.providers:
            out.extend(prov.get_flooded_areas())
        return out


def build_provider(provider_str: str) -> ChainProvider:
    """
    Build a provider stack from a string like:
      "mock"
      "reports"
      "mock+reports"
    """
    tokens = [t.strip().lower() for t in provider_str.split("+") if t.strip()]
    if not tokens:
        tokens = ["mock"]

    # Local imports to avoid circular imports
    from rain_alert.providers.mock import MockFloodProvider
    from rain_alert.providers.reports import ReportsFloodProvider

    providers: List[FloodAreaProvider] = []
    for t in tokens:
        if t == "mock":
            providers.append(MockFloodProvider())
        elif t in ("reports", "backend"):
            providers.append(ReportsFloodProvider())
        else:
            raise ValueError(f"Unknown provider token: '{t}' (supported: mock, reports)")

    return ChainProvider(providers)
