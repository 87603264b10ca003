import pytest

from rain_alert.cache import redis_client
from rain_alert.config import settings
from rain_alert.core.models import AlertLevel, Coordinate, FloodedArea


@pytest.fixture(autouse=True)
def no_redis(monkeypatch):
    """Tests never talk to a real Redis; every cache call is a miss."""
    monkeypatch.setattr(settings, "redis_url", "")
    redis_client.reset_redis()
    yield
    redis_client.reset_redis()


def coord(lat: float, lon: float) -> Coordinate:
    return Coordinate(latitude=lat, longitude=lon)


def area_at(point: Coordinate, level: str, radius_m: float = 100.0) -> FloodedArea:
    return FloodedArea(location=point, level=AlertLevel(level), radius=radius_m)


class FixedRandom:
    """Stand-in rng: every uniform() draw returns the upper bound."""

    def uniform(self, a, b):
        return b

    def random(self):
        return 0.0
