import random

import pytest
from pydantic import ValidationError

from rain_alert.core.engine import calculate_routes
from rain_alert.core.geo import total_distance
from rain_alert.core.models import RiskLevel
from rain_alert.core.route import generate_route
from rain_alert.providers.mock import MockFloodProvider

from conftest import FixedRandom, area_at, coord

START = coord(14.60, 120.98)
END = coord(14.70, 121.08)


def test_three_routes_in_generation_order_when_dry():
    routes = calculate_routes(START, END, [], rng=random.Random(3))
    assert [r.id for r in routes] == ["route1", "route2", "route3"]
    assert [r.name for r in routes] == ["Main Route", "Alternative Route 1", "Alternative Route 2"]
    assert all(r.flood_risk is RiskLevel.LOW and not r.has_flooding for r in routes)


def test_distance_and_duration_derivation():
    for r in calculate_routes(START, END, [], rng=random.Random(11)):
        assert r.distance_km == pytest.approx(total_distance(r.coordinates))
        assert r.duration_min == round(r.distance_km * 2)
        assert isinstance(r.duration_min, int)


def test_flooded_main_route_sorts_last():
    # FixedRandom shifts every interior point by +0.005°, so a small zone on the
    # straight line only catches the main route.
    mid = generate_route(START, END)[2]
    routes = calculate_routes(START, END, [area_at(mid, "severe", 10)], rng=FixedRandom())
    assert [r.id for r in routes] == ["route2", "route3", "route1"]
    assert [r.flood_risk for r in routes] == [RiskLevel.LOW, RiskLevel.LOW, RiskLevel.HIGH]


def test_equal_risk_routes_keep_generation_order():
    mid = generate_route(START, END)[2]
    shifted = coord(mid.latitude + 0.005, mid.longitude + 0.005)
    routes = calculate_routes(START, END, [area_at(shifted, "moderate", 10)], rng=FixedRandom())
    assert [r.id for r in routes] == ["route1", "route2", "route3"]
    assert [r.flood_risk for r in routes] == [RiskLevel.LOW, RiskLevel.MEDIUM, RiskLevel.MEDIUM]


@pytest.mark.parametrize("seed", range(10))
def test_output_is_sorted_by_risk(seed):
    sf_start = coord(37.770, -122.425)
    sf_end = coord(37.800, -122.410)
    routes = calculate_routes(sf_start, sf_end, MockFloodProvider().get_flooded_areas(), rng=random.Random(seed))
    ordinals = [r.flood_risk.ordinal for r in routes]
    assert ordinals == sorted(ordinals)
    for r in routes:
        assert r.coordinates[0] == sf_start
        assert r.coordinates[-1] == sf_end


def test_routes_are_frozen():
    route = calculate_routes(START, END, [], rng=random.Random(0))[0]
    with pytest.raises(ValidationError):
        route.flood_risk = RiskLevel.HIGH


def test_calculate_routes_across_the_antimeridian():
    routes = calculate_routes(coord(10.0, 179.999), coord(10.01, 179.9995), [], rng=random.Random(0))
    assert len(routes) == 3
    assert all(r.flood_risk is RiskLevel.LOW for r in routes)
