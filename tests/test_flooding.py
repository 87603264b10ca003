import pytest

from rain_alert.core.flooding import check_route_for_flooding
from rain_alert.core.models import RiskLevel

from conftest import area_at, coord

# Points ~22 km apart along a meridian, far enough that a 100 m zone around
# one point never reaches another.
ROUTE = [coord(10.0 + 0.2 * i, 20.0) for i in range(6)]
FAR_AWAY = coord(-30.0, -60.0)


def _risk(areas):
    res = check_route_for_flooding(ROUTE, areas)
    return res.has_flooding, res.risk


def test_route_outside_all_areas():
    areas = [area_at(FAR_AWAY, "severe", 5000), area_at(FAR_AWAY, "moderate")]
    assert _risk(areas) == (False, RiskLevel.LOW)


def test_no_areas():
    assert _risk([]) == (False, RiskLevel.LOW)


def test_single_severe_hit_is_high():
    assert _risk([area_at(ROUTE[2], "severe")]) == (True, RiskLevel.HIGH)


def test_two_moderate_hits_are_high():
    areas = [area_at(ROUTE[1], "moderate"), area_at(ROUTE[4], "moderate")]
    assert _risk(areas) == (True, RiskLevel.HIGH)


def test_single_moderate_hit_is_medium():
    assert _risk([area_at(ROUTE[3], "moderate")]) == (True, RiskLevel.MEDIUM)


def test_three_caution_hits_are_medium():
    areas = [area_at(ROUTE[i], "caution") for i in (1, 2, 3)]
    assert _risk(areas) == (True, RiskLevel.MEDIUM)


def test_two_caution_hits_stay_low():
    areas = [area_at(ROUTE[i], "caution") for i in (1, 2)]
    assert _risk(areas) == (True, RiskLevel.LOW)


def test_single_caution_hit_is_low_but_flooded():
    assert _risk([area_at(ROUTE[0], "caution")]) == (True, RiskLevel.LOW)


def test_moderate_plus_cautions_is_medium():
    areas = [area_at(ROUTE[0], "moderate")] + [area_at(ROUTE[i], "caution") for i in (1, 2, 3, 4)]
    assert _risk(areas) == (True, RiskLevel.MEDIUM)


def test_reentering_one_area_counts_every_point():
    # One moderate zone wide enough to swallow two consecutive points
    midpoint = coord(10.3, 20.0)
    res = check_route_for_flooding(ROUTE, [area_at(midpoint, "moderate", radius_m=15_000)])
    assert res.moderate_hits == 2
    assert res.risk is RiskLevel.HIGH


def test_overlapping_areas_count_separately():
    areas = [area_at(ROUTE[2], "caution"), area_at(ROUTE[2], "caution"), area_at(ROUTE[2], "caution")]
    res = check_route_for_flooding(ROUTE, areas)
    assert res.caution_hits == 3
    assert res.risk is RiskLevel.MEDIUM


def test_radius_is_in_metres():
    # Zone centre ~1.11 km north of ROUTE[0]
    centre = coord(10.01, 20.0)
    assert check_route_for_flooding(ROUTE, [area_at(centre, "severe", 1000)]).has_flooding is False
    assert check_route_for_flooding(ROUTE, [area_at(centre, "severe", 1200)]).risk is RiskLevel.HIGH


def test_classification_is_idempotent():
    areas = [area_at(ROUTE[1], "moderate"), area_at(ROUTE[2], "caution")]
    first = check_route_for_flooding(ROUTE, areas)
    for _ in range(5):
        assert check_route_for_flooding(ROUTE, areas) == first


def test_empty_route_is_rejected():
    with pytest.raises(ValueError):
        check_route_for_flooding([], [area_at(FAR_AWAY, "severe")])
