import json
import sys

import pytest

from rain_alert import cli
from rain_alert.tools.make_map import build_layers


def _run(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["rain-alert", *argv])
    cli.main()


def test_scored_routes_table(monkeypatch, capsys):
    _run(monkeypatch, "--from", "37.770,-122.425", "--to", "37.800,-122.410", "--seed", "3")
    out = capsys.readouterr().out
    for rid in ("route1", "route2", "route3"):
        assert rid in out


def test_save_then_build_map_layers(monkeypatch, tmp_path, capsys):
    monkeypatch.chdir(tmp_path)
    _run(monkeypatch, "--from", "37.770,-122.425", "--to", "37.800,-122.410", "--seed", "3", "--save")

    run = json.loads((tmp_path / "trips" / "last_run_routes.json").read_text(encoding="utf-8"))
    assert len(run["routes"]) == 3
    assert len(run["flooded_areas"]) == 5

    lines, circles = build_layers(run)
    assert len(lines) == 3 and len(circles) == 5
    assert lines[0]["points"][0] == [37.770, -122.425]
    assert {c["color"] for c in circles} <= {"#f1c40f", "#e67e22", "#c0392b"}


def test_live_mode(monkeypatch, capsys):
    _run(monkeypatch, "--from", "15.0277,120.6924", "--to", "15.0500,120.7100", "--live", "--mode", "bicycle", "--seed", "1")
    out = capsys.readouterr().out
    assert "Fastest Route" in out


def test_bad_coordinate_exits(monkeypatch):
    with pytest.raises(SystemExit):
        _run(monkeypatch, "--from", "95,0", "--to", "15.05,120.71")
