from __future__ import annotations

import argparse
import json
import logging
import random
from pathlib import Path

from rich.console import Console
from rich.table import Table

from rain_alert.core.display import format_distance, format_duration, format_eta
from rain_alert.core.engine import calculate_routes
from rain_alert.core.models import Coordinate
from rain_alert.core.selection import SPEED_MPS, check_navigation, select_route, simulate_live_routes
from rain_alert.providers.combined import build_provider

RISK_STYLE = {"low": "green", "medium": "yellow", "high": "red"}


def _save_json(path: Path, obj) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, indent=2), encoding="utf-8")


def _run_scored(args, console: Console, start: Coordinate, end: Coordinate, rng) -> None:
    areas = build_provider(args.provider).get_flooded_areas()
    routes = calculate_routes(start, end, areas, rng=rng)

    table = Table(title=f"Routes ({len(areas)} flooded areas, provider={args.provider})")
    table.add_column("Id")
    table.add_column("Name")
    table.add_column("Distance")
    table.add_column("Duration")
    table.add_column("Risk")
    table.add_column("Flooding")

    for r in routes:
        risk = r.flood_risk.value
        table.add_row(
            r.id,
            r.name,
            format_distance(r.distance_km),
            format_duration(r.duration_min),
            f"[{RISK_STYLE[risk]}]{risk}[/]",
            "yes" if r.has_flooding else "no",
        )
    console.print(table)

    if args.save:
        out = Path("trips") / "last_run_routes.json"
        _save_json(
            out,
            {
                "routes": [r.model_dump(mode="json") for r in routes],
                "flooded_areas": [a.model_dump(mode="json") for a in areas],
            },
        )
        console.print(f"Saved: {out.resolve()}")


def _run_live(args, console: Console, start: Coordinate, end: Coordinate, rng) -> None:
    candidates = simulate_live_routes(start, end, mode=args.mode, rng=rng)
    sel = select_route(candidates)

    table = Table(title=f"Live routes ({args.mode})")
    table.add_column("")
    table.add_column("Route")
    table.add_column("Distance")
    table.add_column("Duration")
    table.add_column("ETA")
    table.add_column("Status")

    for r in candidates:
        chk = check_navigation(r)
        status = {"ok": "[green]clear[/]", "warning": "[yellow]warning[/]", "danger": "[red]flood[/]"}[chk.level]
        table.add_row(
            "*" if r.id == sel.selected_id else "",
            r.title,
            format_distance(r.distance_km),
            format_duration(r.duration_min),
            format_eta(r.duration_min),
            status,
        )
    console.print(table)
    if sel.flood_alert:
        console.print("[bold red]Flood detected on fastest route.[/] " + sel.reason)


def main() -> None:
    ap = argparse.ArgumentParser(description="Flood-aware route evaluation")
    ap.add_argument("--from", dest="start", required=True, help="Start as 'lat,lon'")
    ap.add_argument("--to", dest="end", required=True, help="Destination as 'lat,lon'")
    ap.add_argument("--provider", default="mock", help="e.g. mock, reports, mock+reports")
    ap.add_argument("--seed", type=int, default=None, help="Seed the route perturbation")
    ap.add_argument("--live", action="store_true", help="Simulate live-map candidates instead")
    ap.add_argument("--mode", default="car", choices=sorted(SPEED_MPS))
    ap.add_argument("--save", action="store_true", help="Write trips/last_run_routes.json")
    ap.add_argument("--debug", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        start = Coordinate.parse(args.start)
        end = Coordinate.parse(args.end)
    except ValueError as e:
        ap.error(str(e))

    rng = random.Random(args.seed) if args.seed is not None else None
    console = Console()

    if args.live:
        _run_live(args, console, start, end, rng)
    else:
        _run_scored(args, console, start, end, rng)


if __name__ == "__main__":
    main()
