from __future__ import annotations

import json
from pathlib import Path


RISK_COLOR = {
    "low": "#2ecc71",
    "medium": "#f1c40f",
    "high": "#e74c3c",
}

LEVEL_COLOR = {
    "caution": "#f1c40f",
    "moderate": "#e67e22",
    "severe": "#c0392b",
}


def build_layers(run: dict) -> tuple[list[dict], list[dict]]:
    """Polylines (one per route) and circles (one per flooded area) for Leaflet."""
    lines = []
    for r in run.get("routes", []):
        risk = r.get("flood_risk", "low")
        lines.append(
            {
                "id": r["id"],
                "name": r.get("name", r["id"]),
                "points": [[c["latitude"], c["longitude"]] for c in r["coordinates"]],
                "color": RISK_COLOR.get(risk, "#3498db"),
                "risk": risk,
                "distance_km": r.get("distance_km"),
                "duration_min": r.get("duration_min"),
            }
        )

    circles = []
    for a in run.get("flooded_areas", []):
        level = a.get("level", "caution")
        circles.append(
            {
                "center": [a["location"]["latitude"], a["location"]["longitude"]],
                "radius": a.get("radius", 0),
                "color": LEVEL_COLOR.get(level, "#3498db"),
                "level": level,
            }
        )
    return lines, circles


def main() -> None:
    trips_dir = Path("trips")
    run_path = trips_dir / "last_run_routes.json"
    out_path = trips_dir / "last_run_map.html"

    run = json.loads(run_path.read_text(encoding="utf-8"))
    lines, circles = build_layers(run)
    if not lines:
        raise SystemExit("No routes found in trips/last_run_routes.json")

    html = f"""<!doctype html>
<html>
<head>
  <meta charset="utf-8" />
  <title>Rain Alert - Last Run Map</title>
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <link rel="stylesheet" href="https://unpkg.com/leaflet@1.9.4/dist/leaflet.css" />
  <style>
    body {{ margin: 0; font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif; }}
    #map {{ height: 100vh; width: 100vw; }}
  </style>
</head>
<body>
<div id="map"></div>
<script src="https://unpkg.com/leaflet@1.9.4/dist/leaflet.js"></script>
<script>
  const lines = {json.dumps(lines)};
  const circles = {json.dumps(circles)};

  const map = L.map('map');

  L.tileLayer('https://{{s}}.tile.openstreetmap.org/{{z}}/{{x}}/{{y}}.png', {{
    maxZoom: 18,
    attribution: '&copy; OpenStreetMap contributors'
  }}).addTo(map);

  // flood zones
  circles.forEach((c) => {{
    L.circle(c.center, {{ radius: c.radius, color: c.color, fillOpacity: 0.25 }})
      .addTo(map).bindPopup(`<b>${{c.level}}</b> flood zone (${{c.radius}} m)`);
  }});

  // routes
  lines.forEach((l) => {{
    const popup = `<b>${{l.name}}</b><br/>Risk: ${{l.risk}}<br/>` +
      `${{l.distance_km.toFixed(1)}} km, ${{l.duration_min}} min`;
    L.polyline(l.points, {{ color: l.color, weight: 6, opacity: 0.9 }}).addTo(map).bindPopup(popup);
  }});

  // fit bounds
  const bounds = L.latLngBounds(lines.flatMap(l => l.points));
  map.fitBounds(bounds.pad(0.2));
</script>
</body>
</html>
"""
    out_path.write_text(html, encoding="utf-8")
    print(f"Wrote: {out_path.resolve()}")


if __name__ == "__main__":
    main()
