"""Centralized settings for the rain-alert backend."""
from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "RAIN_ALERT_"}

    # Flood-report backend (the /reports endpoint)
    backend_url: str = "http://localhost:5000"
    http_timeout_s: int = 10
    http_tries: int = 3

    # Redis: empty string means disabled (graceful fallback)
    redis_url: str = ""

    # TTL values in seconds for each cached data type
    ttl_flood_reports: int = 60        # 1 min, user reports change often

    # Background worker
    worker_interval_s: int = 60

    # Local notification inbox
    notifications_path: str = "data/push_notifications.json"

    # Route simulation
    route_steps: int = 5
    perturbation_deg: float = 0.005


settings = Settings()
