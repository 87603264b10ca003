"""Background cache warmer for rain-alert.

Re-fetches the backend's flood reports on an interval so route requests read
a warm cache instead of waiting on the backend.

Run with:  python -m rain_alert.worker
"""
from __future__ import annotations

import logging
import time

import requests

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [worker] %(levelname)s %(message)s",
)
log = logging.getLogger(__name__)


def run_cycle() -> int:
    """Run one refresh cycle. Returns the number of reports cached."""
    from rain_alert.cache.keys import worker_last_refresh
    from rain_alert.cache.redis_client import get_redis
    from rain_alert.providers.reports import ReportsFloodProvider

    rows = ReportsFloodProvider().fetch_reports(use_cache=False)
    log.info("Flood reports cached: %d", len(rows))

    r = get_redis()
    if r is not None:
        r.set(worker_last_refresh(), str(time.time()))
    return len(rows)


def main() -> None:
    from rain_alert.config import settings

    log.info("Worker starting (interval=%ds)", settings.worker_interval_s)

    from rain_alert.cache.redis_client import get_redis

    r = get_redis()
    if r is None:
        log.error("Redis not available, worker cannot run without it. "
                  "Set RAIN_ALERT_REDIS_URL and try again.")
        return

    while True:
        try:
            run_cycle()
        except requests.RequestException as exc:
            log.warning("Backend unreachable, keeping previous cache: %s", exc)
        except Exception as exc:
            log.exception("Worker cycle error: %s", exc)
        log.info("Sleeping %ds until next cycle", settings.worker_interval_s)
        time.sleep(settings.worker_interval_s)


if __name__ == "__main__":
    main()
