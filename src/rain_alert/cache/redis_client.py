"""Redis connection + JSON cache helpers.

Every operation degrades to a cache miss when Redis is down or unconfigured,
so flood data is always fetched from the backend as a fallback.
"""
from __future__ import annotations

import json
import logging
from typing import Any, Optional

log = logging.getLogger(__name__)

_redis_client = None
_redis_checked = False


def get_redis():
    """Lazy singleton.  Returns ``redis.Redis`` or ``None`` if unavailable."""
    global _redis_client, _redis_checked
    if _redis_checked:
        return _redis_client
    _redis_checked = True
    try:
        from rain_alert.config import settings

        if not settings.redis_url:
            return None
        import redis

        _redis_client = redis.Redis.from_url(
            settings.redis_url, decode_responses=True, socket_connect_timeout=3
        )
        _redis_client.ping()
        log.info("Redis connected: %s", settings.redis_url)
    except Exception as exc:
        log.warning("Redis unavailable (%s), running without cache", exc)
        _redis_client = None
    return _redis_client


def reset_redis() -> None:
    """Forget the cached connection (settings changed, or between tests)."""
    global _redis_client, _redis_checked
    _redis_client = None
    _redis_checked = False


def cache_get_json(key: str) -> Optional[Any]:
    r = get_redis()
    if r is None:
        return None
    try:
        raw = r.get(key)
    except Exception as exc:
        log.warning("Redis GET %s failed: %s", key, exc)
        return None
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        log.warning("Discarding corrupt cache entry %s", key)
        return None


def cache_set_json(key: str, value: Any, ttl: int) -> None:
    r = get_redis()
    if r is None:
        return
    try:
        r.set(key, json.dumps(value), ex=ttl)
    except Exception as exc:
        log.warning("Redis SET %s failed: %s", key, exc)


def cache_delete(key: str) -> None:
    r = get_redis()
    if r is None:
        return
    try:
        r.delete(key)
    except Exception as exc:
        log.warning("Redis DEL %s failed: %s", key, exc)
