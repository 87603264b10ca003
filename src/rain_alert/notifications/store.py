"""Local inbox of received push alerts.

Pushes can be delivered more than once (foreground listener, tap response,
cold-start launch), so the inbox de-duplicates on the notification id and keeps
the newest first.
"""
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

log = logging.getLogger(__name__)


class NotificationLevel(str, Enum):
    CRITICAL = "critical"
    DANGER = "danger"
    WARNING = "warning"
    INFO = "info"

    @classmethod
    def parse(cls, text: Optional[str]) -> "NotificationLevel":
        """Map a free-form level label ("Critical", "DANGER!", "caution") onto the enum."""
        if not text:
            return cls.WARNING
        t = str(text).strip().lower()
        if "critical" in t:
            return cls.CRITICAL
        if "danger" in t:
            return cls.DANGER
        if "warning" in t or "caution" in t:
            return cls.WARNING
        return cls.INFO


class StoredNotification(BaseModel):
    id: str
    message: str
    timestamp: str
    read: bool = False
    level: NotificationLevel = NotificationLevel.WARNING

    @classmethod
    def from_push(
        cls,
        identifier: str,
        body: Optional[str] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> "StoredNotification":
        data = data or {}
        return cls(
            id=identifier,
            message=data.get("_body") or body or "No message",
            timestamp=data.get("timestamp") or datetime.now(timezone.utc).isoformat(),
            read=False,
            level=NotificationLevel.parse(data.get("level")),
        )


class _Inbox(BaseModel):
    items: List[StoredNotification] = Field(default_factory=list)


class NotificationStore:
    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> List[StoredNotification]:
        if not self.path.exists():
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return _Inbox(items=raw).items
        except (ValueError, ValidationError) as exc:
            log.error("Failed to load notifications from %s: %s", self.path, exc)
            return []

    def _save(self, items: List[StoredNotification]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps([n.model_dump(mode="json") for n in items], indent=2),
            encoding="utf-8",
        )

    def ingest(self, notification: StoredNotification) -> List[StoredNotification]:
        items = self.load()
        if any(n.id == notification.id for n in items):
            log.info("Duplicate notification detected, skipping: %s", notification.id)
            return items
        items.insert(0, notification)
        self._save(items)
        return items

    def mark_read(self, notification_id: str) -> List[StoredNotification]:
        items = self.load()
        changed = False
        for i, n in enumerate(items):
            if n.id == notification_id and not n.read:
                items[i] = n.model_copy(update={"read": True})
                changed = True
        if changed:
            self._save(items)
        return items

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)

    def unread_count(self) -> int:
        return sum(1 for n in self.load() if not n.read)
