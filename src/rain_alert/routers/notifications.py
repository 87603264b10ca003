"""Notification inbox: list, ingest pushes, mark read, clear."""
from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from rain_alert.config import settings
from rain_alert.notifications.store import NotificationStore, StoredNotification

router = APIRouter(prefix="/notifications", tags=["notifications"])


def get_store() -> NotificationStore:
    return NotificationStore(settings.notifications_path)


class PushIn(BaseModel):
    identifier: str = Field(..., min_length=1)
    body: Optional[str] = None
    data: Dict[str, Any] = Field(default_factory=dict)


class InboxOut(BaseModel):
    unread: int
    notifications: List[StoredNotification]


def _inbox(items: List[StoredNotification]) -> InboxOut:
    return InboxOut(unread=sum(1 for n in items if not n.read), notifications=items)


@router.get("", response_model=InboxOut)
def list_notifications(store: NotificationStore = Depends(get_store)):
    return _inbox(store.load())


@router.post("", response_model=InboxOut, status_code=201)
def ingest_notification(body: PushIn, store: NotificationStore = Depends(get_store)):
    items = store.ingest(StoredNotification.from_push(body.identifier, body.body, body.data))
    return _inbox(items)


@router.post("/{notification_id}/read", response_model=InboxOut)
def mark_read(notification_id: str, store: NotificationStore = Depends(get_store)):
    if not any(n.id == notification_id for n in store.load()):
        raise HTTPException(status_code=404, detail="Notification not found")
    return _inbox(store.mark_read(notification_id))


@router.delete("", status_code=204)
def clear_notifications(store: NotificationStore = Depends(get_store)):
    store.clear()
    return None
