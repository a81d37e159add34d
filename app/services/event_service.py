"""
Event aggregate: events and the lifecycle of their sub-collections
"""

import logging
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

from app.core.config import settings
from app.models import CallerContext, Event, User
from app.models.event import COLLECTION as EVENTS, MUTABLE_FIELDS, attendees_path, comments_path
from app.services.access_control import AccessControl, EVENT_OWNER
from app.services.document_store import DocumentStore
from app.services.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


class EventFilter(str, Enum):
    ALL = "all"
    UPCOMING = "upcoming"
    PAST = "past"
    SEARCH = "search"
    BY_CREATOR = "creator"


def _validate_date(value: str) -> str:
    try:
        datetime.fromisoformat(value.replace("Z", "+00:00"))
    except (AttributeError, ValueError):
        raise ValidationError(f"Invalid date: {value!r}")
    return value


class EventService:
    """Service for event operations"""

    def __init__(self, store: DocumentStore, access: Optional[AccessControl] = None):
        self.store = store
        self.access = access or AccessControl(store)

    def get_event(self, event_id: str) -> Event:
        doc = self.store.get(EVENTS, event_id)
        if not doc:
            raise NotFoundError("Event not found")
        return Event.from_doc(doc)

    # -------- Listing --------

    def list_events(
        self,
        kind: EventFilter = EventFilter.ALL,
        text: Optional[str] = None,
        creator_uid: Optional[str] = None,
        today: Optional[date] = None,
    ) -> List[Event]:
        kind = EventFilter(kind)
        today_iso = (today or datetime.now(timezone.utc).date()).isoformat()

        if kind == EventFilter.UPCOMING:
            docs = self.store.query(EVENTS, [("date", ">=", today_iso)], order_by="date")
        elif kind == EventFilter.PAST:
            docs = self.store.query(EVENTS, [("date", "<", today_iso)], order_by="date", descending=True)
        elif kind == EventFilter.SEARCH:
            return self.search(text)
        elif kind == EventFilter.BY_CREATOR:
            if not creator_uid:
                raise ValidationError("Creator id is required")
            docs = self.store.query(
                EVENTS, [("creatorUid", "==", creator_uid)], order_by="createdAt", descending=True
            )
        else:
            docs = self.store.query(EVENTS, order_by="createdAt", descending=True)

        return [Event.from_doc(d) for d in docs]

    def search(self, text: Optional[str]) -> List[Event]:
        """Case-insensitive substring match over title and description.

        Loads the whole collection and filters in process; there is no index.
        """
        if not text or not text.strip():
            raise ValidationError("Search text is required")

        needle = text.strip().lower()
        events = [Event.from_doc(d) for d in self.store.query(EVENTS)]
        matches = [
            e for e in events
            if needle in (e.title or "").lower() or needle in (e.description or "").lower()
        ]
        matches.sort(key=lambda e: e.created_at, reverse=True)
        return matches

    # -------- Mutations --------

    def create_event(
        self,
        creator_uid: str,
        title: str,
        date: str,
        location: str,
        description: str,
    ) -> Event:
        if not all([creator_uid, title, date, location, description]):
            raise ValidationError("Missing fields")
        _validate_date(date)

        creator: Optional[User] = self.access.load_user(creator_uid)
        if creator is None:
            raise NotFoundError("Creator not found")

        event = Event(
            id="",
            title=title,
            date=date,
            location=location,
            description=description,
            creator_uid=creator_uid,
            creator_name=creator.username,
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        event.id = self.store.add(EVENTS, event.to_doc())
        logger.info(f"Event {event.id} created by {creator_uid}")
        return event

    def update_event(self, caller: CallerContext, event_id: str, fields: Dict[str, Any]) -> Event:
        """Partial update; creator and timestamps are never overwritten"""
        event = self.get_event(event_id)
        self.access.authorize(caller, event, EVENT_OWNER)

        changes = {k: v for k, v in fields.items() if k in MUTABLE_FIELDS and v is not None}
        if "date" in changes:
            _validate_date(changes["date"])

        if changes:
            self.store.update(EVENTS, event_id, changes)
            logger.info(f"Event {event_id} updated by {caller.user_id}: {sorted(changes)}")
        return self.get_event(event_id)

    def delete_event(self, caller: CallerContext, event_id: str) -> None:
        """Delete the event with every comment and attendance record in one batch"""
        event = self.get_event(event_id)
        self.access.authorize(caller, event, EVENT_OWNER)

        batch = self.store.batch()
        comments = self.store.query(comments_path(event_id))
        attendees = self.store.query(attendees_path(event_id))
        for doc in comments:
            batch.delete(comments_path(event_id), doc["id"])
        for doc in attendees:
            batch.delete(attendees_path(event_id), doc["id"])
        batch.delete(EVENTS, event_id)
        batch.commit()

        logger.info(
            f"Event {event_id} deleted by {caller.user_id} "
            f"({len(comments)} comments, {len(attendees)} attendees)"
        )

    # -------- Sharing --------

    def share_url(self, event_id: str) -> str:
        return f"{settings.BASE_URL.rstrip('/')}/events/{event_id}"
