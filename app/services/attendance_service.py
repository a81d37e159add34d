"""
Attendance ledger.

Records live at ``events/{event_id}/attendees/{uid}``. Keying by user id makes
confirm an idempotent upsert with at most one record per (event, user), and
cancel removes the record instead of leaving a ``confirmed: false`` row.
"""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from app.models import AttendanceRecord, CallerContext
from app.models.event import attendees_path
from app.services.access_control import AccessControl
from app.services.document_store import DocumentStore
from app.services.event_service import EventService
from app.services.exceptions import NotFoundError

logger = logging.getLogger(__name__)


class AttendanceLedger:
    """Service for attendance confirmations"""

    def __init__(self, store: DocumentStore, access: Optional[AccessControl] = None):
        self.store = store
        self.access = access or AccessControl(store)
        self.events = EventService(store, self.access)

    def confirm(self, caller: CallerContext, event_id: str) -> AttendanceRecord:
        self.events.get_event(event_id)
        user = self.access.load_user(caller.user_id)
        if user is None:
            raise NotFoundError("User not found")

        record = AttendanceRecord(
            uid=caller.user_id,
            username=user.username,
            updated_at=datetime.now(timezone.utc).isoformat(),
        )
        # Full overwrite: re-confirming refreshes updatedAt
        self.store.set(attendees_path(event_id), caller.user_id, record.to_doc())
        logger.info(f"User {caller.user_id} confirmed attendance to event {event_id}")
        return record

    def cancel(self, caller: CallerContext, event_id: str) -> None:
        self.store.delete(attendees_path(event_id), caller.user_id)
        logger.info(f"User {caller.user_id} cancelled attendance to event {event_id}")

    def status(self, event_id: str, user_id: str) -> Dict:
        doc = self.store.get(attendees_path(event_id), user_id)
        if not doc:
            return {"confirmed": False}
        doc.pop("id", None)
        return {**doc, "confirmed": bool(doc.get("confirmed"))}

    def list_attendees(self, event_id: str) -> List[AttendanceRecord]:
        docs = self.store.query(attendees_path(event_id))
        return [AttendanceRecord.from_doc(d) for d in docs]

    def count(self, event_id: str) -> int:
        return self.store.count(attendees_path(event_id))
