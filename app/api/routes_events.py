"""
Event routes
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from app.api.deps import get_attendance_ledger, get_caller, get_event_service
from app.models import CallerContext
from app.schemas.common import CountResponse, UrlResponse
from app.schemas.event import EventCreate, EventResponse, EventUpdate
from app.services.attendance_service import AttendanceLedger
from app.services.event_service import EventFilter, EventService
from app.services.qr_service import QRService
from app.utils.responses import message_response

router = APIRouter()

def _dump(events) -> List[dict]:
    return [e.to_dict() for e in events]

@router.get("", response_model=List[EventResponse])
def list_events(events: EventService = Depends(get_event_service)):
    """All events, newest first"""
    return _dump(events.list_events(EventFilter.ALL))

@router.get("/upcoming", response_model=List[EventResponse])
def list_upcoming(events: EventService = Depends(get_event_service)):
    """Events dated today or later, soonest first"""
    return _dump(events.list_events(EventFilter.UPCOMING))

@router.get("/past", response_model=List[EventResponse])
def list_past(events: EventService = Depends(get_event_service)):
    """Events dated before today, most recent first"""
    return _dump(events.list_events(EventFilter.PAST))

@router.get("/search", response_model=List[EventResponse])
def search_events(
    q: Optional[str] = Query(None),
    events: EventService = Depends(get_event_service)
):
    """Case-insensitive search over title and description"""
    return _dump(events.list_events(EventFilter.SEARCH, text=q))

@router.get("/creator/{uid}", response_model=List[EventResponse])
def list_by_creator(uid: str, events: EventService = Depends(get_event_service)):
    """Events created by a user, newest first"""
    return _dump(events.list_events(EventFilter.BY_CREATOR, creator_uid=uid))

@router.get("/{event_id}", response_model=EventResponse)
def get_event(event_id: str, events: EventService = Depends(get_event_service)):
    return events.get_event(event_id).to_dict()

@router.post("", response_model=EventResponse)
def create_event(
    data: EventCreate,
    caller: CallerContext = Depends(get_caller),
    events: EventService = Depends(get_event_service)
):
    """Create an event owned by the caller.

    Creating on behalf of another user requires admin rights.
    """
    creator_uid = data.creatorUid or caller.user_id
    if creator_uid != caller.user_id:
        events.access.require_owner_or_admin(caller.user_id, creator_uid)

    event = events.create_event(
        creator_uid=creator_uid,
        title=data.title,
        date=data.date,
        location=data.location,
        description=data.description,
    )
    return event.to_dict()

@router.put("/{event_id}", response_model=EventResponse)
def update_event(
    event_id: str,
    data: EventUpdate,
    caller: CallerContext = Depends(get_caller),
    events: EventService = Depends(get_event_service)
):
    event = events.update_event(caller, event_id, data.model_dump(exclude_none=True))
    return event.to_dict()

@router.delete("/{event_id}")
def delete_event(
    event_id: str,
    caller: CallerContext = Depends(get_caller),
    events: EventService = Depends(get_event_service)
):
    """Delete an event together with its comments and attendees"""
    events.delete_event(caller, event_id)
    return message_response("Event deleted")

@router.get("/{event_id}/share", response_model=UrlResponse)
def share_event(event_id: str, events: EventService = Depends(get_event_service)):
    return UrlResponse(url=events.share_url(event_id))

@router.get("/{event_id}/qr.png")
def event_qr(event_id: str, events: EventService = Depends(get_event_service)):
    """QR code image of the event's share link"""
    events.get_event(event_id)
    qr_bytes = QRService.generate_qr(events.share_url(event_id))
    return Response(
        content=qr_bytes,
        media_type="image/png",
        headers={"Content-Disposition": f"inline; filename=qr_{event_id}.png"}
    )

@router.get("/{event_id}/attendees/count", response_model=CountResponse)
def attendee_count(
    event_id: str,
    ledger: AttendanceLedger = Depends(get_attendance_ledger)
):
    return CountResponse(count=ledger.count(event_id))
