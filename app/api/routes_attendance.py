"""
Attendance routes
"""

from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_attendance_ledger, get_caller
from app.models import CallerContext
from app.schemas.attendance import AttendeeResponse
from app.services.attendance_service import AttendanceLedger
from app.utils.responses import message_response

router = APIRouter()

@router.post("/{event_id}/confirm")
def confirm_attendance(
    event_id: str,
    caller: CallerContext = Depends(get_caller),
    ledger: AttendanceLedger = Depends(get_attendance_ledger)
):
    ledger.confirm(caller, event_id)
    return message_response("Attendance confirmed")

@router.post("/{event_id}/cancel")
def cancel_attendance(
    event_id: str,
    caller: CallerContext = Depends(get_caller),
    ledger: AttendanceLedger = Depends(get_attendance_ledger)
):
    ledger.cancel(caller, event_id)
    return message_response("Attendance cancelled")

@router.get("/{event_id}/attendees", response_model=List[AttendeeResponse])
def list_attendees(event_id: str, ledger: AttendanceLedger = Depends(get_attendance_ledger)):
    return [r.to_doc() for r in ledger.list_attendees(event_id)]

@router.get("/{event_id}/status/{uid}")
def attendance_status(
    event_id: str,
    uid: str,
    ledger: AttendanceLedger = Depends(get_attendance_ledger)
):
    """``{"confirmed": false}`` when the user has no record"""
    return ledger.status(event_id, uid)
