"""
Dependency wiring shared by the routers
"""

from typing import Optional

from fastapi import Depends

from app.models import CallerContext
from app.services.access_control import AccessControl
from app.services.attendance_service import AttendanceLedger
from app.services.comment_service import CommentService
from app.services.document_store import DocumentStore, get_document_store
from app.services.event_service import EventService
from app.services.identity_service import IdentityService
from app.utils.security import get_bearer_token


def get_store() -> DocumentStore:
    """Overridden in tests with a fresh in-memory store"""
    return get_document_store()

def get_access_control(store: DocumentStore = Depends(get_store)) -> AccessControl:
    return AccessControl(store)

def get_identity_service(
    store: DocumentStore = Depends(get_store),
    access: AccessControl = Depends(get_access_control),
) -> IdentityService:
    return IdentityService(store, access)

def get_event_service(
    store: DocumentStore = Depends(get_store),
    access: AccessControl = Depends(get_access_control),
) -> EventService:
    return EventService(store, access)

def get_comment_service(
    store: DocumentStore = Depends(get_store),
    access: AccessControl = Depends(get_access_control),
) -> CommentService:
    return CommentService(store, access)

def get_attendance_ledger(
    store: DocumentStore = Depends(get_store),
    access: AccessControl = Depends(get_access_control),
) -> AttendanceLedger:
    return AttendanceLedger(store, access)

def get_caller(
    token: Optional[str] = Depends(get_bearer_token),
    access: AccessControl = Depends(get_access_control),
) -> CallerContext:
    """Resolve the bearer token into the calling user; 401 if absent or invalid"""
    return access.current_identity(token)

def require_admin_caller(
    caller: CallerContext = Depends(get_caller),
    access: AccessControl = Depends(get_access_control),
) -> CallerContext:
    access.require_admin(caller.user_id)
    return caller
