"""
Admin API routes - requires an admin bearer token
"""

from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_identity_service, require_admin_caller
from app.models import CallerContext
from app.schemas.auth import UserProfile
from app.services.identity_service import IdentityService
from app.utils.responses import message_response

router = APIRouter()

@router.get("/users", response_model=List[UserProfile])
def list_users(
    admin: CallerContext = Depends(require_admin_caller),
    identity: IdentityService = Depends(get_identity_service)
):
    """List every registered user"""
    return identity.list_users()

@router.post("/users/{uid}/make-admin")
def make_admin(
    uid: str,
    admin: CallerContext = Depends(require_admin_caller),
    identity: IdentityService = Depends(get_identity_service)
):
    """Grant the admin role to a user"""
    identity.promote_to_admin(uid)
    return message_response("User promoted to admin")
