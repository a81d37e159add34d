"""
User profile routes
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_caller, get_identity_service
from app.models import CallerContext
from app.schemas.auth import PasswordChange, ProfileUpdate, UserProfile
from app.services.identity_service import IdentityService
from app.utils.responses import message_response

router = APIRouter()

@router.get("/{uid}", response_model=UserProfile)
def get_profile(
    uid: str,
    identity: IdentityService = Depends(get_identity_service)
):
    """Public profile of a user"""
    return identity.get_public_profile(uid)

@router.put("/{uid}", response_model=UserProfile)
def update_profile(
    uid: str,
    data: ProfileUpdate,
    caller: CallerContext = Depends(get_caller),
    identity: IdentityService = Depends(get_identity_service)
):
    """Change username and/or email (owner or admin)"""
    return identity.update_profile(caller, uid, username=data.username, email=data.email)

@router.put("/{uid}/password")
def change_password(
    uid: str,
    data: PasswordChange,
    caller: CallerContext = Depends(get_caller),
    identity: IdentityService = Depends(get_identity_service)
):
    """Change the caller's own password"""
    identity.change_password(caller, uid, data.oldPassword, data.newPassword)
    return message_response("Password updated")
