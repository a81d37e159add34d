"""
Registration and login routes - no authentication required
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_identity_service
from app.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from app.services.exceptions import NotFoundError
from app.services.identity_service import IdentityService
from app.utils.responses import error_response

router = APIRouter()

@router.post("/register", response_model=AuthResponse)
def register(
    data: RegisterRequest,
    identity: IdentityService = Depends(get_identity_service)
):
    """Create an account and return its id with a bearer token"""
    uid, token = identity.register(data.username, data.email, data.password)
    return AuthResponse(uid=uid, token=token)

@router.post("/login", response_model=AuthResponse)
def login(
    data: LoginRequest,
    identity: IdentityService = Depends(get_identity_service)
):
    """Exchange email and password for a bearer token"""
    try:
        uid, token = identity.authenticate(data.email, data.password)
    except NotFoundError as exc:
        # Unknown email is reported as a bad request, not 404
        return error_response(exc.message, status_code=400)
    return AuthResponse(uid=uid, token=token)
