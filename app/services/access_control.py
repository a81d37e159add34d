"""
Access control: caller identity and the owner-or-admin policy.

Decisions are re-derived on every call from the store; nothing is cached
between requests. The target resource and the caller's role are read
independently, without a transaction around them.
"""

import logging
from operator import attrgetter
from typing import Any, Callable, Optional

import jwt

from app.models import CallerContext, User
from app.models.user import COLLECTION as USERS
from app.services.document_store import DocumentStore
from app.services.exceptions import AuthError, ForbiddenError
from app.utils.security import decode_access_token

logger = logging.getLogger(__name__)

OwnerExtractor = Callable[[Any], Optional[str]]

# Owner of each resource kind under the shared policy
EVENT_OWNER: OwnerExtractor = attrgetter("creator_uid")
COMMENT_OWNER: OwnerExtractor = attrgetter("uid")
PROFILE_OWNER: OwnerExtractor = attrgetter("id")


class AccessControl:
    """Owner-or-admin policy shared by events, comments and profiles"""

    def __init__(self, store: DocumentStore):
        self.store = store

    def current_identity(self, token: Optional[str]) -> CallerContext:
        """Resolve the caller from a bearer token"""
        if not token:
            raise AuthError("Missing bearer token")
        try:
            claims = decode_access_token(token)
        except jwt.PyJWTError as exc:
            raise AuthError("Invalid token") from exc

        uid = claims.get("uid")
        if not uid:
            raise AuthError("Invalid token")
        return CallerContext(user_id=uid, email=claims.get("email", ""))

    def load_user(self, user_id: str) -> Optional[User]:
        doc = self.store.get(USERS, user_id)
        return User.from_doc(doc) if doc else None

    def require_admin(self, user_id: str) -> User:
        user = self.load_user(user_id)
        if user is None or not user.is_admin:
            logger.warning(f"Admin check failed for user {user_id}")
            raise ForbiddenError("Admin privileges required")
        return user

    def require_owner_or_admin(self, user_id: str, owner_id: Optional[str]) -> None:
        if owner_id and user_id == owner_id:
            return
        try:
            self.require_admin(user_id)
        except ForbiddenError:
            raise ForbiddenError("Not allowed to modify this resource") from None

    def authorize(self, caller: CallerContext, resource: Any, owner_of: OwnerExtractor) -> None:
        """Apply owner-or-admin to a resource already loaded from the store"""
        self.require_owner_or_admin(caller.user_id, owner_of(resource))
