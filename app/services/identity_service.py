"""
Identity store: registration, login and profile management
"""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from app.models import CallerContext, User, ROLE_ADMIN, ROLE_USER
from app.models.user import COLLECTION as USERS
from app.services.access_control import AccessControl, PROFILE_OWNER
from app.services.document_store import DocumentStore
from app.services.exceptions import (
    AuthError,
    ConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from app.utils.security import create_access_token, hash_password, verify_password

logger = logging.getLogger(__name__)


class IdentityService:
    """Service for user accounts"""

    def __init__(self, store: DocumentStore, access: Optional[AccessControl] = None):
        self.store = store
        self.access = access or AccessControl(store)

    def _find_by_email(self, email: str) -> Optional[User]:
        # Exact match: emails are not case-folded
        docs = self.store.query(USERS, [("email", "==", email)])
        return User.from_doc(docs[0]) if docs else None

    def _load(self, user_id: str) -> User:
        user = self.access.load_user(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    def register(self, username: str, email: str, password: str) -> Tuple[str, str]:
        if not username or not email or not password:
            raise ValidationError("Missing fields")

        if self._find_by_email(email):
            raise ConflictError("Email already registered")

        data = {
            "username": username,
            "email": email,
            "passwordHash": hash_password(password),
            "role": ROLE_USER,
            "createdAt": datetime.now(timezone.utc).isoformat(),
        }
        uid = self.store.add(USERS, data)
        logger.info(f"Registered user {uid}")
        return uid, create_access_token(uid, email)

    def authenticate(self, email: str, password: str) -> Tuple[str, str]:
        if not email or not password:
            raise ValidationError("Missing fields")

        user = self._find_by_email(email)
        if user is None:
            raise NotFoundError("User not found")
        if not verify_password(password, user.password_hash):
            raise AuthError("Invalid credentials")

        return user.id, create_access_token(user.id, email)

    def get_public_profile(self, user_id: str) -> Dict:
        return self._load(user_id).public_profile()

    def list_users(self) -> List[Dict]:
        docs = self.store.query(USERS, order_by="createdAt", descending=True)
        return [User.from_doc(d).public_profile() for d in docs]

    def update_profile(
        self,
        caller: CallerContext,
        target_id: str,
        username: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Dict:
        """Overwrite username and/or email; owner or admin only"""
        user = self._load(target_id)
        self.access.authorize(caller, user, PROFILE_OWNER)

        changes = {}
        if username:
            changes["username"] = username
        if email and email != user.email:
            holder = self._find_by_email(email)
            if holder and holder.id != user.id:
                raise ConflictError("Email already registered")
            changes["email"] = email

        if changes:
            self.store.update(USERS, target_id, changes)
            logger.info(f"User {caller.user_id} updated profile {target_id}: {sorted(changes)}")
        return self._load(target_id).public_profile()

    def change_password(
        self,
        caller: CallerContext,
        target_id: str,
        old_password: str,
        new_password: str,
    ) -> None:
        # No admin override here
        if caller.user_id != target_id:
            raise ForbiddenError("Only the account owner can change the password")
        if not old_password or not new_password:
            raise ValidationError("Missing fields")

        user = self._load(target_id)
        if not verify_password(old_password, user.password_hash):
            raise AuthError("Current password is incorrect")

        self.store.update(USERS, target_id, {"passwordHash": hash_password(new_password)})
        logger.info(f"Password changed for user {target_id}")

    def promote_to_admin(self, target_id: str) -> Dict:
        """Grant the admin role; the caller's admin check happens upstream"""
        self._load(target_id)
        self.store.update(USERS, target_id, {"role": ROLE_ADMIN})
        logger.info(f"User {target_id} promoted to admin")
        return self._load(target_id).public_profile()
