"""
User model
"""

from dataclasses import dataclass
from typing import Any, Dict

ROLE_USER = "user"
ROLE_ADMIN = "admin"

COLLECTION = "users"


@dataclass
class User:
    id: str
    username: str
    email: str
    password_hash: str
    role: str = ROLE_USER
    created_at: str = ""

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN

    @classmethod
    def from_doc(cls, doc: Dict[str, Any]) -> "User":
        return cls(
            id=doc["id"],
            username=doc.get("username", ""),
            email=doc.get("email", ""),
            password_hash=doc.get("passwordHash", ""),
            # Accounts written before roles existed carry no role field
            role=doc.get("role") or ROLE_USER,
            created_at=doc.get("createdAt", ""),
        )

    def to_doc(self) -> Dict[str, Any]:
        return {
            "username": self.username,
            "email": self.email,
            "passwordHash": self.password_hash,
            "role": self.role,
            "createdAt": self.created_at,
        }

    def public_profile(self) -> Dict[str, Any]:
        """Profile safe to return to any caller; never includes the hash."""
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "role": self.role,
            "createdAt": self.created_at,
        }
