"""
Attendance record model.

Stored under ``events/{event_id}/attendees/{uid}``: the attending user's id is
the document key, so there is at most one record per (event, user).
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass
class AttendanceRecord:
    uid: str
    username: str
    updated_at: str
    confirmed: bool = True

    @classmethod
    def from_doc(cls, doc: Dict[str, Any]) -> "AttendanceRecord":
        return cls(
            uid=doc.get("uid") or doc["id"],
            username=doc.get("username", ""),
            updated_at=doc.get("updatedAt", ""),
            confirmed=bool(doc.get("confirmed")),
        )

    def to_doc(self) -> Dict[str, Any]:
        return {
            "uid": self.uid,
            "username": self.username,
            "confirmed": self.confirmed,
            "updatedAt": self.updated_at,
        }
