"""
Event model
"""

from dataclasses import dataclass
from typing import Any, Dict

COLLECTION = "events"

# Fields a caller may overwrite after creation
MUTABLE_FIELDS = ("title", "date", "location", "description")


def comments_path(event_id: str) -> str:
    return f"{COLLECTION}/{event_id}/comments"


def attendees_path(event_id: str) -> str:
    return f"{COLLECTION}/{event_id}/attendees"


@dataclass
class Event:
    id: str
    title: str
    date: str
    location: str
    description: str
    creator_uid: str
    creator_name: str
    created_at: str = ""

    @classmethod
    def from_doc(cls, doc: Dict[str, Any]) -> "Event":
        return cls(
            id=doc["id"],
            title=doc.get("title", ""),
            date=doc.get("date", ""),
            location=doc.get("location", ""),
            description=doc.get("description", ""),
            creator_uid=doc.get("creatorUid", ""),
            creator_name=doc.get("creatorName", ""),
            created_at=doc.get("createdAt", ""),
        )

    def to_doc(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "date": self.date,
            "location": self.location,
            "description": self.description,
            "creatorUid": self.creator_uid,
            "creatorName": self.creator_name,
            "createdAt": self.created_at,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, **self.to_doc()}
