"""
Comment model (sub-collection of an event)
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

Rating = Union[int, float]


@dataclass
class Comment:
    id: str
    uid: str
    username: str
    comment: str
    rating: Optional[Rating] = None
    created_at: str = ""
    edited_at: Optional[str] = None

    @classmethod
    def from_doc(cls, doc: Dict[str, Any]) -> "Comment":
        return cls(
            id=doc["id"],
            uid=doc.get("uid", ""),
            username=doc.get("username", ""),
            comment=doc.get("comment", ""),
            rating=doc.get("rating"),
            created_at=doc.get("createdAt", ""),
            edited_at=doc.get("editedAt"),
        )

    def to_doc(self) -> Dict[str, Any]:
        doc = {
            "uid": self.uid,
            "username": self.username,
            "comment": self.comment,
            "rating": self.rating,
            "createdAt": self.created_at,
        }
        if self.edited_at:
            doc["editedAt"] = self.edited_at
        return doc

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, **self.to_doc()}
