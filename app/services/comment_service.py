"""
Comments on events and the rating aggregate derived from them
"""

import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional

from app.models import CallerContext, Comment
from app.models.comment import Rating
from app.models.event import comments_path
from app.services.access_control import AccessControl, COMMENT_OWNER
from app.services.document_store import DocumentStore
from app.services.event_service import EventService
from app.services.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def _check_rating(rating: Optional[Rating]) -> None:
    if rating is not None and rating < 0:
        raise ValidationError("Rating cannot be negative")


class CommentService:
    """Service for event comments"""

    def __init__(self, store: DocumentStore, access: Optional[AccessControl] = None):
        self.store = store
        self.access = access or AccessControl(store)
        self.events = EventService(store, self.access)

    def add_comment(
        self,
        caller: CallerContext,
        event_id: str,
        text: str,
        rating: Optional[Rating] = None,
    ) -> Comment:
        if not text:
            raise ValidationError("Comment text is required")
        _check_rating(rating)
        self.events.get_event(event_id)

        author = self.access.load_user(caller.user_id)
        if author is None:
            raise NotFoundError("User not found")

        comment = Comment(
            id="",
            uid=caller.user_id,
            username=author.username,
            comment=text,
            rating=rating,
            created_at=datetime.now(timezone.utc).isoformat(),
        )
        comment.id = self.store.add(comments_path(event_id), comment.to_doc())
        logger.info(f"Comment {comment.id} added to event {event_id} by {caller.user_id}")
        return comment

    def list_comments(self, event_id: str) -> List[Comment]:
        docs = self.store.query(comments_path(event_id), order_by="createdAt")
        return [Comment.from_doc(d) for d in docs]

    def get_comment(self, event_id: str, comment_id: str) -> Comment:
        doc = self.store.get(comments_path(event_id), comment_id)
        if not doc:
            raise NotFoundError("Comment not found")
        return Comment.from_doc(doc)

    def update_comment(
        self,
        caller: CallerContext,
        event_id: str,
        comment_id: str,
        text: Optional[str] = None,
        rating: Optional[Rating] = None,
    ) -> Comment:
        # Only the author or an admin; the event's creator gets no extra rights
        comment = self.get_comment(event_id, comment_id)
        self.access.authorize(caller, comment, COMMENT_OWNER)

        changes: Dict = {}
        if text is not None:
            if not text:
                raise ValidationError("Comment text is required")
            changes["comment"] = text
        if rating is not None:
            _check_rating(rating)
            changes["rating"] = rating
        if not changes:
            return comment

        changes["editedAt"] = datetime.now(timezone.utc).isoformat()
        self.store.update(comments_path(event_id), comment_id, changes)
        return self.get_comment(event_id, comment_id)

    def delete_comment(self, caller: CallerContext, event_id: str, comment_id: str) -> None:
        comment = self.get_comment(event_id, comment_id)
        self.access.authorize(caller, comment, COMMENT_OWNER)
        self.store.delete(comments_path(event_id), comment_id)
        logger.info(f"Comment {comment_id} on event {event_id} deleted by {caller.user_id}")

    def average_rating(self, event_id: str) -> Dict:
        """Mean over truthy ratings; a rating of 0 counts as no rating."""
        ratings = [
            c.rating for c in self.list_comments(event_id)
            if c.rating
        ]
        if not ratings:
            return {"average": 0, "count": 0}
        return {"average": sum(ratings) / len(ratings), "count": len(ratings)}
