"""
Comment and rating routes, nested under an event
"""

from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import get_caller, get_comment_service
from app.models import CallerContext
from app.schemas.comment import CommentCreate, CommentResponse, CommentUpdate, RatingSummary
from app.services.comment_service import CommentService
from app.utils.responses import message_response

router = APIRouter()

@router.post("/{event_id}/comments", response_model=CommentResponse)
def add_comment(
    event_id: str,
    data: CommentCreate,
    caller: CallerContext = Depends(get_caller),
    comments: CommentService = Depends(get_comment_service)
):
    comment = comments.add_comment(caller, event_id, data.comment, data.rating)
    return comment.to_dict()

@router.get("/{event_id}/comments", response_model=List[CommentResponse])
def list_comments(event_id: str, comments: CommentService = Depends(get_comment_service)):
    return [c.to_dict() for c in comments.list_comments(event_id)]

@router.get("/{event_id}/comments/{comment_id}", response_model=CommentResponse)
def get_comment(
    event_id: str,
    comment_id: str,
    comments: CommentService = Depends(get_comment_service)
):
    return comments.get_comment(event_id, comment_id).to_dict()

@router.put("/{event_id}/comments/{comment_id}", response_model=CommentResponse)
def update_comment(
    event_id: str,
    comment_id: str,
    data: CommentUpdate,
    caller: CallerContext = Depends(get_caller),
    comments: CommentService = Depends(get_comment_service)
):
    """Edit text and/or rating (author or admin)"""
    comment = comments.update_comment(caller, event_id, comment_id, text=data.comment, rating=data.rating)
    return comment.to_dict()

@router.delete("/{event_id}/comments/{comment_id}")
def delete_comment(
    event_id: str,
    comment_id: str,
    caller: CallerContext = Depends(get_caller),
    comments: CommentService = Depends(get_comment_service)
):
    comments.delete_comment(caller, event_id, comment_id)
    return message_response("Comment deleted")

@router.get("/{event_id}/rating", response_model=RatingSummary)
def event_rating(event_id: str, comments: CommentService = Depends(get_comment_service)):
    """Average of the non-empty ratings left on an event"""
    return comments.average_rating(event_id)
