"""
Comment and rating schemas
"""

from typing import Optional
from pydantic import BaseModel, Field

class CommentCreate(BaseModel):
    comment: Optional[str] = None
    # 0 is accepted but ignored by the average
    rating: Optional[float] = Field(None, ge=0)

class CommentUpdate(BaseModel):
    comment: Optional[str] = None
    rating: Optional[float] = Field(None, ge=0)

class CommentResponse(BaseModel):
    id: str
    uid: str
    username: str
    comment: str
    rating: Optional[float] = None
    createdAt: str
    editedAt: Optional[str] = None

class RatingSummary(BaseModel):
    average: float
    count: int
