"""
Event-related Pydantic schemas
"""

from typing import Optional
from pydantic import BaseModel

class EventCreate(BaseModel):
    """Schema for creating an event"""
    title: Optional[str] = None
    date: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None
    creatorUid: Optional[str] = None

class EventUpdate(BaseModel):
    """Partial update; omitted fields are left untouched"""
    title: Optional[str] = None
    date: Optional[str] = None
    location: Optional[str] = None
    description: Optional[str] = None

class EventResponse(BaseModel):
    id: str
    title: str
    date: str
    location: str
    description: str
    creatorUid: str
    creatorName: str
    createdAt: str
