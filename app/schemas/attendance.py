"""
Attendance schemas
"""

from pydantic import BaseModel

class AttendeeResponse(BaseModel):
    uid: str
    username: str
    confirmed: bool
    updatedAt: str
