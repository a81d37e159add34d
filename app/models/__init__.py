"""
Document models package
"""

from .user import User, ROLE_USER, ROLE_ADMIN
from .event import Event
from .comment import Comment
from .attendance import AttendanceRecord
from .caller import CallerContext

__all__ = [
    "User",
    "ROLE_USER",
    "ROLE_ADMIN",
    "Event",
    "Comment",
    "AttendanceRecord",
    "CallerContext",
]
