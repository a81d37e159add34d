"""
Pydantic schemas package
"""

from .common import *
from .auth import *
from .event import *
from .comment import *
from .attendance import *

__all__ = [
    "MessageResponse",
    "ErrorResponse",
    "InternalErrorResponse",
    "CountResponse",
    "UrlResponse",
    "RegisterRequest",
    "LoginRequest",
    "AuthResponse",
    "ProfileUpdate",
    "PasswordChange",
    "UserProfile",
    "EventCreate",
    "EventUpdate",
    "EventResponse",
    "CommentCreate",
    "CommentUpdate",
    "CommentResponse",
    "RatingSummary",
    "AttendeeResponse",
]
