"""
Authentication and user schemas
"""

from typing import Optional
from pydantic import BaseModel

# Fields are optional so that missing input reaches the service and is
# reported as a 400 with the service's own message. Emails are plain strings:
# they are stored and matched exactly as submitted.

class RegisterRequest(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None

class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None

class AuthResponse(BaseModel):
    uid: str
    token: str

class ProfileUpdate(BaseModel):
    username: Optional[str] = None
    email: Optional[str] = None

class PasswordChange(BaseModel):
    oldPassword: Optional[str] = None
    newPassword: Optional[str] = None

class UserProfile(BaseModel):
    id: str
    username: str
    email: str
    role: str
    createdAt: str
