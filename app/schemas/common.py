"""
Common Pydantic schemas
"""

from typing import Any, Optional
from pydantic import BaseModel

class MessageResponse(BaseModel):
    """Plain acknowledgement"""
    message: str

class ErrorResponse(BaseModel):
    """Error body for business failures"""
    message: str
    errors: Optional[Any] = None

class InternalErrorResponse(BaseModel):
    """Error body for unexpected failures"""
    error: str

class CountResponse(BaseModel):
    count: int

class UrlResponse(BaseModel):
    url: str
