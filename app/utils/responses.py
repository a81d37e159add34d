"""
Standardized response utilities and exception handlers
"""

import logging
from typing import Any, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.schemas.common import ErrorResponse, InternalErrorResponse, MessageResponse
from app.services.exceptions import InternalError, ServiceError

logger = logging.getLogger(__name__)

def message_response(message: str, status_code: int = 200) -> JSONResponse:
    """Create a plain ``{message}`` response"""
    return JSONResponse(
        content=MessageResponse(message=message).model_dump(),
        status_code=status_code
    )

def error_response(
    message: str,
    errors: Any = None,
    status_code: int = 400
) -> JSONResponse:
    """Create standardized error response"""
    response = ErrorResponse(message=message, errors=errors)
    return JSONResponse(
        content=response.model_dump(exclude_none=True),
        status_code=status_code
    )

def internal_error_response(error: Optional[str] = None) -> JSONResponse:
    return JSONResponse(
        content=InternalErrorResponse(error=error or "Internal server error").model_dump(),
        status_code=500
    )

async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Map service exceptions to their HTTP status"""
    if isinstance(exc, InternalError):
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return internal_error_response(exc.message)
    return error_response(exc.message, status_code=exc.status_code)

async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are reported as 400"""
    return error_response(
        "Invalid request",
        errors=[{"loc": list(e.get("loc", ())), "msg": e.get("msg")} for e in exc.errors()],
        status_code=400
    )

async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return internal_error_response(str(exc))
