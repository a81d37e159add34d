"""
Public API routes - no authentication required
"""

from fastapi import APIRouter

router = APIRouter()

@router.get("/")
async def root():
    return {"message": "Event API running"}

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "ok"}
