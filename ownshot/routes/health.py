# FILE: ownshot/routes/health.py
"""
Health check endpoint
"""
import logging
from fastapi import APIRouter

from ownshot.config import APP_VERSION, get_settings

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def health_check():
    """
    Health check endpoint
    Returns provider_configured=true when an image model key is set
    """
    settings = get_settings()

    return {
        "status": "healthy",
        "version": APP_VERSION,
        "environment": settings.environment,
        "provider_configured": bool(settings.gemini_api_key),
        "image_model": settings.gemini_image_model
    }
