# FILE: ownshot/routes/analyze.py
"""
Product analysis endpoint
"""
import asyncio
import logging
from typing import Callable
from fastapi import APIRouter, Depends, File, UploadFile

from ownshot.providers.gemini import ImageProvider, get_provider_factory
from ownshot.services.analyzer import analyze_product_image
from ownshot.services.presets import apply_analysis
from ownshot.services.validation import validate_image

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/product")
async def analyze_product(
    file: UploadFile = File(...),
    provider_factory: Callable[[], ImageProvider] = Depends(get_provider_factory)
):
    """Recommend product options for an uploaded photo"""
    image_data = await file.read()
    validate_image(file.content_type, len(image_data))
    provider = provider_factory()

    logger.info(f"Product analysis: file={file.filename}, size={len(image_data)}")

    analysis = await asyncio.to_thread(analyze_product_image, image_data, file.content_type, provider)
    suggested = apply_analysis(analysis)

    return {
        "analysis": analysis.model_dump(by_alias=True),
        "suggestedOptions": suggested.to_wire()
    }
