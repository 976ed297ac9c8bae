# FILE: ownshot/routes/enhance.py
"""
Image enhancement endpoint
"""
import logging
from typing import Callable, Optional
from fastapi import APIRouter, Depends, File, Form, Header, UploadFile
from fastapi.responses import Response

from ownshot.config import get_settings
from ownshot.models.common import (
    ASPECT_RATIO_LABELS,
    DEFAULT_ASPECT_RATIO,
    DEFAULT_IMAGE_SIZE,
    IMAGE_SIZE_LABELS,
    require_option,
)
from ownshot.models.enhance import EnhanceRequest
from ownshot.providers.gemini import ImageProvider, get_provider_factory
from ownshot.services.correlation import CORRELATION_HEADER, resolve_correlation_id
from ownshot.services.enhance import enhance_image
from ownshot.services.validation import parse_options, validate_image

logger = logging.getLogger(__name__)
router = APIRouter()

FILE_EXTENSIONS = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/webp": "webp",
}


@router.post("")
async def enhance_endpoint(
    file: UploadFile = File(...),
    domain: str = Form(...),
    options: str = Form(...),
    aspect_ratio: str = Form(DEFAULT_ASPECT_RATIO, alias="aspectRatio"),
    image_size: str = Form(DEFAULT_IMAGE_SIZE, alias="imageSize"),
    x_correlation_id: Optional[str] = Header(None),
    provider_factory: Callable[[], ImageProvider] = Depends(get_provider_factory)
):
    """
    Enhance an uploaded image

    Returns the generated image bytes unchanged; the correlation id of the
    request is echoed in X-Correlation-ID.
    """
    correlation_id = resolve_correlation_id(x_correlation_id)
    settings = get_settings()

    image_data = await file.read()
    logger.info(
        f"[{correlation_id}] Enhance request: domain={domain}, file={file.filename}, "
        f"type={file.content_type}, size={len(image_data)}"
    )

    validate_image(file.content_type, len(image_data), settings)
    require_option(ASPECT_RATIO_LABELS, aspect_ratio, "aspectRatio")
    require_option(IMAGE_SIZE_LABELS, image_size, "imageSize")
    parsed = parse_options(domain, options)
    provider = provider_factory()

    request = EnhanceRequest(
        image_data=image_data,
        mime_type=file.content_type,
        domain=domain,
        options=parsed,
        aspect_ratio=aspect_ratio,
        image_size=image_size
    )

    result = await enhance_image(request, provider, correlation_id=correlation_id, settings=settings)

    extension = FILE_EXTENSIONS.get(result.mime_type, "png")
    return Response(
        content=result.image_data,
        media_type=result.mime_type,
        headers={
            CORRELATION_HEADER: result.correlation_id,
            "Content-Disposition": f'inline; filename="enhanced.{extension}"'
        }
    )
