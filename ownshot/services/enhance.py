# FILE: ownshot/services/enhance.py
"""
Enhancement orchestrator: validate, build the prompt, one boundary call
"""
import asyncio
import logging
import random
from typing import Optional

from ownshot.config import Settings
from ownshot.errors import ImageGenerationError
from ownshot.models.enhance import EnhanceRequest, EnhanceResult
from ownshot.prompts.common import prompt_preview
from ownshot.prompts.dispatch import build_prompt
from ownshot.providers.gemini import ImageProvider
from ownshot.services.correlation import generate_correlation_id
from ownshot.services.validation import validate_image

logger = logging.getLogger(__name__)


async def enhance_image(
    request: EnhanceRequest,
    provider: ImageProvider,
    rng: Optional[random.Random] = None,
    correlation_id: Optional[str] = None,
    settings: Optional[Settings] = None
) -> EnhanceResult:
    """
    Run one enhancement

    Validation and prompt errors are raised before the provider is touched.
    The provider is called exactly once; a failed or empty result raises
    ImageGenerationError.
    """
    correlation_id = correlation_id or generate_correlation_id()

    validate_image(request.mime_type, len(request.image_data), settings)

    prompt = build_prompt(request.domain, request.options, rng)
    logger.info(
        f"[{correlation_id}] Enhance: domain={request.domain}, aspect_ratio={request.aspect_ratio}, "
        f"image_size={request.image_size}, prompt_length={len(prompt)}"
    )
    logger.debug(f"[{correlation_id}] Prompt: {prompt_preview(prompt)}")

    result = await asyncio.to_thread(
        provider.generate,
        request.image_data,
        request.mime_type,
        prompt,
        request.aspect_ratio,
        request.image_size,
        correlation_id
    )

    if not result.success or not result.image_data:
        logger.error(f"[{correlation_id}] Enhancement failed: {result.error}")
        raise ImageGenerationError(result.error)

    logger.info(f"[{correlation_id}] Enhancement complete: {len(result.image_data)} bytes")

    return EnhanceResult(
        image_data=result.image_data,
        mime_type=result.mime_type or "image/png",
        prompt=prompt,
        correlation_id=correlation_id
    )
