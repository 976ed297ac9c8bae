# FILE: ownshot/routes/prompt.py
"""
Prompt preview endpoint
"""
import logging
from fastapi import APIRouter

from ownshot.models.enhance import PromptPreviewRequest, PromptPreviewResponse
from ownshot.prompts.common import prompt_preview
from ownshot.prompts.dispatch import build_prompt
from ownshot.services.validation import parse_options_data

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/preview", response_model=PromptPreviewResponse)
async def preview_prompt(request: PromptPreviewRequest):
    """Build the prompt for a configuration without calling the image model"""
    options = parse_options_data(request.domain, request.options)
    prompt = build_prompt(request.domain, options)

    logger.info(f"Prompt preview: domain={request.domain}, length={len(prompt)}")

    return PromptPreviewResponse(
        domain=request.domain,
        prompt=prompt,
        preview=prompt_preview(prompt, request.max_length),
        length=len(prompt)
    )
