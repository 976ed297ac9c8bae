# FILE: ownshot/providers/gemini.py
"""
Gemini (Google) image-generation adapter

One request per call: inline image + instruction in, last inline image part
out. Failures come back as a failed GenerationResult; nothing is retried.
"""
import logging
from typing import Any, Callable, List, Optional

from google import genai
from google.genai import types

from ownshot.config import get_settings
from ownshot.errors import ProviderConfigurationError
from ownshot.models.enhance import GenerationResult

logger = logging.getLogger(__name__)


class ImageProvider:
    """Image-generation boundary interface"""

    model_name = "unknown"

    def generate(
        self,
        image_data: bytes,
        mime_type: str,
        prompt: str,
        aspect_ratio: str,
        image_size: str,
        correlation_id: str
    ) -> GenerationResult:
        raise NotImplementedError

    def generate_text(self, image_data: bytes, mime_type: str, prompt: str) -> Optional[str]:
        raise NotImplementedError


def _first_candidate_parts(response: Any) -> List[Any]:
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    return list(getattr(content, "parts", None) or [])


class GeminiImageProvider(ImageProvider):
    """Gemini image model provider"""

    def __init__(
        self,
        api_key: str,
        model: str,
        timeout_seconds: int = 60,
        analysis_model: Optional[str] = None,
        client: Optional[Any] = None
    ):
        self.client = client or genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=timeout_seconds * 1000)
        )
        self.model_name = model
        self.analysis_model = analysis_model or model
        logger.info(f"Gemini image provider: model={model}, timeout={timeout_seconds}s")

    def _image_config(self, aspect_ratio: str, image_size: str) -> types.ImageConfig:
        # "match" keeps the input framing, so no ratio is sent
        if aspect_ratio == "match":
            return types.ImageConfig(image_size=image_size)
        return types.ImageConfig(aspect_ratio=aspect_ratio, image_size=image_size)

    def generate(
        self,
        image_data: bytes,
        mime_type: str,
        prompt: str,
        aspect_ratio: str,
        image_size: str,
        correlation_id: str
    ) -> GenerationResult:
        """Generate the enhanced image"""
        logger.info(
            f"[{correlation_id}] Gemini generate: model={self.model_name}, "
            f"aspect_ratio={aspect_ratio}, image_size={image_size}"
        )

        try:
            response = self.client.models.generate_content(
                model=self.model_name,
                contents=[
                    types.Part.from_bytes(data=image_data, mime_type=mime_type),
                    prompt,
                ],
                config=types.GenerateContentConfig(
                    response_modalities=["TEXT", "IMAGE"],
                    image_config=self._image_config(aspect_ratio, image_size)
                )
            )
        except Exception as e:
            logger.error(f"[{correlation_id}] Gemini API error: {e}")
            return GenerationResult(success=False, error=str(e) or type(e).__name__)

        if not getattr(response, "candidates", None):
            return GenerationResult(success=False, error="No response from Gemini")

        parts = _first_candidate_parts(response)
        if not parts:
            return GenerationResult(success=False, error="No content parts in response")

        # The generated image is the last inline-data part
        image_part = None
        for part in parts:
            inline = getattr(part, "inline_data", None)
            if inline is not None and inline.data:
                image_part = inline

        if image_part is None:
            return GenerationResult(success=False, error="No image data in response")

        return GenerationResult(
            success=True,
            image_data=image_part.data,
            mime_type=image_part.mime_type or "image/png"
        )

    def generate_text(self, image_data: bytes, mime_type: str, prompt: str) -> Optional[str]:
        """Text-only answer about an image; SDK errors propagate"""
        response = self.client.models.generate_content(
            model=self.analysis_model,
            contents=[
                types.Part.from_bytes(data=image_data, mime_type=mime_type),
                prompt,
            ],
            config=types.GenerateContentConfig(response_modalities=["TEXT"])
        )

        for part in _first_candidate_parts(response):
            text = getattr(part, "text", None)
            if text:
                return text
        return None


_provider: Optional[ImageProvider] = None


def get_image_provider() -> ImageProvider:
    """Get or create the configured image provider"""
    global _provider
    if _provider is None:
        settings = get_settings()
        if not settings.gemini_api_key:
            raise ProviderConfigurationError("Image generation is not configured: GEMINI_API_KEY is not set")
        _provider = GeminiImageProvider(
            api_key=settings.gemini_api_key,
            model=settings.gemini_image_model,
            timeout_seconds=settings.gemini_timeout_seconds,
            analysis_model=settings.gemini_analysis_model
        )
    return _provider


def get_provider_factory() -> Callable[[], ImageProvider]:
    """
    Route dependency: the provider is resolved by the handler once the
    upload and options have passed validation
    """
    return get_image_provider


def reset_image_provider():
    """Drop the cached provider (useful for testing)"""
    global _provider
    _provider = None
