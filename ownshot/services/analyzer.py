# FILE: ownshot/services/analyzer.py
"""
Product image analysis

Asks the model for shot recommendations. The result is advisory, so every
failure degrades to the default analysis with a warning instead of raising.
"""
import json
import logging
import re
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from ownshot.models.product import (
    BackgroundStyle,
    CameraAngle,
    LightingStyle,
    ProductShotType,
    ShadowType,
    SurfaceType,
)
from ownshot.providers.gemini import ImageProvider

logger = logging.getLogger(__name__)


ProductType = Literal["bottle", "box", "apparel", "jewelry", "device", "food", "cosmetics", "other"]


class ProductAnalysis(BaseModel):
    """Recommendations for a product photo"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_type: ProductType
    recommended_shot_type: ProductShotType
    recommended_angle: CameraAngle
    recommended_background: BackgroundStyle
    recommended_surface: SurfaceType
    recommended_lighting: LightingStyle
    recommended_shadow: ShadowType
    warnings: List[str] = Field(default_factory=list)
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)


ANALYSIS_PROMPT = """Analyze this product image and provide recommendations for professional product photography settings.

Return your analysis as a JSON object with the following structure:

{
  "productType": "<one of: bottle, box, apparel, jewelry, device, food, cosmetics, other>",
  "recommendedShotType": "<one of: packshot, lifestyle, flatlay>",
  "recommendedAngle": "<one of: front, three_quarter, side, top_down, macro>",
  "recommendedBackground": "<one of: white, light_grey, gradient, lifestyle>",
  "recommendedSurface": "<one of: none, acrylic, paper, concrete, marble, wood_light, wood_dark, cloth>",
  "recommendedLighting": "<one of: softbox_front, window_light, rim_light, dramatic, backlit>",
  "recommendedShadow": "<one of: none, soft_contact, crisp, drop>",
  "warnings": ["<array of any warnings or issues with the current image>"],
  "confidence": <number between 0 and 1 indicating confidence in the analysis>
}

Guidelines:
- For productType: Identify the category of product
- For recommendedShotType: packshot = clean isolated product, lifestyle = product in context, flatlay = overhead styled shot
- For recommendedAngle: Consider what shows the product best
- For recommendedBackground: Match the product's style and brand positioning
- For recommendedSurface: Consider reflective properties and product type
- For recommendedLighting: Match the product's material and desired mood
- For recommendedShadow: Enhance depth and product grounding
- For warnings: Flag any issues like poor lighting, blur, clutter, orientation issues, etc.
- For confidence: Be honest about uncertainty

Return ONLY the JSON object, no additional text."""

JSON_OBJECT_PATTERN = re.compile(r"\{.*\}", re.DOTALL)

DEFAULT_WARNING = "Unable to analyze image automatically. Using default settings."


def default_analysis(warning: str = DEFAULT_WARNING) -> ProductAnalysis:
    return ProductAnalysis(
        product_type="other",
        recommended_shot_type="packshot",
        recommended_angle="three_quarter",
        recommended_background="white",
        recommended_surface="none",
        recommended_lighting="softbox_front",
        recommended_shadow="soft_contact",
        warnings=[warning],
        confidence=0.0,
    )


def parse_analysis(text: str) -> ProductAnalysis:
    """Parse the first JSON object in a model answer"""
    match = JSON_OBJECT_PATTERN.search(text or "")
    if not match:
        logger.error(f"No JSON found in analysis response: {text[:200] if text else text}")
        return default_analysis()

    try:
        return ProductAnalysis.model_validate(json.loads(match.group(0)))
    except (json.JSONDecodeError, ValidationError) as e:
        logger.error(f"Invalid analysis response: {e}")
        return default_analysis()


def analyze_product_image(image_data: bytes, mime_type: str, provider: ImageProvider) -> ProductAnalysis:
    """Recommend product shot settings for an image"""
    try:
        text = provider.generate_text(image_data, mime_type, ANALYSIS_PROMPT)
    except Exception as e:
        logger.error(f"Product analysis error: {e}", exc_info=True)
        message = str(e) or type(e).__name__
        return default_analysis(f"Analysis failed: {message}. Using default settings.")

    if not text:
        logger.error("No text in analysis response")
        return default_analysis()

    return parse_analysis(text)
