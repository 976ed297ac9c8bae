# FILE: ownshot/prompts/generic.py
"""
Generic prompt builder (people, general)
"""
from typing import List

from ownshot.models.generic import GENERIC_FOCUS, GenericOptions
from ownshot.models.common import require_option
from ownshot.prompts.common import join_sections, tier

CRITICAL_RULES = """CRITICAL RULES:
- Preserve the original identity, layout, and key objects of the photograph exactly
- People, faces, and expressions must remain recognizably the same
- Photorealistic output only, no illustration or CGI look"""

INTENSITY_TIERS = [
    (20, "subtle"),
    (40, "light"),
    (60, "moderate"),
    (80, "strong"),
]

UNIVERSAL_RULES = (
    "IMPORTANT: Do NOT add any new logos, text, watermarks, or branding. "
    "Do NOT add artificial elements that were not in the original image. "
    "Maintain the authentic character of the photograph."
)

STRICT_MODE = (
    "STRICT MODE: Do NOT add or remove any objects, people, or elements. "
    "Do NOT alter the composition or framing. "
    "Preserve all existing text, labels, and signage exactly as they appear."
)


def intensity_description(strength: int) -> str:
    return tier(strength, INTENSITY_TIERS, "intensive")


def enhancement_directives(strength: int) -> str:
    directives: List[str] = [
        "Improve lighting balance and reduce harsh shadows",
        "Enhance overall sharpness and clarity",
    ]

    if strength >= 30:
        directives.append("Optimize color vibrancy and saturation")
        directives.append("Clean up minor artifacts and noise")

    if strength >= 50:
        directives.append("Balance highlights and shadows for better dynamic range")
        directives.append("Enhance fine details and textures")

    if strength >= 70:
        directives.append("Apply professional-grade color correction")
        directives.append("Maximize detail recovery in darker areas")

    return f"Enhancements to apply: {'. '.join(directives)}."


def build_generic_prompt(preset: str, options: GenericOptions) -> str:
    """Build the prompt for the people and general presets"""
    focus = require_option(GENERIC_FOCUS, preset, "preset")

    sections = [
        CRITICAL_RULES,
        f"Enhance this image with {intensity_description(options.strength)} improvements "
        "while strictly preserving the original identity, layout, and key objects.",
        f"Focus on: {', '.join(focus.focus_areas)}.",
        enhancement_directives(options.strength),
        f"Style guidance: {'. '.join(focus.style_hints)}.",
        STRICT_MODE if options.strict_preservation else None,
        UNIVERSAL_RULES,
    ]

    return join_sections(sections, "\n\n")
