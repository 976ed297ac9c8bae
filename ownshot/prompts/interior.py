# FILE: ownshot/prompts/interior.py
"""
Interior prompt builder - single pass, geometry first

The transform mode picks whole blocks of text, so it is dispatched through
a mode table rather than combined from independent flags.
"""
from typing import Callable, Dict, List

from ownshot.models.interior import InteriorOptions
from ownshot.models.common import require_option
from ownshot.prompts.common import join_sections
from ownshot.prompts.generic import intensity_description

CRITICAL_RULES = """CRITICAL RULES:
- Preserve the room's architecture exactly - walls, windows, doors, ceilings, and built-in fixtures stay where they are
- Keep existing furniture, materials, and finishes recognizable; do not replace or recolor them
- Photorealistic interior photography only, no CGI or 3D-render look"""


def _retouch_block(options: InteriorOptions) -> List[str]:
    return [
        "Edit this interior photo for a design magazine.",
        "Fix the geometry: straighten the horizon, make all vertical lines perfectly vertical.",
    ]


def _reshoot_block(options: InteriorOptions) -> List[str]:
    return [
        "Recreate this interior scene as a professional design magazine photo.",
        "IMPORTANT: Reshoot from a perfectly straight-on, centered camera position facing the main feature.",
        "Extend the frame to show more of the room - a wider, more balanced composition.",
    ]


def _styling_block(options: InteriorOptions) -> List[str]:
    suggestions = (options.prop_suggestions or "").strip()
    if suggestions:
        return [f"Add these items: {suggestions}."]
    return ["Add tasteful styling: decorative objects, books, plants, artwork, rugs - whatever elevates the scene."]


MODE_BLOCKS: Dict[str, Callable[[InteriorOptions], List[str]]] = {
    "retouch": _retouch_block,
    "reshoot": _reshoot_block,
    "reshoot_styling": _reshoot_block,
}

# Blocks that follow the grade; only the styling mode adds props
MODE_FINISHING_BLOCKS: Dict[str, Callable[[InteriorOptions], List[str]]] = {
    "retouch": lambda options: [],
    "reshoot": lambda options: [],
    "reshoot_styling": _styling_block,
}


def build_interior_prompt(options: InteriorOptions) -> str:
    """Build the interior prompt"""
    mode = options.transform_mode
    opening = require_option(MODE_BLOCKS, mode, "transformMode")(options)
    finishing = require_option(MODE_FINISHING_BLOCKS, mode, "transformMode")(options)

    parts: List[str] = list(opening)

    if options.creative_crop:
        parts.append("Reframe for a balanced, magazine-worthy composition.")

    parts.append("Apply clean, bright editorial lighting with neutral white balance.")

    if options.hdr_windows:
        parts.append("Show detail through the windows - recover the exterior view naturally.")

    parts.append("Premium matte film look with lifted blacks and smooth highlights.")
    parts.append(f"Overall polish intensity: {intensity_description(options.strength)}.")
    parts.extend(finishing)
    parts.append("Photorealistic quality. No text or watermarks.")

    return join_sections([CRITICAL_RULES, " ".join(parts)], "\n\n")
