# FILE: ownshot/services/presets.py
"""
Product quick presets

A preset is a partial options record deep-merged onto the product defaults.
The merged dict is validated again so a preset can never produce an
illegal record.
"""
import copy
import logging
from typing import Any, Dict, Mapping, Optional

from pydantic import ValidationError

from ownshot.errors import OptionsValidationError
from ownshot.models.common import require_option
from ownshot.models.product import DEFAULT_PRODUCT_OPTIONS, ProductOptions

logger = logging.getLogger(__name__)


PRODUCT_QUICK_PRESETS: Dict[str, Dict[str, Any]] = {
    "amazon": {
        "quickPreset": "amazon",
        "shotType": "packshot",
        "background": {"style": "white", "crispEdges": True},
        "surface": {"type": "none"},
        "camera": {"angle": "front", "focalLength": 50, "composition": "centered"},
        "lighting": {
            "style": "softbox_front",
            "glowEnabled": False,
            "glowIntensity": 0,
            "intensity": 80,
            "matteLevel": 30,
        },
        "shadow": "soft_contact",
        "reflection": "none",
        "labelProtection": {"enabled": True, "strictness": 90},
        "cleanup": {
            "removeDust": True,
            "removeScratches": True,
            "reduceGlare": True,
            "straighten": True,
            "colorAccuracy": True,
        },
        "allowProps": False,
    },
    "brand_hero": {
        "quickPreset": "brand_hero",
        "shotType": "packshot",
        "background": {"style": "gradient", "crispEdges": True},
        "surface": {"type": "acrylic"},
        "camera": {"angle": "three_quarter", "focalLength": 70, "composition": "rule_of_thirds"},
        "lighting": {
            "style": "rim_light",
            "glowEnabled": False,
            "glowIntensity": 0,
            "intensity": 75,
            "matteLevel": 40,
        },
        "shadow": "crisp",
        "reflection": "subtle",
        "labelProtection": {"enabled": True, "strictness": 85},
        "cleanup": {
            "removeDust": True,
            "removeScratches": True,
            "reduceGlare": False,
            "straighten": True,
            "colorAccuracy": True,
        },
        "allowProps": False,
    },
    "social": {
        "quickPreset": "social",
        "shotType": "lifestyle",
        "background": {"style": "lifestyle", "crispEdges": False},
        "surface": {"type": "wood_light"},
        "camera": {"angle": "three_quarter", "focalLength": 60, "composition": "rule_of_thirds"},
        "lighting": {
            "style": "window_light",
            "glowEnabled": False,
            "glowIntensity": 0,
            "intensity": 65,
            "matteLevel": 50,
        },
        "shadow": "soft_contact",
        "reflection": "none",
        "labelProtection": {"enabled": True, "strictness": 75},
        "cleanup": {
            "removeDust": True,
            "removeScratches": False,
            "reduceGlare": True,
            "straighten": False,
            "colorAccuracy": True,
        },
        "allowProps": True,
        "propSuggestions": "greenery, coffee cup, natural elements",
    },
    "catalog": {
        "quickPreset": "catalog",
        "shotType": "packshot",
        "background": {"style": "light_grey", "crispEdges": True},
        "surface": {"type": "paper"},
        "camera": {"angle": "front", "focalLength": 55, "composition": "centered"},
        "lighting": {
            "style": "softbox_front",
            "glowEnabled": False,
            "glowIntensity": 0,
            "intensity": 75,
            "matteLevel": 35,
        },
        "shadow": "drop",
        "reflection": "none",
        "labelProtection": {"enabled": True, "strictness": 85},
        "cleanup": {
            "removeDust": True,
            "removeScratches": True,
            "reduceGlare": True,
            "straighten": True,
            "colorAccuracy": True,
        },
        "allowProps": False,
    },
    "custom": {
        "quickPreset": "custom",
    },
}

PRESET_DESCRIPTIONS: Dict[str, str] = {
    "amazon": "Pure white background, front-on, clean shadows - marketplace ready",
    "brand_hero": "Gradient background, rim lighting, premium feel for brand sites",
    "social": "Lifestyle scene with props, warm and inviting for social media",
    "catalog": "Light grey background, drop shadow - professional catalog style",
    "custom": "Configure all settings manually",
}


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Merge override onto base, recursing into nested mappings

    Neither input is mutated.
    """
    merged = copy.deepcopy(dict(base))
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(merged.get(key), Mapping):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


def _validate_product(data: Dict[str, Any], source: str) -> ProductOptions:
    try:
        return ProductOptions.model_validate(data)
    except ValidationError as e:
        raise OptionsValidationError(f"{source} produced invalid product options: {e}") from e


def apply_product_preset(name: str) -> ProductOptions:
    """Full product options for a quick preset"""
    override = require_option(PRODUCT_QUICK_PRESETS, name, "quickPreset")
    merged = deep_merge(DEFAULT_PRODUCT_OPTIONS.to_wire(), override)
    logger.debug(f"Applied product preset: {name}")
    return _validate_product(merged, f"Preset '{name}'")


def apply_analysis(analysis: Any, base: Optional[ProductOptions] = None) -> ProductOptions:
    """
    Map product analysis recommendations onto an options record

    The result is a custom configuration; fields the analysis does not cover
    keep their value from base (the product defaults when omitted).
    """
    base = base or DEFAULT_PRODUCT_OPTIONS
    override = {
        "quickPreset": "custom",
        "shotType": analysis.recommended_shot_type,
        "background": {"style": analysis.recommended_background},
        "surface": {"type": analysis.recommended_surface},
        "camera": {"angle": analysis.recommended_angle},
        "lighting": {"style": analysis.recommended_lighting},
        "shadow": analysis.recommended_shadow,
    }
    return _validate_product(deep_merge(base.to_wire(), override), "Analysis")
