# FILE: ownshot/models/food.py
"""
Food options
"""
from typing import Dict, Literal, Optional

from pydantic import BaseModel

from ownshot.models.common import OptionsModel, Percent, Saturation


FoodTransformMode = Literal["retouch", "reshoot", "reshoot_styled"]

FoodShotType = Literal["overhead", "45-degree", "straight-on", "close-up", "styled-scene"]

FoodLighting = Literal["natural", "studio", "moody", "bright-airy"]

FoodSurface = Literal["wood", "marble", "concrete", "linen", "slate", "white"]

FoodBoost = Literal["off", "plating", "appetising", "hero"]


class FoodFinish(OptionsModel):
    matte_crisp: Percent  # 0=matte, 100=crisp
    saturation: Saturation


class FoodStyling(OptionsModel):
    add_steam: bool
    add_condensation: bool
    reduce_glare: bool


class FoodOptions(OptionsModel):
    """Complete food options record"""
    transform_mode: FoodTransformMode
    shot_type: FoodShotType
    lighting: FoodLighting
    surface: FoodSurface
    food_boost: FoodBoost
    strength: Percent
    finish: FoodFinish
    styling: FoodStyling
    prop_suggestions: Optional[str] = None
    dish_hint: Optional[str] = None


class TitledLabel(BaseModel):
    title: str
    description: str


TRANSFORM_MODE_LABELS: Dict[str, TitledLabel] = {
    "retouch": TitledLabel(
        title="Retouch Only",
        description="Polish existing shot - lighting, color, cleanup",
    ),
    "reshoot": TitledLabel(
        title="Reshoot",
        description="Improve angle, composition, and lighting",
    ),
    "reshoot_styled": TitledLabel(
        title="Reshoot + Styling",
        description="Full magazine-style shot with props and styling",
    ),
}

FOOD_SHOT_TYPE_LABELS: Dict[str, str] = {
    "overhead": "Overhead (Flat Lay)",
    "45-degree": "45° Angle",
    "straight-on": "Straight-On",
    "close-up": "Close-Up",
    "styled-scene": "Styled Scene",
}

FOOD_LIGHTING_LABELS: Dict[str, str] = {
    "natural": "Natural Light",
    "studio": "Studio",
    "moody": "Moody/Dark",
    "bright-airy": "Bright & Airy",
}

FOOD_SURFACE_LABELS: Dict[str, str] = {
    "wood": "Wood",
    "marble": "Marble",
    "concrete": "Concrete",
    "linen": "Linen",
    "slate": "Slate",
    "white": "White/Neutral",
}

FOOD_BOOST_LABELS: Dict[str, TitledLabel] = {
    "off": TitledLabel(title="Off", description="Photo retouch only - no food changes"),
    "plating": TitledLabel(title="Plating Polish", description="Tidy arrangement, clean plate rim"),
    "appetising": TitledLabel(title="Appetising Upgrade", description="Improve food appearance (fresher, crispier)"),
    "hero": TitledLabel(title="Hero Restyle", description="Ad-ready presentation, same dish"),
}

FOOD_LABEL_TABLES = {
    "transformMode": TRANSFORM_MODE_LABELS,
    "shotType": FOOD_SHOT_TYPE_LABELS,
    "lighting": FOOD_LIGHTING_LABELS,
    "surface": FOOD_SURFACE_LABELS,
    "foodBoost": FOOD_BOOST_LABELS,
}

DEFAULT_FOOD_OPTIONS = FoodOptions.model_validate({
    "transformMode": "retouch",
    "shotType": "45-degree",
    "lighting": "natural",
    "surface": "wood",
    "foodBoost": "off",
    "strength": 60,
    "finish": {
        "matteCrisp": 55,
        "saturation": 0,
    },
    "styling": {
        "addSteam": False,
        "addCondensation": False,
        "reduceGlare": True,
    },
})
