# FILE: ownshot/models/product.py
"""
Product options for studio, lifestyle and flat lay shots
"""
from typing import Dict, List, Literal, Optional

from pydantic import Field

from ownshot.models.common import OptionsModel, Percent


ProductShotType = Literal["packshot", "lifestyle", "flatlay"]

ProductScale = Literal["small", "medium", "large", "extra_large"]

LifestyleScene = Literal[
    "random",
    "kitchen_counter",
    "office_desk",
    "outdoor_cafe",
    "cozy_home",
    "bathroom_shelf",
    "bedside_table",
    "garden_patio",
    "living_room",
]

BackgroundStyle = Literal["white", "light_grey", "gradient", "lifestyle"]

SurfaceType = Literal[
    "none",
    "acrylic",
    "paper",
    "concrete",
    "marble",
    "wood_light",
    "wood_dark",
    "cloth",
]

ClothType = Literal["linen", "cotton", "velvet"]

CameraAngle = Literal["front", "three_quarter", "side", "top_down", "macro"]

Composition = Literal["centered", "rule_of_thirds", "hero_negative_space"]

LightingStyle = Literal["softbox_front", "window_light", "rim_light", "dramatic", "backlit"]

ShadowType = Literal["none", "soft_contact", "crisp", "drop"]

ReflectionType = Literal["none", "subtle", "strong"]

ProductPresetType = Literal["amazon", "brand_hero", "social", "catalog", "custom"]


class ProductBackground(OptionsModel):
    style: BackgroundStyle
    color: Optional[str] = Field(default=None, pattern=r"^#[0-9A-Fa-f]{6}$")
    crisp_edges: bool


class ProductSurface(OptionsModel):
    type: SurfaceType
    cloth_type: Optional[ClothType] = None
    wrinkle_amount: Optional[Percent] = None


class ProductCamera(OptionsModel):
    angle: CameraAngle
    focal_length: Percent  # 0=wide, 100=compressed/telephoto
    composition: Composition


class ProductLighting(OptionsModel):
    style: LightingStyle
    glow_enabled: bool
    glow_intensity: Percent
    intensity: Percent
    matte_level: Percent


class LabelProtection(OptionsModel):
    enabled: bool
    strictness: Percent


class ProductCleanup(OptionsModel):
    remove_dust: bool
    remove_scratches: bool
    reduce_glare: bool
    straighten: bool
    color_accuracy: bool


class ProductOptions(OptionsModel):
    """Complete product options record"""
    quick_preset: ProductPresetType
    shot_type: ProductShotType
    scale: ProductScale
    lifestyle_scene: LifestyleScene
    background: ProductBackground
    surface: ProductSurface
    camera: ProductCamera
    lighting: ProductLighting
    shadow: ShadowType
    reflection: ReflectionType
    label_protection: LabelProtection
    cleanup: ProductCleanup
    allow_props: bool
    prop_suggestions: Optional[str] = None


DEFAULT_PRODUCT_OPTIONS = ProductOptions.model_validate({
    "quickPreset": "custom",
    "shotType": "packshot",
    "scale": "medium",
    "lifestyleScene": "random",
    "background": {
        "style": "white",
        "crispEdges": True,
    },
    "surface": {
        "type": "none",
    },
    "camera": {
        "angle": "front",
        "focalLength": 50,
        "composition": "centered",
    },
    "lighting": {
        "style": "softbox_front",
        "glowEnabled": False,
        "glowIntensity": 30,
        "intensity": 70,
        "matteLevel": 40,
    },
    "shadow": "soft_contact",
    "reflection": "none",
    "labelProtection": {
        "enabled": True,
        "strictness": 80,
    },
    "cleanup": {
        "removeDust": True,
        "removeScratches": True,
        "reduceGlare": True,
        "straighten": True,
        "colorAccuracy": True,
    },
    "allowProps": False,
})


# Labels for UI display and legality checks
SHOT_TYPE_LABELS: Dict[str, str] = {
    "packshot": "Packshot",
    "lifestyle": "Lifestyle",
    "flatlay": "Flat Lay",
}

SCALE_LABELS: Dict[str, str] = {
    "small": "Small (jewelry, cosmetics)",
    "medium": "Medium (bottles, boxes, devices)",
    "large": "Large (furniture, appliances)",
    "extra_large": "Extra Large (vehicles, machinery)",
}

LIFESTYLE_SCENE_LABELS: Dict[str, str] = {
    "random": "Surprise Me",
    "kitchen_counter": "Kitchen Counter",
    "office_desk": "Office Desk",
    "outdoor_cafe": "Outdoor Cafe",
    "cozy_home": "Cozy Home",
    "bathroom_shelf": "Bathroom Shelf",
    "bedside_table": "Bedside Table",
    "garden_patio": "Garden Patio",
    "living_room": "Living Room",
}

BACKGROUND_STYLE_LABELS: Dict[str, str] = {
    "white": "Pure White",
    "light_grey": "Light Grey",
    "gradient": "Gradient Studio",
    "lifestyle": "Lifestyle Scene",
}

SURFACE_TYPE_LABELS: Dict[str, str] = {
    "none": "None (floating)",
    "acrylic": "White Acrylic",
    "paper": "Matte Paper",
    "concrete": "Concrete",
    "marble": "Marble",
    "wood_light": "Light Wood",
    "wood_dark": "Dark Wood",
    "cloth": "Cloth/Fabric",
}

CLOTH_TYPE_LABELS: Dict[str, str] = {
    "linen": "Linen",
    "cotton": "Cotton",
    "velvet": "Velvet",
}

CAMERA_ANGLE_LABELS: Dict[str, str] = {
    "front": "Front-on",
    "three_quarter": "3/4 Hero",
    "side": "Side Profile",
    "top_down": "Top-down",
    "macro": "Macro Detail",
}

COMPOSITION_LABELS: Dict[str, str] = {
    "centered": "Centered",
    "rule_of_thirds": "Rule of Thirds",
    "hero_negative_space": "Hero + Negative Space",
}

LIGHTING_STYLE_LABELS: Dict[str, str] = {
    "softbox_front": "Softbox (safe)",
    "window_light": "Window Light",
    "rim_light": "Rim Light",
    "dramatic": "Dramatic Studio",
    "backlit": "Backlit",
}

SHADOW_TYPE_LABELS: Dict[str, str] = {
    "none": "None",
    "soft_contact": "Soft Contact",
    "crisp": "Crisp Shadow",
    "drop": "Drop Shadow",
}

REFLECTION_TYPE_LABELS: Dict[str, str] = {
    "none": "None",
    "subtle": "Subtle",
    "strong": "Strong",
}

QUICK_PRESET_LABELS: Dict[str, str] = {
    "amazon": "Amazon Ready",
    "brand_hero": "Brand Hero",
    "social": "Social Post",
    "catalog": "Catalog",
    "custom": "Custom",
}

PRODUCT_LABEL_TABLES: Dict[str, Dict[str, str]] = {
    "quickPreset": QUICK_PRESET_LABELS,
    "shotType": SHOT_TYPE_LABELS,
    "scale": SCALE_LABELS,
    "lifestyleScene": LIFESTYLE_SCENE_LABELS,
    "background.style": BACKGROUND_STYLE_LABELS,
    "surface.type": SURFACE_TYPE_LABELS,
    "surface.clothType": CLOTH_TYPE_LABELS,
    "camera.angle": CAMERA_ANGLE_LABELS,
    "camera.composition": COMPOSITION_LABELS,
    "lighting.style": LIGHTING_STYLE_LABELS,
    "shadow": SHADOW_TYPE_LABELS,
    "reflection": REFLECTION_TYPE_LABELS,
}


def available_surfaces(scale: str) -> List[str]:
    """Surfaces usable at a product scale; large products can't sit on a tabletop"""
    if scale in ("large", "extra_large"):
        return ["none"]
    return list(SURFACE_TYPE_LABELS)
