# FILE: ownshot/prompts/product.py
"""
Product prompt builder

Base rules protect product identity, branding and label text; every other
section only touches background, lighting and staging.
"""
import random
from typing import List, Optional

from ownshot.models.product import ProductOptions
from ownshot.prompts.common import describe, join_sections, tier
from ownshot.prompts.lifestyle import build_lifestyle_description

CRITICAL_RULES = """CRITICAL RULES:
- Product identity MUST be preserved exactly - do not modify shape, design, branding, or text
- All labels, logos, and text on product MUST remain readable and unaltered
- Product must be photorealistic, professional e-commerce quality
- No artistic interpretations or creative liberties with the product itself
- Maintain accurate colors and materials of the original product
- Only modify background, lighting, and staging as directed"""

SHOT_TYPE_TEMPLATES = {
    "packshot": "Studio packshot for e-commerce. Clean, professional product photography with controlled studio lighting. Product should be sharp, well-defined, and ready for online retail.",
    "lifestyle": "Lifestyle product photography showing the product in a real-world environment. Natural setting that suggests product use context while keeping product as the hero element.",
    "flatlay": "Top-down flat lay arrangement. Product artfully arranged from directly above, perfect for cosmetics, accessories, and lifestyle products. Clean, organized composition.",
}

SCALE_ADJUSTMENTS = {
    "small": "Macro product photography optimized for small objects. Close-up perspective emphasizing fine details, textures, and craftsmanship. Controlled studio environment with precise lighting for maximum detail capture.",
    "medium": "Standard product photography with balanced perspective. Product comfortably fits in frame with appropriate environmental context.",
    "large": "Large-scale product photography with increased camera distance and environmental context. Product positioned on floor or in room setting with appropriate sense of scale. Professional lighting setup using larger softboxes and room illumination. Wide perspective showing product in realistic spatial context.",
    "extra_large": "EXTRA LARGE SCALE - Consider using the Automotive preset for vehicles. If proceeding: Expansive environmental photography with significant camera distance. Product requires large space context. Professional studio or outdoor environment with appropriate scale reference.",
}

BACKGROUND_STYLES = {
    "white": "pure white background (#FFFFFF), seamless studio backdrop",
    "light_grey": "light grey background (#F5F5F5), subtle neutral backdrop",
    "gradient": "subtle gradient studio backdrop transitioning from white to light grey",
    "lifestyle": "natural lifestyle environment appropriate to product context",
}

SURFACE_DESCRIPTIONS = {
    "none": "product floating cleanly with no visible surface",
    "acrylic": "white acrylic surface with subtle reflective properties",
    "paper": "matte paper surface with no reflections",
    "concrete": "smooth concrete surface with natural texture",
    "marble": "white marble surface with natural veining",
    "wood_light": "light natural wood surface with visible grain",
    "wood_dark": "dark wood surface with rich grain patterns",
    "cloth": "fabric surface",
}

LARGE_SCALE_SURFACE = "product positioned on floor or in appropriate large-scale room environment"

CLOTH_DESCRIPTIONS = {
    "linen": "natural linen fabric with characteristic texture",
    "cotton": "soft cotton fabric with gentle weave",
    "velvet": "luxurious velvet fabric with rich texture",
}

CAMERA_ANGLES = {
    "front": "straight-on front view, product facing camera directly",
    "three_quarter": "3/4 angle hero shot showing front and side",
    "side": "side profile view emphasizing product silhouette",
    "top_down": "directly overhead top-down view",
    "macro": "macro close-up showing product details and texture",
}

COMPOSITIONS = {
    "centered": "product perfectly centered in frame",
    "rule_of_thirds": "product positioned using rule of thirds for dynamic composition",
    "hero_negative_space": "product as hero with generous negative space around it",
}

LIGHTING_STYLES = {
    "softbox_front": "soft, even front lighting from softbox, minimal shadows",
    "window_light": "natural window light with soft, directional quality",
    "rim_light": "rim lighting emphasizing product edges and form",
    "dramatic": "dramatic studio lighting with strong highlights and shadows",
    "backlit": "backlit setup with glow around product edges",
}

SHADOW_DESCRIPTIONS = {
    "none": "no visible shadow",
    "soft_contact": "soft contact shadow directly beneath product",
    "crisp": "crisp, defined shadow with clear edges",
    "drop": "drop shadow extending away from product",
}

REFLECTION_DESCRIPTIONS = {
    "none": "no reflection",
    "subtle": "subtle reflection on surface beneath product",
    "strong": "strong mirror-like reflection",
}

WRINKLE_TIERS = [
    (19, " pressed smooth with minimal wrinkles"),
    (49, " with natural subtle wrinkles"),
    (79, " with visible wrinkles and natural folds"),
]

FOCAL_LENGTH_TIERS = [
    (34, "Wide angle lens perspective with slight environmental context"),
    (64, "Standard focal length with natural perspective"),
]

LIGHT_INTENSITY_TIERS = [
    (29, "low key moody lighting"),
    (69, "balanced studio lighting"),
]

MATTE_TIERS = [
    (40, "glossy finish with strong specular highlights"),
    (70, "semi-matte finish with controlled highlights"),
]

GLOW_TIERS = [
    (29, "Subtle glow effect around product"),
    (69, "Moderate glow effect highlighting product"),
]

LABEL_STRICTNESS_TIERS = [
    (29, "Preserve main brand name and logo. Minor label details may vary slightly."),
    (69, "All text, logos, and branding must remain clearly readable and accurate."),
]

LABEL_STRICT = (
    "STRICT - Every letter, number, logo, and design element on product labels must be "
    "EXACTLY preserved. Zero tolerance for text modifications."
)


def shot_type_description(options: ProductOptions, rng: Optional[random.Random] = None) -> str:
    template = describe(SHOT_TYPE_TEMPLATES, options.shot_type, "shotType")
    if options.shot_type == "lifestyle":
        return build_lifestyle_description(options.lifestyle_scene, rng)
    return template


def background_description(options: ProductOptions) -> str:
    background = options.background
    desc = describe(BACKGROUND_STYLES, background.style, "background.style")

    if background.color:
        desc += f", custom background color {background.color}"

    if background.crisp_edges:
        desc += ". Product edges must be crisp and perfectly cut out"

    return desc


def surface_description(options: ProductOptions) -> str:
    surface = options.surface
    base = describe(SURFACE_DESCRIPTIONS, surface.type, "surface.type")

    if options.scale in ("large", "extra_large") and surface.type != "none":
        return LARGE_SCALE_SURFACE

    if surface.type == "cloth" and surface.cloth_type:
        cloth = describe(CLOTH_DESCRIPTIONS, surface.cloth_type, "surface.clothType")
        wrinkles = ""
        if surface.wrinkle_amount is not None:
            wrinkles = tier(surface.wrinkle_amount, WRINKLE_TIERS, " with pronounced wrinkles and organic folds")
        return f"{cloth}{wrinkles}"

    return base


def camera_description(options: ProductOptions) -> str:
    camera = options.camera
    angle = describe(CAMERA_ANGLES, camera.angle, "camera.angle")
    composition = describe(COMPOSITIONS, camera.composition, "camera.composition")
    perspective = tier(
        camera.focal_length,
        FOCAL_LENGTH_TIERS,
        "Compressed telephoto perspective with shallow depth, professional product photography look",
    )
    return f"{angle}. {composition}. {perspective}"


def lighting_description(options: ProductOptions) -> str:
    lighting = options.lighting
    desc = describe(LIGHTING_STYLES, lighting.style, "lighting.style")
    desc += ", " + tier(lighting.intensity, LIGHT_INTENSITY_TIERS, "bright, high-key lighting")
    desc += ", " + tier(lighting.matte_level, MATTE_TIERS, "very matte finish with minimal specular highlights")

    # Glow for bottles, tech products, etc.
    if lighting.glow_enabled:
        desc += ". " + tier(lighting.glow_intensity, GLOW_TIERS, "Strong ethereal glow effect emphasizing product")

    return desc


def label_protection(options: ProductOptions) -> Optional[str]:
    protection = options.label_protection
    if not protection.enabled:
        return None
    return "LABEL PROTECTION: " + tier(protection.strictness, LABEL_STRICTNESS_TIERS, LABEL_STRICT)


def cleanup_instructions(options: ProductOptions) -> Optional[str]:
    cleanup = options.cleanup
    instructions: List[str] = []

    if cleanup.remove_dust:
        instructions.append("remove any dust or particles")
    if cleanup.remove_scratches:
        instructions.append("remove scratches and imperfections")
    if cleanup.reduce_glare:
        instructions.append("reduce excessive glare and hot spots")
    if cleanup.straighten:
        instructions.append("ensure product is perfectly straight and aligned")
    if cleanup.color_accuracy:
        instructions.append("maintain accurate product colors")

    if not instructions:
        return None
    return f"CLEANUP: {', '.join(instructions)}."


def props_description(options: ProductOptions) -> Optional[str]:
    # Props only for lifestyle and flat lay
    if options.shot_type == "packshot" or not options.allow_props:
        return None

    suggestions = (options.prop_suggestions or "").strip()
    if suggestions:
        lead = f"Include the following props to enhance the scene: {suggestions}. "
    elif options.shot_type == "lifestyle":
        lead = "Include contextual props that suggest product usage and lifestyle setting. "
    else:
        lead = "Include complementary items arranged artfully in flat lay composition. "

    return f"PROPS: {lead}Props should support the product as hero, not distract from it."


def build_product_prompt(options: ProductOptions, rng: Optional[random.Random] = None) -> str:
    """
    Build the complete product prompt

    Deterministic except for lifestyle shots, which draw scene, mood and
    props from rng.
    """
    shadow = None
    if options.shadow != "none":
        shadow = f"SHADOW: {describe(SHADOW_DESCRIPTIONS, options.shadow, 'shadow')}"

    reflection = None
    if options.reflection != "none":
        reflection = f"REFLECTION: {describe(REFLECTION_DESCRIPTIONS, options.reflection, 'reflection')}"

    sections = [
        CRITICAL_RULES,
        f"SCALE: {describe(SCALE_ADJUSTMENTS, options.scale, 'scale')}",
        f"SHOT TYPE: {shot_type_description(options, rng)}",
        f"BACKGROUND: {background_description(options)}",
        f"SURFACE: {surface_description(options)}",
        f"CAMERA: {camera_description(options)}",
        f"LIGHTING: {lighting_description(options)}",
        shadow,
        reflection,
        label_protection(options),
        cleanup_instructions(options),
        props_description(options),
    ]

    return join_sections(sections, "\n\n")
