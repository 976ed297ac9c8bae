# FILE: ownshot/prompts/automotive.py
"""
Automotive prompt builder
"""
from typing import Optional

from ownshot.models.automotive import AutoOptions
from ownshot.prompts.common import describe, join_sections, tier

CRITICAL_RULES = """CRITICAL RULES:
- Vehicle identity MUST be preserved exactly - do not modify make, model, body style, or distinctive features
- All badges, logos, license plates, and vehicle markings must remain readable and unaltered
- Vehicle must be photorealistic, professional automotive photography quality
- No artistic interpretations or creative liberties with the vehicle itself
- Maintain accurate colors, paint finish, and materials of the original vehicle
- Only modify environment, lighting, reflections, and staging as directed"""

SHOT_TYPE_TEMPLATES = {
    "studio": "Professional studio automotive photography. Controlled environment with seamless backdrop, precision lighting setup. Vehicle should be impeccably presented with careful attention to reflections, highlights, and paint depth.",
    "showroom": "Showroom-style automotive photography. Clean, bright environment that suggests premium retail space. Vehicle displayed in pristine condition with showroom-quality presentation.",
    "outdoor": "Outdoor automotive photography in natural environment. Vehicle shown in real-world setting that complements its character while maintaining professional quality and hero status.",
    "detail": "Automotive detail photography focusing on specific elements. Macro-style close-up showing craftsmanship, materials, and design details. Sharp focus on featured element with appropriate depth of field.",
    "action": "Dynamic action automotive photography. Vehicle captured with sense of motion and energy. May include motion blur effects, rolling shutter, or environmental blur to convey speed and performance.",
}

ANGLE_DESCRIPTIONS = {
    "three_quarter_front": "classic 3/4 front hero angle showing front fascia and side profile, the most iconic automotive angle",
    "side_profile": "pure side profile view emphasizing vehicle silhouette and proportions",
    "rear_three_quarter": "3/4 rear angle showing rear design and side character lines",
    "front": "straight-on front view showcasing grille, headlights, and front fascia",
    "rear": "straight-on rear view featuring taillights and rear design",
    "interior": "interior cabin shot showing dashboard, seats, and interior details",
    "wheel_detail": "close-up detail of wheel, tire, brake components, and wheel arch",
    "engine": "engine bay detail showcasing mechanical components and engineering",
}

ENVIRONMENT_DESCRIPTIONS = {
    "dark_studio": "dark studio environment with black or charcoal seamless backdrop, dramatic lighting that emphasizes form and reflections",
    "white_cyclorama": "pristine white cyclorama studio with seamless infinity backdrop, clean and pure presentation",
    "showroom": "upscale automotive showroom with polished floors, subtle architectural elements, premium ambient lighting",
    "urban_street": "modern urban street environment with contemporary architecture, clean pavement, city atmosphere",
    "mountain_road": "scenic mountain road setting with winding asphalt, natural landscape, sense of adventure",
    "coastal": "coastal road environment with ocean views, seaside atmosphere, natural beauty",
    "industrial": "industrial setting with concrete, steel, urban textures, edgy contemporary feel",
    "parking_garage": "modern parking garage with concrete pillars, dramatic shadows, urban minimalist aesthetic",
}

LIGHTING_DESCRIPTIONS = {
    "dramatic": "dramatic high-contrast lighting with strong highlights, deep shadows, rim lighting that sculpts vehicle form and creates depth in paint",
    "soft_studio": "soft, even studio lighting with controlled reflections, gentle highlights, professional catalog-quality illumination",
    "natural": "natural daylight with soft directional quality, authentic outdoor feel, realistic environmental lighting",
    "neon": "neon and colored accent lighting with vibrant reflections, contemporary urban aesthetic, bold color accents",
    "sunset": "golden hour sunset lighting with warm tones, long shadows, romantic glow and rich color saturation",
    "overcast": "soft overcast natural light with diffused even illumination, minimal shadows, muted refined tones",
}

REFLECTION_TIERS = [
    (29, "Minimal reflections in paint and chrome, matte-leaning finish"),
    (69, "Moderate reflections showing environment in paint and glass, balanced depth"),
]

DRAMA_TIERS = [
    (29, "Subtle, understated presentation with gentle contrast"),
    (69, "Balanced drama with moderate contrast and visual impact"),
]

STRENGTH_TIERS = [
    (29, "Subtle enhancement preserving most of original character. Light touch on environment and lighting adjustments."),
    (69, "Moderate transformation balancing original and enhanced elements. Professional upgrade while respecting source."),
]

DETAIL_ENHANCEMENT = """DETAIL ENHANCEMENT:
- Chrome and metallic elements: crisp highlights, mirror-like finish
- Paint surface: deep glossy appearance with clarity and depth
- Wheels: clean, sharp detail in spokes/design, tire lettering visible
- Glass: crystal clear with appropriate reflections
- Remove dust, dirt, water spots, and imperfections"""


def reflection_description(intensity: int, cleanup: bool) -> str:
    desc = tier(
        intensity,
        REFLECTION_TIERS,
        "Strong mirror-like reflections in paint, chrome, and glass, showcasing deep glossy finish",
    )
    if cleanup:
        desc += ". Remove distracting or unflattering reflections while preserving paint depth and quality"
    return desc


def dramatic_description(level: int) -> str:
    return tier(
        level,
        DRAMA_TIERS,
        "Maximum drama with bold contrast, strong highlights and shadows, cinematic intensity",
    )


def movement_description(show_movement: bool, shot_type: str) -> Optional[str]:
    if not show_movement:
        return None

    if shot_type == "action":
        return (
            "MOTION: Dynamic sense of movement with motion blur on wheels (spinning effect), possible "
            "environmental blur to convey speed. Vehicle body remains sharp while motion elements create energy."
        )

    return "MOTION: Subtle motion blur on wheels only (spinning effect) to add dynamic energy while vehicle remains stationary and sharp."


def strength_description(strength: int) -> str:
    phrase = tier(
        strength,
        STRENGTH_TIERS,
        "Strong transformation with full professional treatment. Maximum environmental and lighting enhancement for hero-level presentation.",
    )
    return f"INTENSITY: {phrase}"


def build_auto_prompt(options: AutoOptions) -> str:
    """Build the automotive prompt"""
    sections = [
        CRITICAL_RULES,
        f"SHOT TYPE: {describe(SHOT_TYPE_TEMPLATES, options.shot_type, 'shotType')}",
        f"ANGLE: {describe(ANGLE_DESCRIPTIONS, options.angle, 'angle')}",
        f"ENVIRONMENT: {describe(ENVIRONMENT_DESCRIPTIONS, options.environment, 'environment')}",
        f"LIGHTING: {describe(LIGHTING_DESCRIPTIONS, options.lighting, 'lighting')}",
        f"DRAMA: {dramatic_description(options.dramatic_level)}",
        f"REFLECTIONS: {reflection_description(options.reflection_intensity, options.cleanup_reflections)}",
        movement_description(options.show_movement, options.shot_type),
        DETAIL_ENHANCEMENT if options.enhance_details else None,
        strength_description(options.strength),
    ]

    return join_sections(sections, "\n\n")
