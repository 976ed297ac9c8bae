# FILE: ownshot/prompts/food.py
"""
Food prompt builder

Sections are assembled in a fixed order. When food boost is on, the boost
block moves right after the role block so the model prioritizes it, and a
closing reminder restates the task at the end.
"""
from ownshot.models.food import FoodOptions
from ownshot.prompts.common import describe, join_sections, tier

CRITICAL_RULES = """CRITICAL RULES:
- Keep the dish recognizable and truthful to the original photo (same type of food, same core items).
- Do NOT invent new ingredients or change the dish into something else.
- Do NOT add text, logos, watermarks, menus, or branding.
- Photorealistic only (no CGI/illustration look).
- If packaging/labels/text exist, keep them EXACTLY unchanged (do not rewrite or guess text)."""

ROLE_RETOUCH = """You are a professional food photographer + editorial retoucher.

HARD RULES (must follow):
- Keep portion size and quantity roughly consistent (no huge size changes).

OUTPUT:
- Return one final edited image only. No text response."""

ROLE_BOOST = """You are a professional food stylist creating advertisement-quality food photography.

TASK: Generate a NEW, improved version of this food photo where the food looks significantly more appetising and delicious. This is NOT a simple edit - you must REGENERATE the food to look better.

WHAT TO GENERATE:
- The SAME type of dish (same food items visible)
- But with MUCH better appearance - like a professional food ad
- Fresh, vibrant, appetising, mouth-watering

OUTPUT:
- Return one final image only. No text."""

COMPOSITION_RULES = """COMPOSITION:
- Make the subject look intentional and appetising.
- Remove awkward empty space via crop/reframe if allowed by transform mode.
- Keep the dish as the hero; background must not compete."""

CLOSING_REMINDER = (
    "CRITICAL: You must GENERATE a new image where the food looks NOTICEABLY BETTER than the input. "
    "The bun must look fresher and more golden. The cheese must look more melted and gooey. "
    "Any fries must look crispier. Do NOT just apply filters - actually regenerate improved food. "
    "The difference should be obvious when comparing before and after."
)

TRANSFORM_MODE_BLOCKS = {
    "retouch": """TRANSFORM MODE: Retouch Only (Hard Constraint)
- Keep the same camera angle and framing as much as possible.
- Do NOT add props. Do NOT change the scene.
- Only lighting/color/cleanup/sharpness improvements.""",
    "reshoot": """TRANSFORM MODE: Reshoot (Composition Allowed)
- You may improve framing and composition (crop/reframe) for a more professional shot.
- You may reduce phone wide-angle distortion; simulate a natural lens look.
- Do NOT add extra props unless explicitly requested.""",
    "reshoot_styled": """TRANSFORM MODE: Styled (Reshoot + Minimal Props)
- You may improve framing/composition and add a SMALL number of tasteful props that support the dish.
- Props must be minimal, realistic, and not distract from the food.""",
}

SHOT_TYPE_BLOCKS = {
    "overhead": """SHOT TYPE: Top-Down Flat Lay
- Use a true top-down angle (90°) if reshoot is allowed.
- Composition: clean, intentional spacing; centered or rule-of-thirds.
- Keep background simple; avoid clutter.""",
    "45-degree": """SHOT TYPE: 45° Hero
- Use a flattering 30–60° angle (table-level but slightly elevated) if reshoot is allowed.
- Emphasize layers, height, and the most appetising side of the dish.
- Keep the plate edges clean and framing intentional.""",
    "straight-on": """SHOT TYPE: Straight-On
- Eye-level shot, perfect for burgers, sandwiches, and layered dishes.
- Emphasizes height and cross-section details.""",
    "close-up": """SHOT TYPE: Macro Detail
- Create a tight, appetising close-up that emphasizes texture (crisp edges, sauce sheen, garnish detail).
- Subtle depth-of-field look is allowed (photoreal).
- Avoid making the food look fake or overly glossy.""",
    "styled-scene": """SHOT TYPE: Table Scene
- A premium restaurant table vibe: dish remains the hero, background is supportive and uncluttered.
- Keep props minimal and tasteful (only if styling is allowed).""",
}

LIGHTING_BLOCKS = {
    "natural": """LIGHTING STYLE: Bright Daylight Menu Look
- Soft, bright, natural daylight feel.
- Clean whites, controlled highlights, gentle shadows.
- No harsh phone flash look.""",
    "studio": """LIGHTING STYLE: Studio
- Professional studio lighting - clean, even illumination with controlled shadows.
- Commercial product quality ideal for catalogs and advertising.""",
    "moody": """LIGHTING STYLE: Moody Editorial
- Directional soft light, deeper shadows, premium contrast.
- Controlled highlights, rich midtones, cinematic but still appetising.
- Keep the food readable (don't crush shadows).""",
    "bright-airy": """LIGHTING STYLE: Warm & Cozy Restaurant
- Warm ambient feel with clean color balance (avoid yellow/orange cast).
- Soft highlights, inviting warmth, natural skin/wood tones if present.""",
}

SURFACE_BLOCKS = {
    "wood": "SURFACE/BACKGROUND: Use a premium natural wood tabletop surface (clean, subtle grain).",
    "marble": "SURFACE/BACKGROUND: Use a light marble surface (premium, minimal pattern, not distracting).",
    "concrete": "SURFACE/BACKGROUND: Use a dark stone/slate surface for a premium restaurant feel.",
    "linen": "SURFACE/BACKGROUND: Use a neutral linen texture (subtle, premium, not busy).",
    "slate": "SURFACE/BACKGROUND: Use dark slate or stone surface for contrast.",
    "white": "SURFACE/BACKGROUND: A clean solid white background or gentle studio gradient (premium catalog/menu style).",
}

FOOD_BOOST_BLOCKS = {
    "off": """FOOD BOOST: OFF
- Do not change the food itself. Retouch only (light/color/cleanup).""",
    "plating": """FOOD BOOST: Plating Polish
- You may tidy plating: clean plate rim, remove smudges/crumbs, and slightly reposition existing elements for a more intentional presentation.
- Do not add new ingredients.""",
    "appetising": """FOOD BOOST: Appetising Upgrade - MAKE THE FOOD LOOK BETTER

YOUR MAIN TASK: Significantly improve how the food looks. Make it look like a professional food advertisement.

SPECIFICALLY DO THESE THINGS:
- BUNS/BREAD: Make them look fresh, evenly browned, with an appetising golden sheen. Fix any dull or flat areas.
- CHEESE: Make melted cheese look smooth, gooey, and perfectly melted. Improve the drape and texture.
- MEAT/PATTY: Make it look juicy and well-cooked, not dry or grey.
- GREENS/SALAD: Make lettuce and greens look crisp, fresh, and vibrant - not limp or wilted.
- FRIES: Make them look golden, crispy, and perfectly cooked - not pale or soggy.
- SAUCES: Make them look glossy and appetising.
- OVERALL: Clean up any mess, smudges, or unappealing areas. Make the presentation look intentional.

KEEP THE SAME DISH - don't add new ingredients that aren't there, but DO make what's there look much better.""",
    "hero": """FOOD BOOST: Hero Restyle - MAXIMUM FOOD STYLING

YOUR MAIN TASK: Transform this into an advertisement-quality hero shot. Make it look PERFECT.

GO ALL OUT:
- Make every element look absolutely perfect and mouth-watering.
- Perfect the shapes, textures, and presentation of all food elements.
- The bun should look like it came from a professional food stylist.
- The cheese should have that perfect melt you see in commercials.
- Fries should look golden and crispy like in fast food ads.
- Everything should look fresh, vibrant, and irresistible.
- Clean up everything - this should look like a hero shot for an ad campaign.

STILL KEEP IT THE SAME DISH - same type of food, same core items. But make it look stunning.""",
}

STEAM_BLOCK = """STEAM:
- If the dish appears hot (e.g., grilled meat, soup, coffee), add subtle realistic steam.
- Keep it minimal and believable. If the dish is not hot, do not add steam."""

CONDENSATION_BLOCK = """CONDENSATION:
- If there is a cold drink present, add subtle realistic condensation droplets.
- If no drink is present, ignore this instruction."""

GLARE_BLOCK = """GLARE CONTROL:
- Reduce harsh glare on sauces, plates, cutlery, or glossy ingredients while keeping realistic specular highlights."""

STRENGTH_TIERS = [
    (15, "Minimal (technical corrections only)"),
    (35, "Subtle (natural menu photo)"),
    (65, "Standard (marketing-ready)"),
    (85, "High polish (editorial menu hero)"),
]

MATTE_TIERS = [
    (20, "crisp, clean, modern finish (not overly sharp)"),
    (55, "balanced finish with gentle highlight roll-off"),
    (80, "premium matte/filmic finish with lifted blacks and soft contrast"),
]

SATURATION_TIERS = [
    (-10, "muted editorial saturation (restrained, premium)"),
    (-1, "slightly muted saturation (editorial)"),
    (0, "natural, true-to-life saturation"),
    (10, "slightly richer saturation (appetising but realistic)"),
]


def strength_tier(strength: int) -> str:
    return tier(strength, STRENGTH_TIERS, "Maximum polish (ad-ready, still photoreal)")


def matte_instruction(matte: int) -> str:
    return tier(matte, MATTE_TIERS, "strong matte/filmic finish with very smooth highlights (still realistic)")


def saturation_instruction(saturation: int) -> str:
    return tier(saturation, SATURATION_TIERS, "more vibrant saturation (still believable, avoid neon/oversaturation)")


def effects_block(options: FoodOptions) -> str:
    styling = options.styling
    return join_sections([
        STEAM_BLOCK if styling.add_steam else None,
        CONDENSATION_BLOCK if styling.add_condensation else None,
        GLARE_BLOCK if styling.reduce_glare else None,
    ], "\n\n")


def finish_block(options: FoodOptions) -> str:
    return f"""FINISH / GRADE:
- Strength: {options.strength}/100 ({strength_tier(options.strength)})
- Finish: {matte_instruction(options.finish.matte_crisp)}
- Saturation: {saturation_instruction(options.finish.saturation)}
- Editorial quality: clean white balance, controlled highlights, gentle shadows.
- Avoid HDR look, avoid crunchy sharpening, preserve natural food texture (no plastic smoothing)."""


def build_food_prompt(options: FoodOptions) -> str:
    """Build the food prompt"""
    boost = describe(FOOD_BOOST_BLOCKS, options.food_boost, "foodBoost")
    boost_enabled = options.food_boost != "off"

    dish_hint = (options.dish_hint or "").strip()
    prop_suggestions = (options.prop_suggestions or "").strip()

    dish_hint_line = None
    if dish_hint:
        dish_hint_line = f"DISH HINT (use only as context, do not invent new items): {dish_hint}"

    prop_line = None
    if options.transform_mode == "reshoot_styled" and prop_suggestions:
        prop_line = f"PROP SUGGESTIONS (max 3, minimal): {prop_suggestions}"

    sections = [
        CRITICAL_RULES,
        ROLE_BOOST if boost_enabled else ROLE_RETOUCH,
        boost if boost_enabled else None,
        dish_hint_line,
        describe(TRANSFORM_MODE_BLOCKS, options.transform_mode, "transformMode"),
        describe(SHOT_TYPE_BLOCKS, options.shot_type, "shotType"),
        COMPOSITION_RULES,
        describe(SURFACE_BLOCKS, options.surface, "surface"),
        describe(LIGHTING_BLOCKS, options.lighting, "lighting"),
        boost if not boost_enabled else None,
        effects_block(options),
        prop_line,
        finish_block(options),
        CLOSING_REMINDER if boost_enabled else None,
    ]

    return join_sections(sections, "\n\n")
