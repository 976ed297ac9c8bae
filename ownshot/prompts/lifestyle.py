# FILE: ownshot/prompts/lifestyle.py
"""
Lifestyle scene randomizer for product shots

Gives variety on regeneration: each call draws a mood and two props from the
scene, and draws the scene itself when the selector is "random". This is the
only non-deterministic part of prompt building; pass a seeded
random.Random to make it reproducible.
"""
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ownshot.models.common import require_option


@dataclass(frozen=True)
class SceneData:
    environment: str
    props: Tuple[str, ...]
    moods: Tuple[str, ...]


@dataclass(frozen=True)
class LifestyleSetup:
    scene: str
    environment: str
    mood: str
    props: List[str]


PROPS_PER_SCENE = 2

LIFESTYLE_SCENES: Dict[str, SceneData] = {
    "kitchen_counter": SceneData(
        environment="on a clean kitchen counter with natural daylight streaming through a window",
        props=("fresh herbs in a small pot", "wooden cutting board", "ceramic bowl", "linen kitchen towel", "olive oil bottle"),
        moods=("bright morning light", "warm afternoon glow", "soft natural daylight"),
    ),
    "office_desk": SceneData(
        environment="on a modern minimalist office desk with ambient workspace lighting",
        props=("leather notebook", "elegant pen", "coffee cup", "small succulent plant", "wireless earbuds case"),
        moods=("focused daylight from window", "warm afternoon ambiance", "soft diffused natural light"),
    ),
    "outdoor_cafe": SceneData(
        environment="on a charming cafe table with dappled sunlight filtering through foliage",
        props=("espresso cup and saucer", "croissant on plate", "folded newspaper", "designer sunglasses", "small flower vase"),
        moods=("golden hour warmth", "bright morning sunshine", "soft afternoon glow"),
    ),
    "cozy_home": SceneData(
        environment="on a soft knit blanket or throw in a cozy, inviting living space",
        props=("scented candle", "open book", "warm mug of tea", "reading glasses", "soft wool texture"),
        moods=("cozy evening lamplight", "soft morning light", "warm golden hour"),
    ),
    "bathroom_shelf": SceneData(
        environment="on a pristine bathroom shelf or marble vanity with soft, spa-like lighting",
        props=("small potted orchid", "folded white towel", "decorative candle", "ceramic soap dish", "eucalyptus sprig"),
        moods=("spa-like calm brightness", "clean natural light", "soft diffused glow"),
    ),
    "bedside_table": SceneData(
        environment="on a stylish bedside table with soft, intimate ambient lighting",
        props=("hardcover book", "small table lamp glow", "delicate plant", "jewelry dish", "alarm clock"),
        moods=("cozy evening warmth", "soft morning awakening", "intimate warm glow"),
    ),
    "garden_patio": SceneData(
        environment="on an outdoor garden table surrounded by lush greenery and natural elements",
        props=("potted herbs", "garden flowers in vase", "linen napkin", "terracotta pot", "gardening gloves"),
        moods=("golden hour sunshine", "bright natural daylight", "dappled afternoon light"),
    ),
    "living_room": SceneData(
        environment="on a stylish coffee table in an elegant, well-designed living room setting",
        props=("art book", "decorative sculpture", "small potted plant", "design magazine", "ceramic coaster"),
        moods=("afternoon window light", "cozy evening ambiance", "bright airy daylight"),
    ),
}

# Fixed order so a seeded draw is reproducible
SCENE_POOL: Tuple[str, ...] = tuple(LIFESTYLE_SCENES)


def pick_lifestyle_setup(scene: Optional[str] = None, rng: Optional[random.Random] = None) -> LifestyleSetup:
    """Pick a concrete scene, mood and two props"""
    rng = rng or random.Random()

    selected = rng.choice(SCENE_POOL) if scene in (None, "random") else scene
    data = require_option(LIFESTYLE_SCENES, selected, "lifestyleScene")

    return LifestyleSetup(
        scene=selected,
        environment=data.environment,
        mood=rng.choice(data.moods),
        props=rng.sample(data.props, PROPS_PER_SCENE),
    )


def build_lifestyle_description(scene: Optional[str] = None, rng: Optional[random.Random] = None) -> str:
    setup = pick_lifestyle_setup(scene, rng)
    return (
        f"Lifestyle product photography {setup.environment}.\n"
        f"Atmosphere: {setup.mood}.\n"
        f"Scene includes subtle complementary props: {', '.join(setup.props)}.\n"
        "Product remains the absolute hero - props enhance but never distract.\n"
        "Natural, editorial quality that feels authentic and aspirational."
    )
