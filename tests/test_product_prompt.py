# FILE: tests/test_product_prompt.py

import random
from typing import get_args

import pytest

from ownshot.models.product import (
    DEFAULT_PRODUCT_OPTIONS,
    BackgroundStyle,
    CameraAngle,
    ClothType,
    Composition,
    LightingStyle,
    ProductOptions,
    ProductScale,
    ProductShotType,
    ReflectionType,
    ShadowType,
    SurfaceType,
)
from ownshot.prompts.product import (
    BACKGROUND_STYLES,
    CAMERA_ANGLES,
    CLOTH_DESCRIPTIONS,
    COMPOSITIONS,
    CRITICAL_RULES,
    LARGE_SCALE_SURFACE,
    LIGHTING_STYLES,
    REFLECTION_DESCRIPTIONS,
    SCALE_ADJUSTMENTS,
    SHADOW_DESCRIPTIONS,
    SHOT_TYPE_TEMPLATES,
    SURFACE_DESCRIPTIONS,
    build_product_prompt,
    camera_description,
    label_protection,
    lighting_description,
    surface_description,
)
from ownshot.services.presets import apply_product_preset, deep_merge


def make_options(**overrides):
    return ProductOptions.model_validate(deep_merge(DEFAULT_PRODUCT_OPTIONS.to_wire(), overrides))


@pytest.mark.parametrize("table, variants", [
    (SHOT_TYPE_TEMPLATES, ProductShotType),
    (SCALE_ADJUSTMENTS, ProductScale),
    (BACKGROUND_STYLES, BackgroundStyle),
    (SURFACE_DESCRIPTIONS, SurfaceType),
    (CLOTH_DESCRIPTIONS, ClothType),
    (CAMERA_ANGLES, CameraAngle),
    (COMPOSITIONS, Composition),
    (LIGHTING_STYLES, LightingStyle),
    (SHADOW_DESCRIPTIONS, ShadowType),
    (REFLECTION_DESCRIPTIONS, ReflectionType),
])
def test_every_variant_has_a_distinct_phrase(table, variants):
    assert set(table) == set(get_args(variants))
    assert all(table.values())
    assert len(set(table.values())) == len(table)


@pytest.mark.parametrize("preset", ["amazon", "brand_hero", "social", "catalog", "custom"])
def test_prompt_starts_with_critical_rules(preset, rng):
    prompt = build_product_prompt(apply_product_preset(preset), rng)
    assert prompt.startswith(CRITICAL_RULES + "\n\n")


def test_strict_label_protection_phrase():
    """Label protection enabled at strictness 95"""
    prompt = build_product_prompt(make_options(labelProtection={"enabled": True, "strictness": 95}))

    assert "Zero tolerance for text modifications." in prompt
    assert "Minor label details may vary slightly." not in prompt
    assert "must remain clearly readable and accurate." not in prompt


@pytest.mark.parametrize("strictness, phrase", [
    (0, "Minor label details may vary slightly."),
    (29, "Minor label details may vary slightly."),
    (30, "must remain clearly readable and accurate."),
    (69, "must remain clearly readable and accurate."),
    (70, "Zero tolerance"),
    (100, "Zero tolerance"),
])
def test_label_strictness_tiers(strictness, phrase):
    options = make_options(labelProtection={"enabled": True, "strictness": strictness})
    assert phrase in label_protection(options)


def test_label_protection_can_be_disabled():
    options = make_options(labelProtection={"enabled": False, "strictness": 95})

    assert label_protection(options) is None
    assert "LABEL PROTECTION" not in build_product_prompt(options)


@pytest.mark.parametrize("focal_length, phrase", [
    (0, "Wide angle"),
    (34, "Wide angle"),
    (35, "Standard focal length"),
    (64, "Standard focal length"),
    (65, "telephoto"),
])
def test_focal_length_tiers(focal_length, phrase):
    options = make_options(camera={"focalLength": focal_length})
    assert phrase in camera_description(options)


@pytest.mark.parametrize("matte, phrase", [
    (40, "glossy finish"),
    (41, "semi-matte finish"),
    (70, "semi-matte finish"),
    (71, "very matte finish"),
])
def test_matte_tiers(matte, phrase):
    options = make_options(lighting={"matteLevel": matte})
    assert phrase in lighting_description(options)


def test_glow_only_when_enabled():
    assert "glow effect" not in lighting_description(make_options(lighting={"glowEnabled": False}))
    glowing = make_options(lighting={"glowEnabled": True, "glowIntensity": 90})
    assert "Strong ethereal glow effect" in lighting_description(glowing)


def test_cloth_surface_with_wrinkles():
    options = make_options(surface={"type": "cloth", "clothType": "velvet", "wrinkleAmount": 20})
    assert surface_description(options) == "luxurious velvet fabric with rich texture with natural subtle wrinkles"


def test_large_scale_overrides_surface():
    options = make_options(scale="large", surface={"type": "marble"})
    assert surface_description(options) == LARGE_SCALE_SURFACE


def test_none_sections_are_omitted():
    prompt = build_product_prompt(make_options(shadow="none", reflection="none"))

    assert "SHADOW:" not in prompt
    assert "REFLECTION:" not in prompt


def test_custom_background_color():
    prompt = build_product_prompt(make_options(background={"color": "#112233"}))
    assert "custom background color #112233" in prompt


def test_cleanup_list_is_dropped_when_empty():
    options = make_options(cleanup={
        "removeDust": False,
        "removeScratches": False,
        "reduceGlare": False,
        "straighten": False,
        "colorAccuracy": False,
    })
    assert "CLEANUP:" not in build_product_prompt(options)


def test_props_never_on_packshot():
    options = make_options(shotType="packshot", allowProps=True, propSuggestions="lemons")
    assert "PROPS:" not in build_product_prompt(options)


def test_props_on_flatlay():
    options = make_options(shotType="flatlay", allowProps=True)
    assert "complementary items arranged artfully in flat lay" in build_product_prompt(options)


def test_packshot_prompt_is_deterministic():
    options = apply_product_preset("amazon")
    assert build_product_prompt(options) == build_product_prompt(options)


def test_random_lifestyle_prompt_is_well_formed():
    """Random lifestyle scene, built repeatedly"""
    options = make_options(shotType="lifestyle", lifestyleScene="random")

    prompts = {build_product_prompt(options, random.Random(seed)) for seed in range(20)}

    assert len(prompts) > 1
    for prompt in prompts:
        assert prompt.startswith(CRITICAL_RULES)
        assert "SHOT TYPE: Lifestyle product photography on " in prompt
        assert "Scene includes subtle complementary props: " in prompt


def test_seeded_lifestyle_prompt_repeats():
    options = make_options(shotType="lifestyle", lifestyleScene="office_desk")

    first = build_product_prompt(options, random.Random(7))
    second = build_product_prompt(options, random.Random(7))

    assert first == second
    assert "modern minimalist office desk" in first
