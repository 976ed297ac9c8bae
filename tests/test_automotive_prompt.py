# FILE: tests/test_automotive_prompt.py

import pytest

from ownshot.models.automotive import AUTO_LABEL_TABLES, DEFAULT_AUTO_OPTIONS, AutoOptions
from ownshot.prompts.automotive import (
    ANGLE_DESCRIPTIONS,
    CRITICAL_RULES,
    DETAIL_ENHANCEMENT,
    ENVIRONMENT_DESCRIPTIONS,
    LIGHTING_DESCRIPTIONS,
    SHOT_TYPE_TEMPLATES,
    build_auto_prompt,
    dramatic_description,
    movement_description,
    reflection_description,
    strength_description,
)
from ownshot.services.presets import deep_merge


def make_options(**overrides):
    return AutoOptions.model_validate(deep_merge(DEFAULT_AUTO_OPTIONS.to_wire(), overrides))


@pytest.mark.parametrize("table, field", [
    (SHOT_TYPE_TEMPLATES, "shotType"),
    (ANGLE_DESCRIPTIONS, "angle"),
    (ENVIRONMENT_DESCRIPTIONS, "environment"),
    (LIGHTING_DESCRIPTIONS, "lighting"),
])
def test_every_variant_has_a_distinct_phrase(table, field):
    assert set(table) == set(AUTO_LABEL_TABLES[field])
    assert all(table.values())
    assert len(set(table.values())) == len(table)


@pytest.mark.parametrize("shot_type", sorted(SHOT_TYPE_TEMPLATES))
def test_prompt_starts_with_critical_rules(shot_type):
    prompt = build_auto_prompt(make_options(shotType=shot_type))
    assert prompt.startswith(CRITICAL_RULES + "\n\n")


@pytest.mark.parametrize("value, phrase", [
    (0, "Minimal reflections"),
    (29, "Minimal reflections"),
    (30, "Moderate reflections"),
    (69, "Moderate reflections"),
    (70, "Strong mirror-like"),
    (100, "Strong mirror-like"),
])
def test_reflection_tiers(value, phrase):
    assert reflection_description(value, False).startswith(phrase)


def test_reflection_cleanup_is_appended():
    assert reflection_description(50, True).endswith("preserving paint depth and quality")
    assert "Remove distracting" not in reflection_description(50, False)


@pytest.mark.parametrize("value, phrase", [(29, "Subtle"), (30, "Balanced"), (69, "Balanced"), (70, "Maximum")])
def test_drama_tiers(value, phrase):
    assert dramatic_description(value).startswith(phrase)


@pytest.mark.parametrize("value, phrase", [(29, "Subtle"), (30, "Moderate"), (69, "Moderate"), (70, "Strong")])
def test_strength_tiers(value, phrase):
    assert strength_description(value).startswith(f"INTENSITY: {phrase}")


def test_motion_depends_on_shot_type():
    assert movement_description(False, "action") is None
    assert "Dynamic sense of movement" in movement_description(True, "action")
    assert "remains stationary" in movement_description(True, "studio")


def test_optional_sections_are_gated():
    bare = build_auto_prompt(make_options(showMovement=False, enhanceDetails=False))
    full = build_auto_prompt(make_options(showMovement=True, enhanceDetails=True))

    assert "MOTION:" not in bare
    assert DETAIL_ENHANCEMENT not in bare
    assert "MOTION:" in full
    assert DETAIL_ENHANCEMENT in full


def test_intensity_is_last_section():
    prompt = build_auto_prompt(DEFAULT_AUTO_OPTIONS)
    assert prompt.split("\n\n")[-1].startswith("INTENSITY:")
