# FILE: tests/test_generic_prompt.py

import pytest

from ownshot.errors import UnknownOptionError
from ownshot.models.generic import GenericOptions
from ownshot.prompts.generic import (
    CRITICAL_RULES,
    STRICT_MODE,
    UNIVERSAL_RULES,
    build_generic_prompt,
    enhancement_directives,
    intensity_description,
)


def make_options(strength=60, strict=False):
    return GenericOptions(strength=strength, strict_preservation=strict)


@pytest.mark.parametrize("strength, tier", [
    (0, "subtle"),
    (20, "subtle"),
    (21, "light"),
    (40, "light"),
    (41, "moderate"),
    (60, "moderate"),
    (61, "strong"),
    (80, "strong"),
    (81, "intensive"),
    (100, "intensive"),
])
def test_intensity_tier_boundaries(strength, tier):
    assert intensity_description(strength) == tier


def test_directive_ladder():
    assert "Optimize color vibrancy" not in enhancement_directives(29)
    assert "Optimize color vibrancy" in enhancement_directives(30)
    assert "Enhance fine details" not in enhancement_directives(49)
    assert "Enhance fine details" in enhancement_directives(50)
    assert "professional-grade color correction" not in enhancement_directives(69)
    assert "professional-grade color correction" in enhancement_directives(70)


@pytest.mark.parametrize("preset", ["people", "general"])
@pytest.mark.parametrize("strict", [True, False])
def test_prompt_starts_with_critical_rules(preset, strict):
    prompt = build_generic_prompt(preset, make_options(strict=strict))

    assert prompt.startswith(CRITICAL_RULES)
    assert prompt.endswith(UNIVERSAL_RULES)


def test_strict_mode_block_is_gated():
    assert STRICT_MODE in build_generic_prompt("general", make_options(strict=True))
    assert STRICT_MODE not in build_generic_prompt("general", make_options(strict=False))


def test_preset_focus_is_used():
    people = build_generic_prompt("people", make_options())
    general = build_generic_prompt("general", make_options())

    assert "skin tone accuracy" in people
    assert "skin tone accuracy" not in general
    assert "noise reduction" in general


def test_strength_tier_appears_in_core_instruction():
    prompt = build_generic_prompt("general", make_options(strength=100))
    assert "Enhance this image with intensive improvements" in prompt


def test_sections_are_blank_line_separated():
    prompt = build_generic_prompt("people", make_options())
    sections = prompt.split("\n\n")

    assert sections[1].startswith("Enhance this image")
    assert sections[2].startswith("Focus on:")
    assert sections[3].startswith("Enhancements to apply:")
    assert sections[4].startswith("Style guidance:")


def test_unknown_preset_raises():
    with pytest.raises(UnknownOptionError):
        build_generic_prompt("pets", make_options())


def test_same_options_same_prompt():
    options = make_options(strength=45, strict=True)
    assert build_generic_prompt("people", options) == build_generic_prompt("people", options)
