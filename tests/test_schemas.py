# FILE: tests/test_schemas.py

from typing import get_args

import pytest
from pydantic import ValidationError

from ownshot.errors import UnknownOptionError
from ownshot.models import (
    AUTO_LABEL_TABLES,
    DEFAULT_AUTO_OPTIONS,
    DEFAULT_FOOD_OPTIONS,
    DEFAULT_GENERIC_OPTIONS,
    DEFAULT_INTERIOR_OPTIONS,
    DEFAULT_PRODUCT_OPTIONS,
    FOOD_LABEL_TABLES,
    INTERIOR_LABEL_TABLES,
    PRODUCT_LABEL_TABLES,
    AutoOptions,
    FoodOptions,
    GenericOptions,
    InteriorOptions,
    ProductOptions,
    available_surfaces,
    interior_mode_from_flags,
    is_valid_option,
    require_option,
)
from ownshot.models.automotive import AutoAngle, AutoEnvironment, AutoLighting, AutoShotType
from ownshot.models.common import ASPECT_RATIO_LABELS, DOMAIN_LABELS, IMAGE_SIZE_LABELS, AspectRatio, Domain, ImageSize
from ownshot.models.food import FoodBoost, FoodLighting, FoodShotType, FoodSurface, FoodTransformMode
from ownshot.models.interior import InteriorMode
from ownshot.models.product import (
    BackgroundStyle,
    CameraAngle,
    ClothType,
    Composition,
    LifestyleScene,
    LightingStyle,
    ProductPresetType,
    ProductScale,
    ProductShotType,
    ReflectionType,
    ShadowType,
    SurfaceType,
)


@pytest.mark.parametrize("literal, table", [
    (Domain, DOMAIN_LABELS),
    (AspectRatio, ASPECT_RATIO_LABELS),
    (ImageSize, IMAGE_SIZE_LABELS),
    (InteriorMode, INTERIOR_LABEL_TABLES["transformMode"]),
    (ProductPresetType, PRODUCT_LABEL_TABLES["quickPreset"]),
    (ProductShotType, PRODUCT_LABEL_TABLES["shotType"]),
    (ProductScale, PRODUCT_LABEL_TABLES["scale"]),
    (LifestyleScene, PRODUCT_LABEL_TABLES["lifestyleScene"]),
    (BackgroundStyle, PRODUCT_LABEL_TABLES["background.style"]),
    (SurfaceType, PRODUCT_LABEL_TABLES["surface.type"]),
    (ClothType, PRODUCT_LABEL_TABLES["surface.clothType"]),
    (CameraAngle, PRODUCT_LABEL_TABLES["camera.angle"]),
    (Composition, PRODUCT_LABEL_TABLES["camera.composition"]),
    (LightingStyle, PRODUCT_LABEL_TABLES["lighting.style"]),
    (ShadowType, PRODUCT_LABEL_TABLES["shadow"]),
    (ReflectionType, PRODUCT_LABEL_TABLES["reflection"]),
    (FoodTransformMode, FOOD_LABEL_TABLES["transformMode"]),
    (FoodShotType, FOOD_LABEL_TABLES["shotType"]),
    (FoodLighting, FOOD_LABEL_TABLES["lighting"]),
    (FoodSurface, FOOD_LABEL_TABLES["surface"]),
    (FoodBoost, FOOD_LABEL_TABLES["foodBoost"]),
    (AutoShotType, AUTO_LABEL_TABLES["shotType"]),
    (AutoAngle, AUTO_LABEL_TABLES["angle"]),
    (AutoEnvironment, AUTO_LABEL_TABLES["environment"]),
    (AutoLighting, AUTO_LABEL_TABLES["lighting"]),
])
def test_label_table_covers_every_variant(literal, table):
    """Every declared variant has a label and the table has nothing extra"""
    assert set(get_args(literal)) == set(table)


def test_label_table_is_legality_check():
    table = PRODUCT_LABEL_TABLES["shadow"]

    assert is_valid_option(table, "crisp")
    assert not is_valid_option(table, "fuzzy")
    assert not is_valid_option(table, None)

    with pytest.raises(UnknownOptionError) as exc_info:
        require_option(table, "fuzzy", "shadow")

    assert exc_info.value.field == "shadow"
    assert exc_info.value.status_code == 400


@pytest.mark.parametrize("model, defaults", [
    (GenericOptions, DEFAULT_GENERIC_OPTIONS),
    (InteriorOptions, DEFAULT_INTERIOR_OPTIONS),
    (ProductOptions, DEFAULT_PRODUCT_OPTIONS),
    (FoodOptions, DEFAULT_FOOD_OPTIONS),
    (AutoOptions, DEFAULT_AUTO_OPTIONS),
])
def test_defaults_survive_wire_format(model, defaults):
    """Defaults dump to camelCase and validate back to an equal record"""
    wire = defaults.to_wire()

    assert all("_" not in key for key in wire)
    assert model.model_validate(wire) == defaults


def test_missing_field_is_rejected():
    wire = DEFAULT_PRODUCT_OPTIONS.to_wire()
    del wire["camera"]

    with pytest.raises(ValidationError):
        ProductOptions.model_validate(wire)


def test_unknown_field_is_rejected():
    wire = DEFAULT_FOOD_OPTIONS.to_wire()
    wire["extraCheese"] = True

    with pytest.raises(ValidationError):
        FoodOptions.model_validate(wire)


def test_illegal_enum_value_is_rejected():
    wire = DEFAULT_AUTO_OPTIONS.to_wire()
    wire["lighting"] = "strobe"

    with pytest.raises(ValidationError):
        AutoOptions.model_validate(wire)


@pytest.mark.parametrize("raw, expected", [(-5, 0), (0, 0), (100, 100), (150, 100)])
def test_percent_sliders_are_clamped(raw, expected):
    options = GenericOptions.model_validate({"strength": raw, "strictPreservation": False})
    assert options.strength == expected


def test_saturation_is_clamped_to_its_own_range():
    wire = DEFAULT_FOOD_OPTIONS.to_wire()
    wire["finish"] = {"matteCrisp": 500, "saturation": -45}

    options = FoodOptions.model_validate(wire)

    assert options.finish.matte_crisp == 100
    assert options.finish.saturation == -20


def test_clamping_logs_a_warning(caplog):
    with caplog.at_level("WARNING"):
        GenericOptions.model_validate({"strength": 140, "strictPreservation": True})

    assert "Clamped strength=140" in caplog.text


def test_background_color_must_be_hex():
    wire = DEFAULT_PRODUCT_OPTIONS.to_wire()
    wire["background"]["color"] = "#A1B2C3"
    assert ProductOptions.model_validate(wire).background.color == "#A1B2C3"

    wire["background"]["color"] = "red"
    with pytest.raises(ValidationError):
        ProductOptions.model_validate(wire)


def test_options_are_immutable():
    with pytest.raises(ValidationError):
        DEFAULT_INTERIOR_OPTIONS.strength = 10


def test_snake_case_names_are_accepted():
    options = InteriorOptions(transform_mode="reshoot", strength=70, hdr_windows=True, creative_crop=False)
    assert options.to_wire()["transformMode"] == "reshoot"


@pytest.mark.parametrize("reshoot, styling, expected", [
    (False, False, "retouch"),
    (False, True, "retouch"),
    (True, False, "reshoot"),
    (True, True, "reshoot_styling"),
])
def test_interior_mode_from_flags(reshoot, styling, expected):
    assert interior_mode_from_flags(reshoot, styling) == expected


def test_large_products_have_no_tabletop_surface():
    assert available_surfaces("large") == ["none"]
    assert available_surfaces("extra_large") == ["none"]
    assert "marble" in available_surfaces("small")
    assert len(available_surfaces("medium")) == len(PRODUCT_LABEL_TABLES["surface.type"])
