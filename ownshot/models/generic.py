# FILE: ownshot/models/generic.py
"""
Generic options (people and general domains)
"""
from typing import Dict, List, Literal

from pydantic import BaseModel

from ownshot.models.common import OptionsModel, Percent


GenericPreset = Literal["people", "general"]


class GenericOptions(OptionsModel):
    """Generic enhancement options"""
    strength: Percent
    strict_preservation: bool


class FocusDefinition(BaseModel):
    """What a generic preset concentrates on"""
    focus_areas: List[str]
    style_hints: List[str]


GENERIC_FOCUS: Dict[str, FocusDefinition] = {
    "people": FocusDefinition(
        focus_areas=[
            "skin tone accuracy",
            "facial feature preservation",
            "eye clarity",
            "hair detail",
        ],
        style_hints=[
            "maintain natural skin texture",
            "enhance eye catchlights",
            "preserve facial expressions exactly",
        ],
    ),
    "general": FocusDefinition(
        focus_areas=[
            "overall sharpness",
            "color vibrancy",
            "contrast balance",
            "noise reduction",
        ],
        style_hints=[
            "balanced enhancement across all elements",
            "natural-looking improvements",
            "preserve original composition",
        ],
    ),
}

DEFAULT_GENERIC_OPTIONS = GenericOptions.model_validate({
    "strength": 60,
    "strictPreservation": False,
})

GENERIC_PRESET_LABELS: Dict[str, str] = {
    "people": "People",
    "general": "General",
}
