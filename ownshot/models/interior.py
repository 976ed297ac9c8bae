# FILE: ownshot/models/interior.py
"""
Interior options
"""
from typing import Dict, Literal, Optional

from ownshot.models.common import OptionsModel, Percent


InteriorMode = Literal["retouch", "reshoot", "reshoot_styling"]


class InteriorOptions(OptionsModel):
    """Interior enhancement options"""
    transform_mode: InteriorMode
    strength: Percent
    hdr_windows: bool
    creative_crop: bool
    prop_suggestions: Optional[str] = None


INTERIOR_MODE_LABELS: Dict[str, str] = {
    "retouch": "Retouch (polish only)",
    "reshoot": "Reshoot (geometry + composition)",
    "reshoot_styling": "Reshoot + Styling (full magazine)",
}


def interior_mode_from_flags(magazine_reshoot: bool, allow_styling: bool) -> str:
    """Map the two-checkbox form (reshoot, styling) onto a transform mode"""
    if not magazine_reshoot:
        return "retouch"
    if not allow_styling:
        return "reshoot"
    return "reshoot_styling"


DEFAULT_INTERIOR_OPTIONS = InteriorOptions.model_validate({
    "transformMode": "retouch",
    "strength": 50,
    "hdrWindows": False,
    "creativeCrop": False,
})

INTERIOR_LABEL_TABLES = {
    "transformMode": INTERIOR_MODE_LABELS,
}
