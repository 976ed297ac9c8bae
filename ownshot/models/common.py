# FILE: ownshot/models/common.py
"""
Shared option vocabulary: domains, output formats, slider types, label tables
"""
import logging
from typing import Annotated, Any, Callable, Dict, Literal, Mapping

from pydantic import AfterValidator, BaseModel, ConfigDict, ValidationInfo
from pydantic.alias_generators import to_camel

from ownshot.errors import UnknownOptionError

logger = logging.getLogger(__name__)


Domain = Literal["interior", "product", "food", "automotive", "people", "general"]

AspectRatio = Literal["match", "1:1", "4:5", "16:9", "3:2", "9:16"]

ImageSize = Literal["1K", "2K", "4K"]

DEFAULT_ASPECT_RATIO: AspectRatio = "match"
DEFAULT_IMAGE_SIZE: ImageSize = "2K"


DOMAIN_LABELS: Dict[str, str] = {
    "interior": "Interior",
    "product": "Product",
    "food": "Food",
    "automotive": "Automotive",
    "people": "People",
    "general": "General",
}

DOMAIN_DESCRIPTIONS: Dict[str, str] = {
    "interior": "Magazine-quality matte film finish for architectural & room photos",
    "product": "Ideal for e-commerce and catalog photography",
    "food": "Menu, delivery and advertising food photography",
    "automotive": "Studio, showroom and location vehicle photography",
    "people": "Portrait and lifestyle photography enhancement",
    "general": "Balanced enhancement for any image type",
}

ASPECT_RATIO_LABELS: Dict[str, str] = {
    "match": "Match Original",
    "1:1": "1:1 (Square)",
    "4:5": "4:5 (Portrait)",
    "16:9": "16:9 (Widescreen)",
    "3:2": "3:2 (Classic)",
    "9:16": "9:16 (Vertical)",
}

IMAGE_SIZE_LABELS: Dict[str, str] = {
    "1K": "1K (1024px)",
    "2K": "2K (2048px)",
    "4K": "4K (4096px)",
}


def is_valid_option(table: Mapping[str, Any], value: Any) -> bool:
    """A value is legal exactly when its label table has an entry for it"""
    return isinstance(value, str) and value in table


def require_option(table: Mapping[str, Any], value: Any, field: str) -> Any:
    """Return the table entry for value, or raise UnknownOptionError"""
    if not is_valid_option(table, value):
        raise UnknownOptionError(field, value)
    return table[value]


def _clamp_to(low: int, high: int) -> Callable[[int, ValidationInfo], int]:
    def clamp(value: int, info: ValidationInfo) -> int:
        clamped = max(low, min(high, value))
        if clamped != value:
            logger.warning(f"Clamped {info.field_name}={value} into [{low}, {high}]")
        return clamped
    return clamp


# Sliders are clamped once, here, and trusted by the builders
Percent = Annotated[int, AfterValidator(_clamp_to(0, 100))]
Saturation = Annotated[int, AfterValidator(_clamp_to(-20, 20))]


class OptionsModel(BaseModel):
    """Base for every options record: camelCase on the wire, no unknown fields"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True
    )

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
