# FILE: ownshot/models/enhance.py
"""
Enhancement request/response models
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from ownshot.models.automotive import AutoOptions
from ownshot.models.common import AspectRatio, ImageSize
from ownshot.models.food import FoodOptions
from ownshot.models.generic import GenericOptions
from ownshot.models.interior import InteriorOptions
from ownshot.models.product import ProductOptions


DomainOptions = Union[GenericOptions, InteriorOptions, ProductOptions, FoodOptions, AutoOptions]


@dataclass(frozen=True)
class EnhanceRequest:
    """One validated enhancement request"""
    image_data: bytes
    mime_type: str
    domain: str
    options: DomainOptions
    aspect_ratio: str = "match"
    image_size: str = "2K"


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of a single image-generation round trip"""
    success: bool
    image_data: Optional[bytes] = None
    mime_type: Optional[str] = None
    error: Optional[str] = None


@dataclass(frozen=True)
class EnhanceResult:
    """Successful enhancement"""
    image_data: bytes
    mime_type: str
    prompt: str
    correlation_id: str


class ErrorResponse(BaseModel):
    """Error payload returned for every failed request"""
    error: str
    message: str


class PromptPreviewRequest(BaseModel):
    """Prompt preview request"""
    domain: str
    options: Dict[str, Any]
    max_length: int = Field(default=200, ge=10, le=20000, alias="maxLength")

    model_config = {"populate_by_name": True}


class PromptPreviewResponse(BaseModel):
    """Prompt preview response"""
    domain: str
    prompt: str
    preview: str
    length: int


class OptionsCatalog(BaseModel):
    """Top-level vocabulary for the configure screen"""
    domains: Dict[str, str]
    domain_descriptions: Dict[str, str]
    aspect_ratios: Dict[str, str]
    image_sizes: Dict[str, str]
    default_aspect_ratio: AspectRatio
    default_image_size: ImageSize


class DomainOptionsInfo(BaseModel):
    """Defaults and label tables for one domain"""
    domain: str
    defaults: Dict[str, Any]
    labels: Dict[str, Dict[str, Any]]


class PresetInfo(BaseModel):
    name: str
    label: str
    description: str


class PresetList(BaseModel):
    presets: List[PresetInfo]
