# FILE: ownshot/routes/options.py
"""
Option vocabulary endpoints: labels, defaults, product presets and surfaces
"""
import logging
from typing import Any, Dict
from fastapi import APIRouter, Query
from pydantic import BaseModel

from ownshot.models.common import (
    ASPECT_RATIO_LABELS,
    DEFAULT_ASPECT_RATIO,
    DEFAULT_IMAGE_SIZE,
    DOMAIN_DESCRIPTIONS,
    DOMAIN_LABELS,
    IMAGE_SIZE_LABELS,
    require_option,
)
from ownshot.models.enhance import DomainOptionsInfo, OptionsCatalog, PresetInfo, PresetList
from ownshot.models.product import QUICK_PRESET_LABELS, SCALE_LABELS, SURFACE_TYPE_LABELS, available_surfaces
from ownshot.prompts.dispatch import get_domain_spec
from ownshot.services.presets import PRESET_DESCRIPTIONS, apply_product_preset

logger = logging.getLogger(__name__)
router = APIRouter()


def _plain_labels(table: Dict[str, Any]) -> Dict[str, Any]:
    return {
        key: value.model_dump() if isinstance(value, BaseModel) else value
        for key, value in table.items()
    }


@router.get("", response_model=OptionsCatalog)
async def list_options():
    """Domains, aspect ratios and image sizes"""
    return OptionsCatalog(
        domains=DOMAIN_LABELS,
        domain_descriptions=DOMAIN_DESCRIPTIONS,
        aspect_ratios=ASPECT_RATIO_LABELS,
        image_sizes=IMAGE_SIZE_LABELS,
        default_aspect_ratio=DEFAULT_ASPECT_RATIO,
        default_image_size=DEFAULT_IMAGE_SIZE
    )


@router.get("/product/presets", response_model=PresetList)
async def list_product_presets():
    """Product quick presets"""
    return PresetList(presets=[
        PresetInfo(name=name, label=label, description=PRESET_DESCRIPTIONS[name])
        for name, label in QUICK_PRESET_LABELS.items()
    ])


@router.get("/product/presets/{name}")
async def get_product_preset(name: str):
    """Complete product options for a quick preset"""
    options = apply_product_preset(name)
    return {
        "name": name,
        "label": QUICK_PRESET_LABELS[name],
        "description": PRESET_DESCRIPTIONS[name],
        "options": options.to_wire()
    }


@router.get("/product/surfaces")
async def get_product_surfaces(scale: str = Query("medium")):
    """Surfaces usable at a product scale"""
    require_option(SCALE_LABELS, scale, "scale")
    return {
        "scale": scale,
        "surfaces": [
            {"value": surface, "label": SURFACE_TYPE_LABELS[surface]}
            for surface in available_surfaces(scale)
        ]
    }


@router.get("/{domain}", response_model=DomainOptionsInfo)
async def get_domain_options(domain: str):
    """Defaults and label tables for one domain"""
    spec = get_domain_spec(domain)
    return DomainOptionsInfo(
        domain=domain,
        defaults=spec.defaults.to_wire(),
        labels={field: _plain_labels(table) for field, table in spec.label_tables.items()}
    )
