# FILE: ownshot/prompts/dispatch.py
"""
Domain dispatch: options model, defaults, label tables and builder per domain
"""
import random
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Type

from ownshot.errors import OptionsValidationError, UnsupportedDomainError
from ownshot.models.automotive import AUTO_LABEL_TABLES, DEFAULT_AUTO_OPTIONS, AutoOptions
from ownshot.models.enhance import DomainOptions
from ownshot.models.food import DEFAULT_FOOD_OPTIONS, FOOD_LABEL_TABLES, FoodOptions
from ownshot.models.generic import DEFAULT_GENERIC_OPTIONS, GenericOptions
from ownshot.models.interior import DEFAULT_INTERIOR_OPTIONS, INTERIOR_LABEL_TABLES, InteriorOptions
from ownshot.models.product import DEFAULT_PRODUCT_OPTIONS, PRODUCT_LABEL_TABLES, ProductOptions
from ownshot.prompts.automotive import build_auto_prompt
from ownshot.prompts.food import build_food_prompt
from ownshot.prompts.generic import build_generic_prompt
from ownshot.prompts.interior import build_interior_prompt
from ownshot.prompts.product import build_product_prompt

Builder = Callable[[str, Any, Optional[random.Random]], str]


@dataclass(frozen=True)
class DomainSpec:
    options_model: Type[DomainOptions]
    defaults: DomainOptions
    label_tables: Dict[str, Dict[str, Any]]
    build: Builder


DOMAINS: Dict[str, DomainSpec] = {
    "interior": DomainSpec(
        InteriorOptions,
        DEFAULT_INTERIOR_OPTIONS,
        INTERIOR_LABEL_TABLES,
        lambda domain, options, rng: build_interior_prompt(options),
    ),
    "product": DomainSpec(
        ProductOptions,
        DEFAULT_PRODUCT_OPTIONS,
        PRODUCT_LABEL_TABLES,
        lambda domain, options, rng: build_product_prompt(options, rng),
    ),
    "food": DomainSpec(
        FoodOptions,
        DEFAULT_FOOD_OPTIONS,
        FOOD_LABEL_TABLES,
        lambda domain, options, rng: build_food_prompt(options),
    ),
    "automotive": DomainSpec(
        AutoOptions,
        DEFAULT_AUTO_OPTIONS,
        AUTO_LABEL_TABLES,
        lambda domain, options, rng: build_auto_prompt(options),
    ),
    # people and general share one builder, keyed by preset
    "people": DomainSpec(
        GenericOptions,
        DEFAULT_GENERIC_OPTIONS,
        {},
        lambda domain, options, rng: build_generic_prompt(domain, options),
    ),
    "general": DomainSpec(
        GenericOptions,
        DEFAULT_GENERIC_OPTIONS,
        {},
        lambda domain, options, rng: build_generic_prompt(domain, options),
    ),
}


def get_domain_spec(domain: str) -> DomainSpec:
    spec = DOMAINS.get(domain) if isinstance(domain, str) else None
    if spec is None:
        raise UnsupportedDomainError(str(domain))
    return spec


def build_prompt(domain: str, options: DomainOptions, rng: Optional[random.Random] = None) -> str:
    """
    Build the prompt for a domain

    The options record must be the model registered for the domain; a food
    record sent with domain "product" is rejected rather than coerced.
    """
    spec = get_domain_spec(domain)

    if not isinstance(options, spec.options_model):
        raise OptionsValidationError(
            f"Options for domain '{domain}' must be {spec.options_model.__name__}, "
            f"got {type(options).__name__}"
        )

    return spec.build(domain, options, rng)
