# FILE: ownshot/services/validation.py
"""
Inbound validation: uploaded image checks and options parsing
"""
import json
import logging
from typing import Optional

from pydantic import ValidationError

from ownshot.config import Settings, get_settings
from ownshot.errors import ImageValidationError, OptionsValidationError
from ownshot.models.enhance import DomainOptions
from ownshot.prompts.dispatch import get_domain_spec

logger = logging.getLogger(__name__)

MIME_TYPE_NAMES = {
    "image/png": "PNG",
    "image/jpeg": "JPEG",
    "image/webp": "WebP",
}


def validate_image(content_type: Optional[str], size: int, settings: Optional[Settings] = None) -> None:
    """
    Check an upload against the mime allow-list and size limit

    Raises ImageValidationError; runs before any prompt is built.
    """
    settings = settings or get_settings()

    if content_type not in settings.allowed_mime_types:
        allowed = ", ".join(MIME_TYPE_NAMES.get(t, t) for t in settings.allowed_mime_types)
        raise ImageValidationError(f"Invalid file type: {content_type}. Allowed types: {allowed}")

    if size > settings.max_upload_bytes:
        size_mb = size / (1024 * 1024)
        raise ImageValidationError(
            f"File too large: {size_mb:.2f}MB. Maximum size: {settings.max_upload_mb}MB"
        )


def _summarize(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"]) or "options"
        problems.append(f"{location}: {item['msg']}")
    return "; ".join(problems)


def parse_options_data(domain: str, data: object) -> DomainOptions:
    """Validate an already-decoded options object for a domain"""
    spec = get_domain_spec(domain)

    if not isinstance(data, dict):
        raise OptionsValidationError(f"Options for '{domain}' must be a JSON object")

    try:
        return spec.options_model.model_validate(data)
    except ValidationError as e:
        raise OptionsValidationError(f"Invalid options for '{domain}': {_summarize(e)}") from e


def parse_options(domain: str, raw_json: Optional[str]) -> DomainOptions:
    """
    Parse the options JSON string sent with an upload

    There is no fallback to defaults: a missing, malformed or incomplete
    payload is an error.
    """
    get_domain_spec(domain)

    if raw_json is None or not raw_json.strip():
        raise OptionsValidationError(f"Options are required for '{domain}'")

    try:
        data = json.loads(raw_json)
    except json.JSONDecodeError as e:
        raise OptionsValidationError(f"Options are not valid JSON: {e.msg}") from e

    return parse_options_data(domain, data)
