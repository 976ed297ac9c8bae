# FILE: ownshot/errors.py
"""
Error taxonomy for the enhancement pipeline

Validation and dispatch errors are raised before any external call.
Boundary errors wrap a failed image-generation round trip.
"""
from typing import Optional


class EnhanceError(Exception):
    """Base class for every client-visible failure"""

    category = "enhancement_error"
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ImageValidationError(EnhanceError):
    """Uploaded file has the wrong type or size"""

    category = "invalid_image"
    status_code = 400


class OptionsValidationError(EnhanceError):
    """Options payload is malformed, incomplete, or for another domain"""

    category = "invalid_options"
    status_code = 400


class UnsupportedDomainError(EnhanceError):
    """Domain tag has no builder"""

    category = "unsupported_domain"
    status_code = 400

    def __init__(self, domain: str):
        super().__init__(f"Unsupported domain: '{domain}'")
        self.domain = domain


class UnknownOptionError(EnhanceError, ValueError):
    """Enum value outside its label table"""

    category = "unknown_option"
    status_code = 400

    def __init__(self, field: str, value: object):
        super().__init__(f"Unknown option for {field}: {value!r}")
        self.field = field
        self.value = value


class ImageGenerationError(EnhanceError):
    """The image-generation boundary failed or returned no image"""

    category = "enhancement_failed"
    status_code = 502

    def __init__(self, detail: Optional[str] = None):
        super().__init__("Enhancement failed")
        self.detail = detail or "Unknown error"


class ProviderConfigurationError(EnhanceError):
    """No image provider can be built from the current settings"""

    category = "provider_unavailable"
    status_code = 503
