# FILE: ownshot/services/correlation.py
"""
Correlation ID utilities
"""
import uuid
from typing import Optional

CORRELATION_HEADER = "X-Correlation-ID"


def generate_correlation_id() -> str:
    """Generate unique correlation ID"""
    return str(uuid.uuid4())


def resolve_correlation_id(incoming: Optional[str]) -> str:
    """Reuse a caller-supplied id, otherwise mint one"""
    if incoming and incoming.strip():
        return incoming.strip()[:128]
    return generate_correlation_id()
