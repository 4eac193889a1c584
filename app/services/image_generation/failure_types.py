"""
Failure normalization for provider calls.
Classifies adapter errors for structured logging; nothing is retried.
"""
from enum import Enum

from app.services.image_generation.base import (
    FormatError,
    ImageGenerationError,
    UpstreamError,
    ValidationError,
)


class FailureType(str, Enum):
    """Formal failure types."""

    VALIDATION = "validation"  # bad input, provider never called
    UPSTREAM_STATUS = "upstream_status"  # provider answered non-2xx
    TRANSPORT = "transport"  # connection / DNS / protocol failure
    FORMAT = "format"  # 2xx with an unexpected payload
    INTERNAL = "internal"


def classify_failure(exc: Exception) -> FailureType:
    """Map an exception raised during generation to a FailureType."""
    if isinstance(exc, ValidationError):
        return FailureType.VALIDATION
    if isinstance(exc, UpstreamError):
        if exc.status_code is None:
            return FailureType.TRANSPORT
        return FailureType.UPSTREAM_STATUS
    if isinstance(exc, FormatError):
        return FailureType.FORMAT
    if isinstance(exc, ImageGenerationError):
        return FailureType.UPSTREAM_STATUS
    return FailureType.INTERNAL
