"""
Image generation service with multi-provider support.
"""
from .base import (
    DATA_URI_PREFIX,
    FormatError,
    ImageGenerationError,
    ImageGenerationProvider,
    ImageGenerationRequest,
    ImageGenerationResponse,
    ProviderName,
    UpstreamError,
    ValidationError,
)
from .factory import ImageProviderFactory
from .runner import run_generation
from .failure_types import FailureType, classify_failure

__all__ = [
    "DATA_URI_PREFIX",
    "FormatError",
    "ImageGenerationError",
    "ImageGenerationProvider",
    "ImageGenerationRequest",
    "ImageGenerationResponse",
    "ProviderName",
    "UpstreamError",
    "ValidationError",
    "ImageProviderFactory",
    "run_generation",
    "FailureType",
    "classify_failure",
]
