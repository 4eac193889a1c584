"""
Generation runner: single provider call with failure classification and observability.
No retry budget: every failure is surfaced to the caller on the first attempt.
"""
import logging
import time

from app.core.logging import prompt_preview
from app.services.image_generation.base import (
    ImageGenerationProvider,
    ImageGenerationRequest,
    ImageGenerationResponse,
)
from app.services.image_generation.failure_types import classify_failure

logger = logging.getLogger(__name__)


async def run_generation(
    provider: ImageGenerationProvider,
    request: ImageGenerationRequest,
) -> ImageGenerationResponse:
    """Await the provider once and log the outcome. Re-raises any failure."""
    provider_name = provider.name.value
    logger.info(
        "image_generation_started",
        extra={"provider": provider_name, "prompt_preview": prompt_preview(request.prompt)},
    )
    started = time.perf_counter()
    try:
        result = await provider.generate(request)
    except Exception as e:
        failure_type = classify_failure(e)
        logger.warning(
            "image_generation_failed",
            extra={
                "provider": provider_name,
                "failure_type": failure_type.value,
                "upstream_status": getattr(e, "status_code", None),
                "error": type(e).__name__,
                "latency_ms": _elapsed_ms(started),
            },
        )
        raise

    logger.info(
        "image_generation_succeeded",
        extra={"provider": provider_name, "latency_ms": _elapsed_ms(started)},
    )
    return result


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)
