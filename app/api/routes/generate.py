"""
Generation dispatcher: validates the request, picks the provider adapter and
returns its image as a data URI.
"""

from fastapi import APIRouter

from app.core.config import settings
from app.schemas.generation import ErrorResponse, GenerateRequest, GenerateResponse
from app.services.image_generation import (
    ImageGenerationRequest,
    ImageProviderFactory,
    ProviderName,
    ValidationError,
    run_generation,
)

router = APIRouter(prefix="/api", tags=["generation"])


@router.post(
    "/generate",
    response_model=GenerateResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate(body: GenerateRequest) -> GenerateResponse:
    """
    Generate one image with the selected provider.

    Validation failures (400) happen before any outbound call; provider
    failures are mapped to 500 by the exception handlers in app.api.errors.
    """
    if not body.prompt or not body.prompt.strip():
        raise ValidationError("Prompt is required", provider=body.provider)

    provider_name = ProviderName.parse(body.provider)
    provider = ImageProviderFactory.create_from_settings(settings, provider_name)
    request = ImageGenerationRequest(prompt=body.prompt, api_key=body.api_key)
    provider.check_credentials(request)

    result = await run_generation(provider, request)

    return GenerateResponse(
        success=True,
        image_data=result.data_uri,
        provider=provider_name.value,
    )
