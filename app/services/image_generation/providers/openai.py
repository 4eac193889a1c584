"""
OpenAI DALL-E provider for image generation.
"""
from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from app.services.image_generation.base import (
    FormatError,
    ImageGenerationProvider,
    ImageGenerationRequest,
    ImageGenerationResponse,
    ProviderName,
    UpstreamError,
    encode_image,
)


class OpenAIProvider(ImageGenerationProvider):
    """OpenAI DALL-E image generation provider."""

    name = ProviderName.OPENAI
    label = "OpenAI"
    requires_api_key = True

    def __init__(self, config: dict):
        super().__init__(config)
        self.api_url = config.get("api_url", "https://api.openai.com/v1")
        self.model = config.get("model", "dall-e-3")
        self.quality = config.get("quality", "standard")

    def _client(self, api_key: str) -> AsyncOpenAI:
        # One client per call: the key belongs to the caller, not to the service.
        # Requests go through our own httpx client; closing the SDK client closes it.
        return AsyncOpenAI(
            api_key=api_key,
            base_url=self.api_url,
            timeout=self.timeout,
            max_retries=0,
            http_client=self._http_client(),
        )

    async def generate(self, request: ImageGenerationRequest) -> ImageGenerationResponse:
        """
        Generate image using OpenAI API.

        dall-e-3 only returns a short-lived URL, so the image is downloaded
        and re-encoded as base64.
        """
        self.check_credentials(request)

        async with self._client(request.api_key) as client:
            try:
                response = await client.images.generate(
                    model=self.model,
                    prompt=request.prompt,
                    n=1,
                    size=request.size or self.size,
                    quality=self.quality,
                )
            except APIStatusError as e:
                body = e.response.text
                raise UpstreamError(
                    f"OpenAI API error: {e.status_code} - {body}",
                    provider=self.name.value,
                    status_code=e.status_code,
                    body=body,
                ) from e
            except APIConnectionError as e:
                raise self._transport_error(e) from e

        image_url = response.data[0].url if response.data else None
        if not image_url:
            raise FormatError("Unexpected response format from OpenAI API", provider=self.name.value)

        async with self._http_client() as http_client:
            content = await self._download(http_client, image_url)

        return ImageGenerationResponse(
            image_b64=encode_image(content),
            provider=self.name.value,
            model=self.model,
            image_url=image_url,
        )
