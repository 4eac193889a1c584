"""
Pollinations provider: unauthenticated GET that returns image bytes directly.
"""
import time
from urllib.parse import quote

import httpx

from app.services.image_generation.base import (
    ImageGenerationProvider,
    ImageGenerationRequest,
    ImageGenerationResponse,
    ProviderName,
    UpstreamError,
    encode_image,
)


class PollinationsProvider(ImageGenerationProvider):
    """Pollinations image endpoint provider."""

    name = ProviderName.POLLINATIONS
    label = "Pollinations"
    requires_api_key = False

    def __init__(self, config: dict):
        super().__init__(config)
        self.api_url = config.get("api_url", "https://image.pollinations.ai").rstrip("/")

    def build_url(self, prompt: str) -> str:
        """Image URL for a prompt; seed is the current time in ms so results are never cached."""
        width, height = self.size.split("x")
        encoded = quote(prompt, safe="!~*'()")
        seed = time.time_ns() // 1_000_000
        return (
            f"{self.api_url}/prompt/{encoded}"
            f"?width={width}&height={height}&nologo=true&seed={seed}"
        )

    async def generate(self, request: ImageGenerationRequest) -> ImageGenerationResponse:
        url = self.build_url(request.prompt)

        async with self._http_client() as client:
            try:
                response = await client.get(url)
            except httpx.HTTPError as e:
                raise self._transport_error(e) from e

            if not response.is_success:
                raise UpstreamError(
                    f"Pollinations API error: {response.status_code}",
                    provider=self.name.value,
                    status_code=response.status_code,
                )
            content = response.content

        return ImageGenerationResponse(
            image_b64=encode_image(content),
            provider=self.name.value,
            image_url=url,
        )
