"""
Hugging Face Inference Providers router for image generation.
OpenAI-compatible /images/generations endpoint; answers with a URL or inline base64.
"""
import httpx

from app.services.image_generation.base import (
    FormatError,
    ImageGenerationProvider,
    ImageGenerationRequest,
    ImageGenerationResponse,
    ProviderName,
    UpstreamError,
    encode_image,
)


class HuggingFaceProvider(ImageGenerationProvider):
    """Hugging Face inference router provider."""

    name = ProviderName.HUGGINGFACE
    label = "Hugging Face"
    requires_api_key = True

    def __init__(self, config: dict):
        super().__init__(config)
        self.api_url = config.get("api_url", "https://router.huggingface.co/v1").rstrip("/")
        self.model = config.get("model", "black-forest-labs/FLUX.1-schnell")

    async def generate(self, request: ImageGenerationRequest) -> ImageGenerationResponse:
        """Generate image using the Hugging Face router."""
        self.check_credentials(request)

        url = f"{self.api_url}/images/generations"
        headers = {
            "Authorization": f"Bearer {request.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": self.model,
            "prompt": request.prompt,
            "n": 1,
            "size": request.size or self.size,
        }

        async with self._http_client() as client:
            try:
                response = await client.post(url, headers=headers, json=payload)
            except httpx.HTTPError as e:
                raise self._transport_error(e) from e

            if not response.is_success:
                raise UpstreamError(
                    f"Hugging Face API error: {response.status_code} - {response.text}",
                    provider=self.name.value,
                    status_code=response.status_code,
                    body=response.text,
                )

            image = self._first_image(response)

            # URL wins over inline data when both are present
            if image.get("url"):
                content = await self._download(client, image["url"])
                return ImageGenerationResponse(
                    image_b64=encode_image(content),
                    provider=self.name.value,
                    model=self.model,
                    image_url=image["url"],
                )

        if image.get("b64_json") and isinstance(image["b64_json"], str):
            return ImageGenerationResponse(
                image_b64=image["b64_json"],
                provider=self.name.value,
                model=self.model,
            )

        raise FormatError(
            "Unexpected response format from Hugging Face API", provider=self.name.value
        )

    def _first_image(self, response: httpx.Response) -> dict:
        try:
            data = response.json()
        except ValueError:
            data = None
        items = data.get("data") if isinstance(data, dict) else None
        if not isinstance(items, list) or not items or not isinstance(items[0], dict):
            raise FormatError(
                "Unexpected response format from Hugging Face API", provider=self.name.value
            )
        return items[0]
