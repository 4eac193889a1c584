"""
Base classes and types for image generation providers.
Used by factory, runner and all providers (pollinations, huggingface, openai).
"""
import base64
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

import httpx


DATA_URI_PREFIX = "data:image/png;base64,"


class ImageGenerationError(Exception):
    """Base error for a failed generation request."""

    def __init__(self, message: str, provider: str | None = None):
        super().__init__(message)
        self.message = message
        self.provider = provider


class ValidationError(ImageGenerationError):
    """Missing or invalid input; raised before any provider is called."""

    def __init__(self, message: str, provider: str | None = None, detail: str | None = None):
        super().__init__(message, provider)
        self.detail = detail or message


class UpstreamError(ImageGenerationError):
    """Provider answered with a non-success status or could not be reached."""

    def __init__(
        self,
        message: str,
        provider: str | None = None,
        status_code: int | None = None,
        body: str | None = None,
    ):
        super().__init__(message, provider)
        self.status_code = status_code
        self.body = body


class FormatError(ImageGenerationError):
    """Provider answered with success but the payload has an unexpected shape."""


class ProviderName(str, Enum):
    """Closed set of supported providers."""

    POLLINATIONS = "pollinations"
    HUGGINGFACE = "huggingface"
    OPENAI = "openai"

    @classmethod
    def parse(cls, value: str | None) -> "ProviderName":
        """Map a provider string to a member by exact value; ValidationError otherwise."""
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(
                "Unknown provider",
                provider=value,
                detail=f"Unknown provider: {value!r}. Available providers: "
                + ", ".join(p.value for p in cls),
            ) from None


@dataclass
class ImageGenerationRequest:
    """Request for image generation."""
    prompt: str
    # Capability token for the selected provider; kept out of repr so it never reaches logs
    api_key: str | None = field(default=None, repr=False)
    size: str | None = None


@dataclass
class ImageGenerationResponse:
    """Normalized response from image generation."""
    image_b64: str
    provider: str
    model: str | None = None
    image_url: str | None = None

    @property
    def data_uri(self) -> str:
        return f"{DATA_URI_PREFIX}{self.image_b64}"


def encode_image(content: bytes) -> str:
    """Base64-encode raw image bytes."""
    return base64.b64encode(content).decode("ascii")


class ImageGenerationProvider(ABC):
    """Base class for image generation providers."""

    name: ProviderName
    label: str
    requires_api_key: bool = False

    def __init__(self, config: dict) -> None:
        self.config = config
        self.timeout = config.get("timeout")
        self.size = config.get("size", "1024x1024")

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)

    async def _download(self, client: httpx.AsyncClient, url: str) -> bytes:
        """Fetch generated image bytes from a provider-hosted URL."""
        try:
            response = await client.get(url)
        except httpx.HTTPError as e:
            raise UpstreamError(
                f"{self.label} image download failed: {e}", provider=self.name.value
            ) from e
        if not response.is_success:
            raise UpstreamError(
                f"{self.label} image download error: {response.status_code}",
                provider=self.name.value,
                status_code=response.status_code,
            )
        return response.content

    def _transport_error(self, exc: Exception) -> UpstreamError:
        return UpstreamError(f"{self.label} API request failed: {exc}", provider=self.name.value)

    def check_credentials(self, request: ImageGenerationRequest) -> None:
        """Raise ValidationError when a required credential is absent."""
        if self.requires_api_key and not request.api_key:
            raise ValidationError(f"{self.label} API key required", provider=self.name.value)

    @abstractmethod
    async def generate(self, request: ImageGenerationRequest) -> ImageGenerationResponse:
        """Generate image from request. Raises UpstreamError or FormatError on failure."""
        pass
