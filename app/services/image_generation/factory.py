"""
Factory for creating image generation providers based on configuration.
"""
import logging

from app.services.image_generation.base import ImageGenerationProvider, ProviderName
from app.services.image_generation.providers.huggingface import HuggingFaceProvider
from app.services.image_generation.providers.openai import OpenAIProvider
from app.services.image_generation.providers.pollinations import PollinationsProvider

logger = logging.getLogger(__name__)


def _get_providers_registry() -> dict[ProviderName, type[ImageGenerationProvider]]:
    """Build provider registry; every ProviderName member must have an adapter."""
    reg: dict[ProviderName, type[ImageGenerationProvider]] = {
        ProviderName.POLLINATIONS: PollinationsProvider,
        ProviderName.HUGGINGFACE: HuggingFaceProvider,
        ProviderName.OPENAI: OpenAIProvider,
    }
    missing = set(ProviderName) - set(reg)
    if missing:
        raise RuntimeError(f"No adapter registered for: {sorted(p.value for p in missing)}")
    return reg


class ImageProviderFactory:
    """Factory for creating image generation providers."""

    PROVIDERS = _get_providers_registry()

    @classmethod
    def create(cls, provider_name: ProviderName | str, config: dict) -> ImageGenerationProvider:
        """
        Create provider instance by name.

        Args:
            provider_name: ProviderName member or its string value
            config: Provider-specific configuration dict

        Returns:
            Initialized provider instance

        Raises:
            ValidationError: If provider name is unknown
        """
        if not isinstance(provider_name, ProviderName):
            provider_name = ProviderName.parse(provider_name)
        provider_class = cls.PROVIDERS[provider_name]
        logger.debug("Creating image provider", extra={"provider": provider_name.value})
        return provider_class(config)

    @classmethod
    def create_from_settings(cls, settings, provider_name: ProviderName | str) -> ImageGenerationProvider:
        """
        Create provider from application settings.

        Args:
            settings: Application settings object
            provider_name: Provider selected by the caller

        Returns:
            Initialized provider instance
        """
        if not isinstance(provider_name, ProviderName):
            provider_name = ProviderName.parse(provider_name)

        config = {
            "timeout": settings.http_client_timeout,
            "size": settings.image_size,
        }
        if provider_name is ProviderName.POLLINATIONS:
            config["api_url"] = settings.pollinations_api_url
        elif provider_name is ProviderName.HUGGINGFACE:
            config["api_url"] = settings.huggingface_api_url
            config["model"] = settings.huggingface_image_model
        elif provider_name is ProviderName.OPENAI:
            config["api_url"] = settings.openai_api_url
            config["model"] = settings.openai_image_model
            config["quality"] = settings.openai_image_quality

        return cls.create(provider_name, config)

    @classmethod
    def get_available_providers(cls) -> list[str]:
        """Get list of all available provider names."""
        return [p.value for p in cls.PROVIDERS]
