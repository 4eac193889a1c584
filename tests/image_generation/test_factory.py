"""Tests for provider registry, failure classification and the generation runner."""
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.services.image_generation import (
    FailureType,
    FormatError,
    ImageGenerationRequest,
    ImageGenerationResponse,
    ImageProviderFactory,
    ProviderName,
    UpstreamError,
    ValidationError,
    classify_failure,
    run_generation,
)
from app.services.image_generation.providers.huggingface import HuggingFaceProvider
from app.services.image_generation.providers.openai import OpenAIProvider
from app.services.image_generation.providers.pollinations import PollinationsProvider


def test_registry_covers_every_provider():
    assert set(ImageProviderFactory.PROVIDERS) == set(ProviderName)
    assert ImageProviderFactory.get_available_providers() == ["pollinations", "huggingface", "openai"]


@pytest.mark.parametrize(
    "name, cls, needs_key",
    [
        ("pollinations", PollinationsProvider, False),
        ("huggingface", HuggingFaceProvider, True),
        ("openai", OpenAIProvider, True),
    ],
)
def test_create_by_name(name, cls, needs_key):
    provider = ImageProviderFactory.create(name, {})
    assert isinstance(provider, cls)
    assert provider.requires_api_key is needs_key


@pytest.mark.parametrize("name", ["OpenAI", " pollinations", "HUGGINGFACE", ""])
def test_create_requires_exact_provider_name(name):
    with pytest.raises(ValidationError) as exc_info:
        ImageProviderFactory.create(name, {})
    assert exc_info.value.provider == name


def test_create_unknown_provider_raises_validation_error():
    with pytest.raises(ValidationError) as exc_info:
        ImageProviderFactory.create("midjourney", {})
    assert exc_info.value.message == "Unknown provider"
    assert "pollinations, huggingface, openai" in exc_info.value.detail


def test_create_from_settings_passes_provider_config():
    settings = MagicMock()
    settings.http_client_timeout = None
    settings.image_size = "1024x1024"
    settings.openai_api_url = "https://openai.internal/v1"
    settings.openai_image_model = "dall-e-3"
    settings.openai_image_quality = "standard"

    provider = ImageProviderFactory.create_from_settings(settings, ProviderName.OPENAI)

    assert isinstance(provider, OpenAIProvider)
    assert provider.api_url == "https://openai.internal/v1"
    assert provider.model == "dall-e-3"
    assert provider.timeout is None


def test_request_repr_hides_api_key():
    request = ImageGenerationRequest(prompt="a cat", api_key="sk-secret")
    assert "sk-secret" not in repr(request)


@pytest.mark.parametrize(
    "exc, expected",
    [
        (ValidationError("Prompt is required"), FailureType.VALIDATION),
        (UpstreamError("boom", status_code=401), FailureType.UPSTREAM_STATUS),
        (UpstreamError("refused"), FailureType.TRANSPORT),
        (FormatError("odd payload"), FailureType.FORMAT),
        (RuntimeError("bug"), FailureType.INTERNAL),
    ],
)
def test_classify_failure(exc, expected):
    assert classify_failure(exc) is expected


def _fake_provider(generate: AsyncMock) -> MagicMock:
    provider = MagicMock()
    provider.name = ProviderName.HUGGINGFACE
    provider.generate = generate
    return provider


@pytest.mark.asyncio
async def test_run_generation_returns_result_and_logs(caplog):
    expected = ImageGenerationResponse(image_b64="aGVsbG8=", provider="huggingface")
    provider = _fake_provider(AsyncMock(return_value=expected))

    with caplog.at_level(logging.INFO, logger="app.services.image_generation.runner"):
        result = await run_generation(provider, ImageGenerationRequest(prompt="a cat", api_key="hf_secret"))

    assert result is expected
    provider.generate.assert_awaited_once()
    messages = [r.getMessage() for r in caplog.records]
    assert "image_generation_succeeded" in messages


@pytest.mark.asyncio
async def test_run_generation_does_not_retry_and_never_logs_key(caplog):
    provider = _fake_provider(AsyncMock(side_effect=UpstreamError("Hugging Face API error: 401 - no", status_code=401)))

    with caplog.at_level(logging.INFO, logger="app.services.image_generation.runner"):
        with pytest.raises(UpstreamError):
            await run_generation(provider, ImageGenerationRequest(prompt="a cat", api_key="hf_secret"))

    assert provider.generate.await_count == 1
    failed = [r for r in caplog.records if r.getMessage() == "image_generation_failed"]
    assert len(failed) == 1
    assert failed[0].failure_type == "upstream_status"
    assert failed[0].upstream_status == 401
    assert all("hf_secret" not in str(r.__dict__) for r in caplog.records)
