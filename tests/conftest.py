"""Shared fixtures. Outbound HTTP is intercepted by pytest-httpx (httpx_mock)."""
import pytest
from fastapi.testclient import TestClient

from app.main import app

# 1x1 transparent PNG
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000154a24f5d0000000049454e44ae426082"
)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def png_bytes() -> bytes:
    return PNG_BYTES
