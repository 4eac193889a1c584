"""
Application configuration.
All settings are loaded from environment variables (or a local .env file).
Provider credentials are NOT configured here: callers pass them per request.
"""
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # ===========================================
    # APPLICATION
    # ===========================================
    host: str = "0.0.0.0"
    port: int = 3000
    # Comma-separated. "*" = any origin.
    cors_origins: str = "*"
    public_dir: str = str(PROJECT_ROOT / "public")

    # ===========================================
    # POLLINATIONS (no credential)
    # ===========================================
    pollinations_api_url: str = "https://image.pollinations.ai"

    # ===========================================
    # HUGGING FACE (caller supplies the token)
    # ===========================================
    huggingface_api_url: str = "https://router.huggingface.co/v1"
    huggingface_image_model: str = "black-forest-labs/FLUX.1-schnell"

    # ===========================================
    # OPENAI (caller supplies the key)
    # ===========================================
    openai_api_url: str = "https://api.openai.com/v1"
    openai_image_model: str = "dall-e-3"
    openai_image_quality: str = "standard"

    # ===========================================
    # IMAGE GENERATION - COMMON SETTINGS
    # ===========================================
    image_size: str = "1024x1024"
    # None = wait for upstream indefinitely
    http_client_timeout: float | None = None

    # ===========================================
    # LOGGING
    # ===========================================
    log_level: str = "INFO"
    log_file: str | None = None
    log_max_bytes: int = 10_000_000
    log_backup_count: int = 5

    @field_validator("image_size")
    @classmethod
    def validate_image_size(cls, v: str) -> str:
        """Expect WIDTHxHEIGHT."""
        value = v.lower().strip()
        parts = value.split("x")
        if len(parts) != 2 or not all(p.isdigit() for p in parts):
            raise ValueError("image_size must look like 1024x1024")
        return value

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
