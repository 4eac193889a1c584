from pydantic import BaseModel, ConfigDict, Field


class GenerateRequest(BaseModel):
    """Inbound body of POST /api/generate. Presence rules are enforced by the dispatcher."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    prompt: str | None = None
    provider: str | None = None
    api_key: str | None = Field(default=None, alias="apiKey", repr=False)


class GenerateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    image_data: str = Field(alias="imageData")
    provider: str
    message: str = "Image generated successfully"


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None
    provider: str | None = None


class HealthOut(BaseModel):
    status: str
    message: str
    providers: list[str]
