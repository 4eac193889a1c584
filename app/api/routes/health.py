from fastapi import APIRouter

from app.schemas.generation import HealthOut
from app.services.image_generation import ImageProviderFactory


router = APIRouter(prefix="/api")


@router.get("/health", response_model=HealthOut)
def health() -> HealthOut:
    """Liveness probe - always returns 200 if app is running."""
    return HealthOut(
        status="ok",
        message="Image generation proxy is running",
        providers=ImageProviderFactory.get_available_providers(),
    )
