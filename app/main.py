"""
Main FastAPI application for the image generation proxy.
Serves health, generate and the static front end.
"""
import logging
import time
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api.errors import register_exception_handlers
from app.api.routes import generate, health
from app.core.config import settings
from app.core.logging import configure_logging


configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Image Generation Proxy",
    description="Relays text-to-image requests to Pollinations, Hugging Face or OpenAI",
    version="1.0.0",
)

# CORS
origins = settings.cors_origins_list or ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "http_request",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "latency_ms": int((time.perf_counter() - started) * 1000),
        },
    )
    return response


# Routers
app.include_router(health.router, tags=["health"])
app.include_router(generate.router)

# Static front end last so /api/* wins
if Path(settings.public_dir).is_dir():
    app.mount("/", StaticFiles(directory=settings.public_dir, html=True), name="public")
else:
    logger.warning("Static directory not found, / will not be served", extra={"path": settings.public_dir})


def run() -> None:
    """Console entry point."""
    logger.info(
        "Image generation proxy starting",
        extra={"path": f"http://localhost:{settings.port}"},
    )
    logger.info("API endpoints: GET /api/health, POST /api/generate")
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
