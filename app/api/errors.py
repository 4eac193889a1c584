"""
Exception handlers: map generation errors to the {error, message, provider} envelope.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.schemas.generation import ErrorResponse
from app.services.image_generation import ImageGenerationError, ValidationError

logger = logging.getLogger(__name__)

GENERATION_FAILED = "Failed to generate image"


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(error=exc.message, message=exc.detail, provider=exc.provider),
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed JSON or wrongly typed fields."""
    errors = exc.errors()
    detail = "; ".join(
        f"{'.'.join(str(p) for p in e.get('loc', ()))}: {e.get('msg')}" for e in errors
    )
    return _error_response(
        status.HTTP_400_BAD_REQUEST,
        ErrorResponse(error="Invalid request body", message=detail or None),
    )


async def generation_error_handler(request: Request, exc: ImageGenerationError) -> JSONResponse:
    logger.error(
        "generation_error",
        extra={"provider": exc.provider, "error": exc.message, "path": request.url.path},
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(error=GENERATION_FAILED, message=exc.message, provider=exc.provider),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", extra={"path": request.url.path})
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(error=GENERATION_FAILED, message=str(exc)),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(ImageGenerationError, generation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
