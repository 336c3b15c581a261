"""
Error handling and sanitization

- Storefront errors → JSON body with message/code (fields for validation)
- Request validation errors → 400 with the offending field paths
- Unhandled exceptions → logged with traceback, generic 500 to the client
"""
import logging
import traceback

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from motoparts.core.config import settings
from motoparts.core.exceptions import StorefrontError, ValidationError, field_paths

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unexpected error occurred. Please try again later."


def storefront_error_body(exc: StorefrontError) -> dict:
    if exc.status_code >= 500:
        return {"message": GENERIC_ERROR_MESSAGE, "code": exc.code}

    body = {"message": exc.message, "code": exc.code}
    if isinstance(exc, ValidationError):
        body["fields"] = exc.fields
    return body


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{exc!r} on {request.method} {request.url.path}: {exc.details}")
    return JSONResponse(status_code=exc.status_code, content=storefront_error_body(exc))


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Surface malformed request input as 400 instead of FastAPI's default 422."""
    fields = field_paths(exc.errors(), skip=("body", "query", "path"))
    return JSONResponse(
        status_code=400,
        content={
            "message": f"Invalid request: {', '.join(fields)}",
            "code": ValidationError.default_code,
            "fields": fields,
        },
    )


class ErrorSanitizationMiddleware(BaseHTTPMiddleware):
    """
    Catch unhandled exceptions and sanitize error responses.

    - In production: Returns generic error, logs full details
    - With DEBUG: Returns the exception text for debugging
    """

    async def dispatch(self, request: Request, call_next):
        try:
            response = await call_next(request)
            return response
        except HTTPException:
            # Let FastAPI handle HTTPExceptions normally
            raise
        except Exception as e:
            error_id = f"{request.client.host if request.client else 'unknown'}-{id(e)}"
            logger.error(
                f"Unhandled exception [{error_id}]: {type(e).__name__}: {str(e)}\n"
                f"Path: {request.url.path}\n"
                f"Method: {request.method}\n"
                f"Traceback:\n{traceback.format_exc()}"
            )

            content = {
                "message": GENERIC_ERROR_MESSAGE,
                "code": "INTERNAL_ERROR",
                "error_id": error_id,
            }
            if settings.DEBUG:
                content["message"] = str(e)
                content["type"] = type(e).__name__

            return JSONResponse(status_code=500, content=content)
