"""
Rate limiting

SlowAPI with in-process counters, keyed by client address. Every /api route
is decorated with default_limit, except checkout, which uses the stricter
checkout_limit. Limits are read from settings on each request.
"""
import logging

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from motoparts.core.config import settings

logger = logging.getLogger(__name__)

DEFAULT_RETRY_SECONDS = 60


def get_client_ip(request: Request) -> str:
    """Client address, taken from the proxy headers when the API sits behind one."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        # Left-most entry is the client, the rest are proxies
        return forwarded.split(",")[0].strip()

    real_ip = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    return get_remote_address(request)


limiter = Limiter(
    key_func=get_client_ip,
    enabled=settings.RATE_LIMIT_ENABLED,
)


def default_limit() -> str:
    return settings.RATE_LIMIT_DEFAULT


def checkout_limit() -> str:
    return settings.RATE_LIMIT_CHECKOUT


def retry_after_seconds(exc: RateLimitExceeded) -> int:
    """Length of the window that was exhausted, e.g. 60 for "10/minute"."""
    limit = getattr(exc, "limit", None)
    item = getattr(limit, "limit", None)
    if item is None:
        return DEFAULT_RETRY_SECONDS
    return int(item.get_expiry())


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    retry_after = retry_after_seconds(exc)
    logger.warning(
        f"Rate limit {exc.detail} hit by {get_client_ip(request)} on {request.method} {request.url.path}"
    )

    return JSONResponse(
        status_code=429,
        content={
            "message": f"Too many requests. Please try again in {retry_after} seconds.",
            "code": "RATE_LIMITED",
        },
        headers={"Retry-After": str(retry_after)},
    )
