"""
Rate limiting for the public tournament API.

Uses slowapi to enforce request limits per client. Requests carrying an
X-API-Key header are bucketed by key prefix instead of by IP so that
embedding sites (projection screens, club pages) get their own budget.
"""

from fastapi import Request, Response
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from starlette.responses import JSONResponse

from core.settings import settings
from schemas.common import ApiStatus


def get_rate_limit_key(request: Request) -> str:
    """
    Get rate limit key - uses API key if present, otherwise IP address.
    """
    api_key = request.headers.get("X-API-Key")
    if api_key:
        # Use first 11 chars (prefix) to avoid storing full key in memory
        return f"api_key:{api_key[:11]}"
    return get_remote_address(request)


limiter = Limiter(key_func=get_rate_limit_key, enabled=settings.rate_limit_enabled)


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> Response:
    """Custom handler for rate limit exceeded errors."""
    return JSONResponse(
        status_code=429,
        content={
            "status": ApiStatus.RATE_LIMITED.value,
            "message": f"Rate limit exceeded: {exc.detail}",
            "data": None,
        },
    )


PUBLIC_RATE_LIMIT = settings.public_rate_limit
