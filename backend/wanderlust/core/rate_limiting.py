"""
Rate Limiting & Throttling
Per-IP throttling for visitor submissions (inquiries, contact form,
newsletter) and the health probes. Read endpoints are not limited.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request
from fastapi.responses import JSONResponse
import logging

from wanderlust.core.config import settings

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)

SUBMISSION_LIMIT = settings.submission_rate_limit
HEALTH_LIMIT = settings.health_rate_limit

RETRY_AFTER_SECONDS = 60


async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """
    429 in the same {"error": ...} shape as every other API error.
    Submissions get a message a visitor can act on; the applied limit
    (e.g. "20 per 1 minute") goes in "limit".
    """
    client_host = request.client.host if request.client else "unknown"
    is_submission = request.method == "POST"
    logger.warning(
        f"Rate limit exceeded for {client_host}: {request.method} {request.url.path} ({exc.detail})"
    )

    if is_submission:
        message = "Too many submissions from this address. Please wait a minute and try again."
    else:
        message = "Too many requests. Please slow down."

    return JSONResponse(
        status_code=429,
        content={
            "error": message,
            "limit": exc.detail,
            "retryAfter": RETRY_AFTER_SECONDS,
        },
        headers={"Retry-After": str(RETRY_AFTER_SECONDS)},
    )
