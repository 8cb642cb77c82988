"""metagate — HTTP middleware: rate limiting, request logging, security headers."""

import math
import time
from typing import Awaitable, Callable

from fastapi import Request, Response

from metagate.core.error_handler import error_response
from metagate.core.errors import RateLimitError
from metagate.core.logging import get_logger
from metagate.core.rate_limit import RATE_LIMIT_MESSAGE

logger = get_logger("http")

CallNext = Callable[[Request], Awaitable[Response]]

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Resource-Policy": "same-origin",
}


def client_address(request: Request) -> str:
    """Address used to key the rate limiter."""
    settings = request.app.state.settings
    if settings.trust_forwarded_for:
        forwarded = request.headers.get("x-forwarded-for", "")
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    return request.client.host if request.client else "unknown"


async def rate_limit_middleware(request: Request, call_next: CallNext) -> Response:
    limiter = request.app.state.rate_limiter
    decision = limiter.hit(client_address(request))
    if not decision.allowed:
        response = error_response(request, RateLimitError(RATE_LIMIT_MESSAGE))
        response.headers["Retry-After"] = str(math.ceil(decision.reset_after))
    else:
        response = await call_next(request)
    response.headers["RateLimit-Limit"] = str(decision.limit)
    response.headers["RateLimit-Remaining"] = str(decision.remaining)
    response.headers["RateLimit-Reset"] = str(math.ceil(decision.reset_after))
    return response


async def request_logging_middleware(request: Request, call_next: CallNext) -> Response:
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = round((time.perf_counter() - start) * 1000, 2)
    logger.info(
        f"{request.method} {request.url.path} - {client_address(request)}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "client_ip": client_address(request),
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response


async def security_headers_middleware(request: Request, call_next: CallNext) -> Response:
    response = await call_next(request)
    for header, value in SECURITY_HEADERS.items():
        response.headers.setdefault(header, value)
    return response
