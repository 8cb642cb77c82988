"""metagate — Error Normalization.

Classifies any error escaping a handler into an HTTP status and a JSON
envelope. The checks run in a fixed priority order; the first match wins.
"""

import traceback
from typing import Any, Dict, Tuple

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from metagate.core.errors import (
    GatewayError,
    RateLimitError,
    TransportError,
    UpstreamError,
    ValidationError,
)
from metagate.core.logging import get_logger
from metagate.models.requests import field_violations

logger = get_logger("errors")

UPSTREAM_RATE_LIMIT_MESSAGE = "Too many requests to Meta API"
GENERIC_MESSAGE = "Something went wrong"


def normalize_error(exc: BaseException, production: bool) -> Tuple[int, Dict[str, Any]]:
    """Map an error to ``(status_code, body)``."""
    # 1. Graph API host unreachable
    if isinstance(exc, TransportError) and exc.unreachable:
        return 503, {
            "success": False,
            "error": "Meta API service unavailable",
            "message": "Unable to connect to Meta Graph API",
        }

    # 2. Validation
    if isinstance(exc, (ValidationError, RequestValidationError)):
        violations = (
            exc.violations
            if isinstance(exc, ValidationError)
            else field_violations(exc.errors())
        )
        return 400, {
            "success": False,
            "error": "Validation error",
            "details": [v.to_dict() for v in violations],
        }

    # 3. Rate limited, by us or by the Graph API
    if isinstance(exc, RateLimitError) or getattr(exc, "status_code", None) == 429:
        message = (
            exc.message if isinstance(exc, RateLimitError) else UPSTREAM_RATE_LIMIT_MESSAGE
        )
        return 429, {"success": False, "error": "Rate limit exceeded", "message": message}

    # 4. Structured Graph API error
    if isinstance(exc, UpstreamError) and exc.is_structured:
        return exc.status_code or 400, {
            "success": False,
            "error": "Meta API error",
            "type": exc.error_type,
            "message": exc.message,
            "code": exc.code,
        }

    # 5. Everything else
    status_code = getattr(exc, "status_code", None) or 500
    body: Dict[str, Any] = {
        "success": False,
        "error": "Server error",
        "message": GENERIC_MESSAGE if production else (str(exc) or GENERIC_MESSAGE),
    }
    if not production:
        body["stack"] = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
    return status_code, body


def original_url(request: Request) -> str:
    """The request path and query string exactly as the client sent them."""
    raw_path = request.scope.get("raw_path")
    path = raw_path.decode("latin-1") if raw_path else request.url.path
    query = request.scope.get("query_string", b"").decode("latin-1")
    return f"{path}?{query}" if query else path


def _is_production(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings and settings.is_production)


def error_response(request: Request, exc: BaseException) -> JSONResponse:
    """Log the failure with request context and render its envelope."""
    status_code, body = normalize_error(exc, _is_production(request))
    extra = {
        "method": request.method,
        "path": request.url.path,
        "client_ip": request.client.host if request.client else None,
        "status_code": status_code,
    }
    if status_code >= 500:
        logger.error(f"Error occurred: {exc}", exc_info=exc, extra=extra)
    else:
        logger.warning(f"Request failed: {exc}", extra=extra)
    return JSONResponse(status_code=status_code, content=body)


# ── Exception Handlers ──


async def gateway_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    return error_response(request, exc)


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return error_response(request, exc)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Unmatched verb and path echo the requested URL; other HTTP errors keep their status."""
    if exc.status_code in (404, 405):
        path = original_url(request)
        return JSONResponse(
            status_code=404,
            content={"success": False, "error": "Endpoint not found", "path": path},
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GatewayError, gateway_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, gateway_exception_handler)
