"""metagate — Error Taxonomy.

Every failure that leaves a forwarder or validator is one of these types.
The error handler maps each to an HTTP status and envelope.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class FieldViolation:
    """A single failed check on one request field."""

    field: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}


class GatewayError(Exception):
    """Base for all typed gateway errors."""

    status_code: Optional[int] = None

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(GatewayError):
    """Client-supplied data was malformed."""

    status_code = 400

    def __init__(self, violations: List[FieldViolation]):
        self.violations = list(violations)
        super().__init__(
            "; ".join(f"{v.field}: {v.message}" for v in self.violations)
            or "Validation error"
        )


class TransportError(GatewayError):
    """The Graph API could not be reached (timeout, DNS, connection)."""

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        host: str = "",
        unreachable: bool = False,
        timed_out: bool = False,
    ):
        self.cause = cause
        self.host = host
        self.unreachable = unreachable
        self.timed_out = timed_out
        super().__init__(message)
        # Timeouts carry an explicit gateway status; other transport
        # failures fall back to 500 in the handler.
        self.status_code = 504 if timed_out else None


class UpstreamError(GatewayError):
    """The Graph API was reached but answered with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        message: str,
        error_type: Optional[str] = None,
        code: Optional[int] = None,
        fbtrace_id: Optional[str] = None,
        body: Any = None,
    ):
        self.status_code = status_code
        self.error_type = error_type
        self.code = code
        self.fbtrace_id = fbtrace_id
        self.body = body
        super().__init__(message)

    @property
    def is_structured(self) -> bool:
        """True when the upstream body carried an ``{"error": {...}}`` object."""
        return isinstance(self.body, dict) and isinstance(self.body.get("error"), dict)


class RateLimitError(GatewayError):
    """The per-client request limiter was triggered."""

    status_code = 429


class InternalError(GatewayError):
    """A server-side fault, such as missing configuration."""

    status_code = 500
