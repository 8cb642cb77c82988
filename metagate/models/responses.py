"""metagate — Response Envelope and Health Models."""

from typing import Any, Dict

from pydantic import BaseModel


class Envelope(BaseModel):
    """Successful response wrapper; errors are rendered by the error handler."""

    success: bool = True
    data: Any = None


class HealthResponse(BaseModel):
    """Process status. Credentials are reported by presence only."""

    status: str
    timestamp: str
    uptime: float
    environment: str
    version: str
    credentials: Dict[str, bool]


def ok(data: Any) -> Envelope:
    return Envelope(success=True, data=data)
