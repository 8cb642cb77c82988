"""metagate — Helpers shared by the domain forwarders."""

import functools
from typing import Any, Awaitable, Callable, Optional, TypeVar

from metagate.core.errors import FieldViolation, ValidationError
from metagate.core.logging import get_logger

logger = get_logger("meta.forwarders")

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def operation(name: str) -> Callable[[F], F]:
    """Log any failure of a forwarder method with its operation name, then re-raise."""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                logger.error(f"Failed to {name}: {e}", extra={"operation": name})
                raise

        return wrapper  # type: ignore[return-value]

    return decorator


def resolve_id(value: Optional[str], default: str, field: str) -> str:
    """Return the explicit identifier, else the configured default."""
    resolved = (value or "").strip() or default
    if not resolved:
        raise ValidationError(
            [FieldViolation(field, f"{field} is required when no default is configured")]
        )
    return resolved
