"""General helper functions used across the application."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from functools import wraps
from typing import Any, Callable, TypeVar

from loguru import logger

T = TypeVar("T")


def log_execution(func: Callable[..., T]) -> Callable[..., T]:
    """Decorator to log the execution of a function."""

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        logger.debug("Entering {}", func.__name__)
        result = func(*args, **kwargs)
        logger.debug("Exiting {}", func.__name__)
        return result

    return wrapper


def to_naive_utc(value: datetime) -> datetime:
    """Convert an aware datetime to naive UTC; naive values pass through."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def resolve_now(now: datetime | None = None) -> datetime:
    """Return ``now`` as a naive UTC datetime, defaulting to the current time."""
    if now is None:
        return datetime.now(timezone.utc).replace(tzinfo=None)
    return to_naive_utc(now)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round ``value`` to ``digits`` places, halves away from zero (2.5 -> 3)."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))
