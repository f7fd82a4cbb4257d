"""Headline metrics shown in the dashboard summary cards."""

from __future__ import annotations

from typing import Sequence

from ..models.enums import UserStatus
from ..models.session import Session
from ..models.user import User
from ..utils.helpers import round_half_up

DEFAULT_SESSION_MINUTES = 60
SUCCESSFUL_RATING = 4


def count_active_users(users: Sequence[User]) -> int:
    """Count users that are not marked inactive (pending users included)."""
    return sum(1 for user in users if user.status != UserStatus.INACTIVE.value)


def calculate_conversion_rate(sessions: Sequence[Session]) -> float:
    """Percentage of sessions rated 4 or higher, to one decimal place.

    The denominator is every session, rated or not, so unrated and
    cancelled sessions pull the rate down.
    """
    total = len(sessions)
    if total == 0:
        return 0.0
    rated = [s for s in sessions if s.rating is not None and s.rating > 0]
    successful = sum(1 for s in rated if s.rating >= SUCCESSFUL_RATING)
    return round_half_up(successful / total * 100, 1)


def format_minutes(minutes: int) -> str:
    """Render a duration as ``45m`` or ``1h 30m``."""
    if minutes < 60:
        return f"{minutes}m"
    hours, remainder = divmod(minutes, 60)
    return f"{hours}h {remainder}m"


def calculate_average_session_time(sessions: Sequence[Session]) -> str:
    total = len(sessions)
    if total == 0:
        return "0m"
    # Missing and zero durations both count as an hour.
    minutes = sum(s.duration or DEFAULT_SESSION_MINUTES for s in sessions)
    return format_minutes(int(round_half_up(minutes / total)))
