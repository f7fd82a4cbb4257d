"""Recent activity feed built from session records."""

from __future__ import annotations

import math
import re
from datetime import datetime, timedelta
from typing import Dict, List, Optional, Sequence, Tuple

from loguru import logger

from ..models.analytics import ActivityEntry
from ..models.enums import SessionStatus
from ..models.session import Session
from ..models.user import User
from .trend_window import TrendWindow, start_of_day

UNKNOWN_USER = "Unknown User"

_ACTION_VERBS = {
    SessionStatus.UPCOMING.value: "Scheduled",
    SessionStatus.COMPLETED.value: "Completed",
    SessionStatus.CANCELLED.value: "Cancelled",
}


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_clock_part(part: str) -> int:
    """Read the leading integer of ``part`` (``"9am"`` -> 9), else 0."""
    match = _LEADING_INT.match(part)
    if match is None:
        return 0
    return int(match.group(1))


def parse_clock(value: Optional[str]) -> Tuple[int, int]:
    """Split ``HH:MM`` into hours and minutes; unreadable parts become 0."""
    parts = (value or "").strip().split(":")
    hours = _parse_clock_part(parts[0]) if parts else 0
    minutes = _parse_clock_part(parts[1]) if len(parts) > 1 else 0
    return hours, minutes


def effective_timestamp(session: Session) -> datetime:
    """Return ``created_at`` or, failing that, the session's date and start time.

    Out-of-range clock values roll over (``25:00`` is 01:00 the next day).
    Values too large to represent fall back to midnight of the session date.
    """
    if session.created_at is not None:
        return session.created_at
    hours, minutes = parse_clock(session.time)
    midnight = start_of_day(session.date)
    try:
        return midnight + timedelta(hours=hours, minutes=minutes)
    except OverflowError:
        logger.warning("Ignoring unusable time {!r} on session {}", session.time, session.id)
        return midnight


def resolve_display_name(created_by: Optional[str], users_by_id: Dict[str, User]) -> str:
    if created_by:
        user = users_by_id.get(created_by)
        if user is not None and user.name:
            return user.name
        return created_by
    return UNKNOWN_USER


def describe_action(status: str, technology: str) -> str:
    verb = _ACTION_VERBS.get(status, status)
    return f"{verb} {technology} Demo"


def relative_time(moment: datetime, now: datetime) -> str:
    """Describe how long ago ``moment`` was, e.g. ``3 hours ago``.

    Timestamps in the future read as ``Just now``.
    """
    minutes = math.floor((now - moment).total_seconds() / 60)
    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes} minutes ago"
    hours = minutes // 60
    if hours < 24:
        return f"{hours} hours ago"
    return f"{hours // 24} days ago"


def calculate_recent_activity(
    sessions: Sequence[Session],
    users: Sequence[User],
    window: TrendWindow,
    now: datetime,
    limit: Optional[int] = None,
) -> List[ActivityEntry]:
    """Build the activity feed for sessions inside ``window``, newest first."""
    users_by_id = {user.id: user for user in users}
    timed: List[Tuple[datetime, ActivityEntry]] = []
    for session in sessions:
        moment = effective_timestamp(session)
        if not window.contains(moment):
            continue
        timed.append(
            (
                moment,
                ActivityEntry(
                    user=resolve_display_name(session.created_by, users_by_id),
                    action=describe_action(session.status, session.technology),
                    time=relative_time(moment, now),
                    status=session.status,
                ),
            )
        )

    timed.sort(key=lambda item: item[0], reverse=True)
    entries = [entry for _, entry in timed]
    if limit is not None:
        entries = entries[:limit]
    return entries
