"""Orchestration service producing dashboard analytics snapshots.

The AnalyticsService receives already-fetched session and user
collections, runs every calculator over them and assembles the results
into a single :class:`AnalyticsSnapshot`.  Nothing is cached between
calls: each snapshot is recomputed from the full inputs.  It
centralises error handling so controllers can remain thin.
"""

from __future__ import annotations

from datetime import datetime
from functools import lru_cache
from typing import Optional, Sequence

from loguru import logger

from ..config.app_config import AppConfig, get_app_config
from ..models.analytics import AnalyticsSnapshot
from ..models.session import Session
from ..models.user import User
from ..utils.error_handler import AnalyticsError
from ..utils.helpers import log_execution, resolve_now
from .activity import calculate_recent_activity
from .metrics import calculate_average_session_time, calculate_conversion_rate, count_active_users
from .series import calculate_performance_trends, calculate_user_engagement
from .trend_window import resolve_trend_window


def compute_analytics_snapshot(
    sessions: Sequence[Session],
    users: Sequence[User],
    now: Optional[datetime] = None,
    *,
    recent_activity_limit: Optional[int] = None,
) -> AnalyticsSnapshot:
    """Aggregate sessions and users into an analytics snapshot.

    ``now`` drives the relative activity times and selects the year of
    the engagement series; pass a fixed value for reproducible output.
    """
    now = resolve_now(now)
    window = resolve_trend_window(sessions, now)
    logger.debug(
        "Computing snapshot: sessions={} users={} window={}..{}",
        len(sessions),
        len(users),
        window.start_date.date(),
        window.end_date.date(),
    )
    return AnalyticsSnapshot(
        total_sessions=len(sessions),
        active_users=count_active_users(users),
        average_session_time=calculate_average_session_time(sessions),
        conversion_rate=calculate_conversion_rate(sessions),
        performance_trends=calculate_performance_trends(sessions, window),
        user_engagement=calculate_user_engagement(users, now),
        recent_activity=calculate_recent_activity(
            sessions, users, window, now, limit=recent_activity_limit
        ),
    )


class AnalyticsService:
    """Computes snapshots using the application configuration.

    The service itself holds no data; it only supplies configured
    options such as the activity feed limit to
    :func:`compute_analytics_snapshot`.
    """

    def __init__(self, app_config: AppConfig | None = None) -> None:
        self.app_config = app_config or get_app_config()

    @log_execution
    def compute_snapshot(
        self,
        sessions: Sequence[Session],
        users: Sequence[User],
        now: Optional[datetime] = None,
    ) -> AnalyticsSnapshot:
        """Return a fresh snapshot for the given collections."""
        try:
            snapshot = compute_analytics_snapshot(
                sessions,
                users,
                now,
                recent_activity_limit=self.app_config.recent_activity_limit,
            )
        except Exception as exc:
            logger.exception("Failed to compute analytics snapshot")
            raise AnalyticsError("Failed to compute analytics snapshot") from exc
        logger.info(
            "Snapshot computed: total_sessions={} conversion_rate={}",
            snapshot.total_sessions,
            snapshot.conversion_rate,
        )
        return snapshot


@lru_cache()
def get_analytics_service() -> AnalyticsService:
    """Dependency injector for AnalyticsService instances.

    FastAPI will call this function to obtain a singleton
    AnalyticsService.  The lru_cache decorator ensures only one
    instance exists.
    """
    return AnalyticsService()
