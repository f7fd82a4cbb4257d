"""Chart series: daily session trends and monthly user engagement."""

from __future__ import annotations

from collections import defaultdict
from datetime import date, datetime
from typing import Dict, List, Sequence

from ..models.analytics import DayBucket, MonthBucket
from ..models.enums import SessionStatus, UserStatus
from ..models.session import Session
from ..models.user import User
from .trend_window import MONTH_ABBREVIATIONS, TrendWindow, weekday_abbreviation

ACTIVE_STATUSES = frozenset({SessionStatus.UPCOMING.value, SessionStatus.COMPLETED.value})


def calculate_performance_trends(sessions: Sequence[Session], window: TrendWindow) -> List[DayBucket]:
    """Count active and cancelled sessions for each day of ``window``.

    Sessions dated outside the window are not counted in any bucket.
    Sessions with an unknown status are counted in neither column.
    """
    by_day: Dict[date, List[Session]] = defaultdict(list)
    for session in sessions:
        by_day[session.date].append(session)

    buckets: List[DayBucket] = []
    for day in window.days():
        day_sessions = by_day.get(day, [])
        buckets.append(
            DayBucket(
                name=weekday_abbreviation(day),
                date=day.isoformat(),
                active_sessions=sum(1 for s in day_sessions if s.status in ACTIVE_STATUSES),
                cancelled_sessions=sum(
                    1 for s in day_sessions if s.status == SessionStatus.CANCELLED.value
                ),
            )
        )
    return buckets


def calculate_user_engagement(users: Sequence[User], now: datetime) -> List[MonthBucket]:
    """Summarise users by join month for every month of the current year.

    The three counts overlap: an inactive admin is counted under both
    ``admins`` and ``inactive``.
    """
    year = now.year
    by_month: Dict[int, List[User]] = defaultdict(list)
    for user in users:
        if user.join_date is not None and user.join_date.year == year:
            by_month[user.join_date.month].append(user)

    buckets: List[MonthBucket] = []
    for month, name in enumerate(MONTH_ABBREVIATIONS, start=1):
        month_users = by_month.get(month, [])
        buckets.append(
            MonthBucket(
                name=name,
                admins=sum(1 for u in month_users if u.is_admin),
                employees=sum(1 for u in month_users if u.is_employee),
                inactive=sum(1 for u in month_users if u.status == UserStatus.INACTIVE.value),
            )
        )
    return buckets
