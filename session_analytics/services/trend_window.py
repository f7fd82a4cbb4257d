"""Seven-day window shared by the trend series and the activity feed.

The window is anchored to the earliest session in the data set rather
than to the current date, so the trend chart shows the first week of
recorded activity.  With no sessions at all it starts today.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Iterator, Sequence

from ..models.session import Session

WINDOW_DAYS = 7

WEEKDAY_ABBREVIATIONS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass(frozen=True)
class TrendWindow:
    """Inclusive range from midnight of the first day to the end of the last."""

    start_date: datetime
    end_date: datetime

    def days(self) -> Iterator[date]:
        """Yield each calendar day of the window in order."""
        first = self.start_date.date()
        for offset in range(WINDOW_DAYS):
            yield first + timedelta(days=offset)

    def contains(self, moment: datetime) -> bool:
        return self.start_date <= moment <= self.end_date


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def end_of_day(day: date) -> datetime:
    return datetime.combine(day, time.max)


def weekday_abbreviation(day: date) -> str:
    return WEEKDAY_ABBREVIATIONS[day.weekday()]


def resolve_trend_window(sessions: Sequence[Session], now: datetime) -> TrendWindow:
    """Return the window starting at the earliest session date (or today)."""
    if sessions:
        first_day = min(session.date for session in sessions)
    else:
        first_day = now.date()
    last_day = first_day + timedelta(days=WINDOW_DAYS - 1)
    return TrendWindow(start_date=start_of_day(first_day), end_date=end_of_day(last_day))
