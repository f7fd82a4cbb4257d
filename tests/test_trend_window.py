from __future__ import annotations

from datetime import date, datetime, timedelta

from conftest import make_session

from session_analytics.services.trend_window import (
    resolve_trend_window,
    weekday_abbreviation,
)


def test_empty_sessions_start_the_window_today() -> None:
    window = resolve_trend_window([], datetime(2024, 6, 12, 15, 45, 10))

    assert window.start_date == datetime(2024, 6, 12)
    assert window.end_date == datetime(2024, 6, 18, 23, 59, 59, 999999)


def test_window_is_anchored_to_earliest_session(now: datetime) -> None:
    sessions = [
        make_session(id="late", date="2024-06-20"),
        make_session(id="early", date="2024-05-30"),
        make_session(id="mid", date="2024-06-01"),
    ]

    window = resolve_trend_window(sessions, now)

    assert window.start_date == datetime(2024, 5, 30)
    assert window.end_date.date() == date(2024, 6, 5)
    assert window.end_date.time().hour == 23


def test_window_days_are_seven_consecutive_dates(now: datetime) -> None:
    window = resolve_trend_window([make_session(date="2024-12-29")], now)

    days = list(window.days())

    assert len(days) == 7
    assert days[0] == date(2024, 12, 29)
    assert days[-1] == date(2025, 1, 4)
    assert all(b - a == timedelta(days=1) for a, b in zip(days, days[1:]))


def test_window_contains_is_inclusive(now: datetime) -> None:
    window = resolve_trend_window([make_session(date="2024-06-10")], now)

    assert window.contains(datetime(2024, 6, 10))
    assert window.contains(datetime(2024, 6, 16, 23, 59, 59))
    assert not window.contains(datetime(2024, 6, 9, 23, 59, 59))
    assert not window.contains(datetime(2024, 6, 17))


def test_weekday_abbreviation_uses_calendar_date() -> None:
    assert weekday_abbreviation(date(2024, 6, 10)) == "Mon"
    assert weekday_abbreviation(date(2024, 6, 16)) == "Sun"
