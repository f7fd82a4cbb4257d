from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from conftest import make_session, make_user

from session_analytics.services.activity import (
    calculate_recent_activity,
    describe_action,
    effective_timestamp,
    parse_clock,
    relative_time,
)
from session_analytics.services.trend_window import resolve_trend_window


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("14:30", (14, 30)),
        ("9:05", (9, 5)),
        ("xx:15", (0, 15)),
        ("10", (10, 0)),
        ("", (0, 0)),
        ("14.5:30", (14, 30)),
        ("9am", (9, 0)),
        (" 08 : 45 ", (8, 45)),
    ],
)
def test_parse_clock(value: str, expected: tuple[int, int]) -> None:
    assert parse_clock(value) == expected


def test_effective_timestamp_prefers_created_at() -> None:
    session = make_session(createdAt="2024-06-09T07:00:00", date="2024-06-10", time="14:30")

    assert effective_timestamp(session) == datetime(2024, 6, 9, 7, 0)


def test_effective_timestamp_combines_date_and_time() -> None:
    session = make_session(date="2024-01-05", time="14:30")

    assert effective_timestamp(session) == datetime(2024, 1, 5, 14, 30)


def test_effective_timestamp_rolls_over_out_of_range_hours() -> None:
    session = make_session(date="2024-01-05", time="25:10")

    assert effective_timestamp(session) == datetime(2024, 1, 6, 1, 10)


@pytest.mark.parametrize("value", ["99999999999:00", "00:99999999999999999999"])
def test_effective_timestamp_falls_back_to_midnight_on_overflow(value: str) -> None:
    session = make_session(date="2024-06-10", time=value)

    assert effective_timestamp(session) == datetime(2024, 6, 10)


def test_recent_activity_survives_unrepresentable_time(now: datetime) -> None:
    sessions = [make_session(date="2024-06-10", time="99999999999:00", status="completed")]
    window = resolve_trend_window(sessions, now)

    activity = calculate_recent_activity(sessions, [], window, now)

    assert [entry.time for entry in activity] == ["2 days ago"]


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        ("upcoming", "Scheduled Vue Demo"),
        ("completed", "Completed Vue Demo"),
        ("cancelled", "Cancelled Vue Demo"),
        ("postponed", "postponed Vue Demo"),
    ],
)
def test_describe_action(status: str, expected: str) -> None:
    assert describe_action(status, "Vue") == expected


@pytest.mark.parametrize(
    ("delta", "expected"),
    [
        (timedelta(seconds=30), "Just now"),
        (timedelta(minutes=-5), "Just now"),
        (timedelta(minutes=1), "1 minutes ago"),
        (timedelta(minutes=59, seconds=59), "59 minutes ago"),
        (timedelta(hours=1), "1 hours ago"),
        (timedelta(hours=23, minutes=59), "23 hours ago"),
        (timedelta(days=1), "1 days ago"),
        (timedelta(days=9, hours=5), "9 days ago"),
    ],
)
def test_relative_time(delta: timedelta, expected: str, now: datetime) -> None:
    assert relative_time(now - delta, now) == expected


def test_recent_activity_is_windowed_and_sorted(now: datetime) -> None:
    users = [make_user(id="u-1", name="Alice Smith")]
    sessions = [
        make_session(id="a", date="2024-06-10", time="09:00", status="completed", technology="React"),
        make_session(id="b", date="2024-06-12", time="11:00", status="upcoming", createdBy="Bob"),
        make_session(id="c", date="2024-06-11", time="08:00", status="cancelled", createdBy=None),
        make_session(id="d", date="2024-06-20", time="08:00", status="upcoming"),
    ]
    window = resolve_trend_window(sessions, now)

    activity = calculate_recent_activity(sessions, users, window, now)

    assert [entry.model_dump() for entry in activity] == [
        {"user": "Bob", "action": "Scheduled React Demo", "time": "1 hours ago", "status": "upcoming"},
        {"user": "Unknown User", "action": "Cancelled React Demo", "time": "1 days ago", "status": "cancelled"},
        {"user": "Alice Smith", "action": "Completed React Demo", "time": "2 days ago", "status": "completed"},
    ]


def test_recent_activity_excludes_created_at_outside_window(now: datetime) -> None:
    sessions = [
        make_session(id="a", date="2024-06-10"),
        make_session(id="b", date="2024-06-11", createdAt="2024-06-01T10:00:00"),
    ]
    window = resolve_trend_window(sessions, now)

    activity = calculate_recent_activity(sessions, [], window, now)

    assert len(activity) == 1


def test_recent_activity_limit(now: datetime) -> None:
    sessions = [make_session(id=str(i), time=f"{i:02d}:00") for i in range(6)]
    window = resolve_trend_window(sessions, now)

    activity = calculate_recent_activity(sessions, [], window, now, limit=2)

    assert [entry.time for entry in activity] == ["2 days ago", "2 days ago"]
    assert len(activity) == 2
