"""Pydantic models for the analytics snapshot."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _SnapshotModel(BaseModel):
    """Base for output models: immutable, serialised with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class DayBucket(_SnapshotModel):
    """Session counts for one day of the trend window."""

    name: str
    date: str
    active_sessions: int
    cancelled_sessions: int


class MonthBucket(_SnapshotModel):
    """Users who joined in one calendar month."""

    name: str
    admins: int
    employees: int
    inactive: int


class ActivityEntry(_SnapshotModel):
    """One line of the recent activity feed."""

    user: str
    action: str
    time: str
    status: str


class AnalyticsSnapshot(_SnapshotModel):
    """Top-level container for dashboard analytics.

    A snapshot is the complete result of one aggregation run over a pair
    of session and user collections.  It is never updated in place; a
    new one is computed whenever the inputs change.
    """

    total_sessions: int
    active_users: int
    average_session_time: str
    conversion_rate: float
    performance_trends: List[DayBucket]
    user_engagement: List[MonthBucket]
    recent_activity: List[ActivityEntry]
