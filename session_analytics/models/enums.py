"""Enumerations used across models."""

from enum import Enum


class SessionStatus(str, Enum):
    """Lifecycle state of a demo session.

    Upstream records carry the status as free text; these are the values
    the analytics understand.  Anything else is kept verbatim on the
    :class:`~session_analytics.models.session.Session` and rendered with a
    generic label in the activity feed.
    """

    UPCOMING = "upcoming"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class UserStatus(str, Enum):
    """Account state of a dashboard user."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
