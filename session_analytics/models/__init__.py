"""Expose commonly used model classes at the package level.

Importing these classes here allows consumers to write concise imports like::

    from session_analytics.models import Session, User, AnalyticsSnapshot

These names refer to the underlying Pydantic models defined in their
respective modules.
"""

from .session import Session  # noqa: F401
from .user import User  # noqa: F401
from .analytics import ActivityEntry, AnalyticsSnapshot, DayBucket, MonthBucket  # noqa: F401
from .analytics_request import AnalyticsRequest  # noqa: F401
from .enums import SessionStatus, UserStatus  # noqa: F401
