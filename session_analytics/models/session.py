"""Model representing a demo session record."""

from __future__ import annotations

import datetime as dt
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.helpers import to_naive_utc


class Session(BaseModel):
    """A demo session as returned by the sessions API.

    Only the fields the analytics read are modelled; anything else the
    upstream payload carries (title, location, attendees...) is ignored.
    Field names follow Python conventions but the camelCase keys used by
    the API (``createdBy``, ``createdAt``) are accepted as aliases.

    ``status`` is deliberately a plain string rather than
    :class:`~session_analytics.models.enums.SessionStatus` so that
    records with an unexpected status still flow through the pipeline.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: str
    date: dt.date
    time: Optional[str] = Field(default="00:00", description="Wall-clock start time as HH:MM.")
    status: str
    duration: Optional[int] = Field(
        default=None,
        description="Length in minutes.  Unknown durations count as 60 minutes.",
    )
    rating: Optional[float] = Field(default=None, description="Feedback rating from 0 to 5.")
    technology: str = ""
    created_by: Optional[str] = Field(default=None, alias="createdBy")
    created_at: Optional[dt.datetime] = Field(default=None, alias="createdAt")

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("date", mode="before")
    @classmethod
    def _strip_time_component(cls, value: Any) -> Any:
        """Keep only the calendar date of ISO date-time strings."""
        if isinstance(value, dt.datetime):
            return value.date()
        if isinstance(value, str) and len(value) > 10:
            return value[:10]
        return value

    @field_validator("created_at")
    @classmethod
    def _normalise_created_at(cls, value: Optional[dt.datetime]) -> Optional[dt.datetime]:
        if value is None:
            return None
        return to_naive_utc(value)
