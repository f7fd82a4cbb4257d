"""Request model for the analytics API."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from .session import Session
from .user import User


def unwrap_collection(value: Any) -> Any:
    """Return the record list from either a bare list or a paginated envelope.

    The upstream sessions and users endpoints answer either with a plain
    JSON array or with ``{"data": [...], "total": ..., ...}``.  Unwrapping
    happens here so the aggregation functions only ever see lists.
    """
    if isinstance(value, dict) and "data" in value:
        return value["data"]
    return value


class AnalyticsRequest(BaseModel):
    """Payload for a snapshot computation.

    ``now`` is optional and mainly useful for reproducible reports; when
    omitted the server clock is used.
    """

    sessions: List[Session] = Field(default_factory=list)
    users: List[User] = Field(default_factory=list)
    now: Optional[datetime] = Field(
        default=None,
        description="Reference time for relative timestamps and the current year.",
    )

    @field_validator("sessions", "users", mode="before")
    @classmethod
    def _unwrap(cls, value: Any) -> Any:
        if value is None:
            return []
        return unwrap_collection(value)
