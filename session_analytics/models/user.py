"""Model representing a dashboard user."""

from __future__ import annotations

import datetime as dt
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class User(BaseModel):
    """A user record as returned by the users API.

    ``role`` is free text ("Senior Admin", "Employee - QA", ...).  It is
    classified once, when the record is validated, into the
    ``is_admin`` / ``is_employee`` flags so that aggregations never have
    to re-parse the text.  The flags are independent: a role mentioning
    both words sets both.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: str
    name: str = ""
    role: str = ""
    status: str = ""
    join_date: Optional[dt.date] = Field(default=None, alias="joinDate")
    is_admin: bool = False
    is_employee: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        if isinstance(value, int):
            return str(value)
        return value

    @field_validator("join_date", mode="before")
    @classmethod
    def _strip_time_component(cls, value: Any) -> Any:
        if isinstance(value, dt.datetime):
            return value.date()
        if isinstance(value, str) and len(value) > 10:
            return value[:10]
        if value == "":
            return None
        return value

    @model_validator(mode="before")
    @classmethod
    def _resolve_role_flags(cls, data: Any) -> Any:
        """Derive capability flags from the free-text role."""
        if not isinstance(data, dict):
            return data
        role = str(data.get("role") or "").lower()
        data = dict(data)
        data["is_admin"] = "admin" in role
        data["is_employee"] = "employee" in role
        return data
