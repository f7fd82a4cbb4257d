from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path
from typing import Any

import pytest

repo_root = Path(__file__).resolve().parents[1]
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from session_analytics.models import Session, User


def make_session(**overrides: Any) -> Session:
    data: dict[str, Any] = {
        "id": "s-1",
        "date": "2024-06-10",
        "time": "10:00",
        "status": "upcoming",
        "technology": "React",
        "createdBy": "u-1",
    }
    data.update(overrides)
    return Session.model_validate(data)


def make_user(**overrides: Any) -> User:
    data: dict[str, Any] = {
        "id": "u-1",
        "name": "Alice Smith",
        "role": "Employee",
        "status": "active",
        "joinDate": "2024-03-15",
    }
    data.update(overrides)
    return User.model_validate(data)


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 6, 12, 12, 0)
