"""Per-user cooldowns, stored as last-use timestamps on the user row."""
from __future__ import annotations

import datetime as dt
from typing import Optional

from ..models import User
from ..store import Store

# action key -> timestamp column on User
FIELDS = {
    "farm": "last_farmed_at",
    "steal": "last_stole_at",
}


def remaining(last: Optional[dt.datetime], seconds: float, now: dt.datetime) -> float:
    if last is None:
        return 0.0
    left = seconds - (now - last).total_seconds()
    return max(left, 0.0)


def consume(store: Store, user: User, key: str, now: dt.datetime) -> None:
    field = FIELDS[key]
    store.update(User, {field: now}, id=user.id)
    setattr(user, field, now)


def format_wait(seconds: float) -> str:
    secs = int(seconds + 0.999)
    if secs >= 60:
        mins = (secs + 59) // 60
        return f"{mins} minuto" if mins == 1 else f"{mins} minutos"
    return f"{secs} segundo" if secs == 1 else f"{secs} segundos"
