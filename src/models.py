"""Data models for the terminal reminder list.

Only exposes the TodoItem dataclass. Due times are stored as aware UTC
datetimes; everything shown to the user (remaining minutes, status tag)
is derived on demand against a caller-supplied "now".
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timedelta

ZERO = timedelta(0)
ONE_HOUR = timedelta(hours=1)

OVERDUE = "OVERDUE"
DUE_SOON = "DUE SOON"


@dataclass
class TodoItem:
    """A single reminder.

    Fields:
        name: Unique key within the store.
        due_at: Aware UTC datetime at which the item becomes due.
    """
    name: str
    due_at: datetime

    def time_until_due(self, now: datetime) -> timedelta:
        # saturating: anything at or past due collapses to zero
        remaining = self.due_at - now
        return remaining if remaining > ZERO else ZERO

    def minutes_until_due(self, now: datetime) -> int:
        return int(self.time_until_due(now).total_seconds() // 60)

    def is_due_soon(self, now: datetime, window: timedelta = ONE_HOUR) -> bool:
        remaining = self.time_until_due(now)
        return ZERO < remaining <= window

    def is_overdue(self, now: datetime) -> bool:
        return self.time_until_due(now) == ZERO

    def status(self, now: datetime, window: timedelta = ONE_HOUR) -> str:
        if self.is_overdue(now):
            return OVERDUE
        if self.is_due_soon(now, window):
            return DUE_SOON
        return ""

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"TodoItem(name={self.name}, due_at={self.due_at.isoformat()})"
