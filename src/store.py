"""TodoStore: the shared reminder map, guarded by a single lock.

Both the command loop and the due watcher go through this class. Every
public method takes the lock for its own duration only, so callers see each
operation fully applied or not at all. Status tags are recomputed on every
snapshot from the clock; nothing about urgency is stored.
"""
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Optional
import logging
import threading

from models import TodoItem, ONE_HOUR
from clock import utc_now

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class NotFound(KeyError):
    """Raised when an operation targets a name that is not in the store."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return "Item not found."


def format_item(item: TodoItem, now: datetime, window: timedelta = ONE_HOUR) -> str:
    """Render one snapshot line: '<name>[ <STATUS>] (due in <N> minutes)'."""
    status = item.status(now, window)
    tag = f" {status}" if status else ""
    return f"{item.name}{tag} (due in {item.minutes_until_due(now)} minutes)"


class TodoStore:
    def __init__(self, now: Optional[Clock] = None, due_soon_window: timedelta = ONE_HOUR):
        self._items: Dict[str, TodoItem] = {}
        self._lock = threading.Lock()
        self._now: Clock = now or utc_now
        self.due_soon_window = due_soon_window

    # -------------------- mutation --------------------
    def add(self, name: str, due_at: datetime) -> None:
        with self._lock:
            self._items[name] = TodoItem(name=name, due_at=due_at)
        logger.debug("added %r due %s", name, due_at.isoformat())

    def remove(self, name: str) -> None:
        with self._lock:
            removed = self._items.pop(name, None)
        if removed is not None:
            logger.debug("removed %r", name)

    def set_due_time(self, name: str, due_at: datetime) -> None:
        """Move an existing item's due time; NotFound leaves the store untouched."""
        with self._lock:
            item = self._items.get(name)
            if item is None:
                raise NotFound(name)
            item.due_at = due_at
        logger.debug("rescheduled %r to %s", name, due_at.isoformat())

    # -------------------- queries --------------------
    def snapshot(self, only: Optional[str] = None) -> List[str]:
        """Freshly classified listing of every item. Order is not meaningful.

        With `only`, keep just the items whose computed status equals it.
        """
        with self._lock:
            now = self._now()
            items = list(self._items.values())
            if only is not None:
                items = [item for item in items if item.status(now, self.due_soon_window) == only]
            return [format_item(item, now, self.due_soon_window) for item in items]

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._items

    def __str__(self) -> str:
        return f'TodoStore: {len(self)} items'
