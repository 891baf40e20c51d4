"""Background due watcher.

Runs on its own daemon thread and periodically prints an alert for every
item tagged DUE SOON. The store lock is only held inside snapshot(); the
wait between scans happens on a stop event so the entry point can ask the
watcher to finish instead of abandoning it at process exit.
"""
from typing import Callable, List
import logging
import threading

from models import DUE_SOON
from store import TodoStore

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 5 * 60.0
ALERT_PREFIX = "Due soon: "


class DueWatcher(threading.Thread):
    def __init__(self, store: TodoStore, interval: float = DEFAULT_INTERVAL,
                 out: Callable[[str], None] = print):
        super().__init__(name="due-watcher", daemon=True)
        self.store = store
        self.interval = interval
        self._out = out
        self._stop_event = threading.Event()

    def run(self) -> None:
        logger.info("due watcher started (interval=%ss)", self.interval)
        while not self._stop_event.is_set():
            try:
                self.check_once()
            except Exception:
                logger.exception("due watcher scan failed")
            self._stop_event.wait(self.interval)
        logger.info("due watcher stopped")

    def check_once(self) -> List[str]:
        """Scan the store once; emit and return the alert lines."""
        alerts = [ALERT_PREFIX + line for line in self.store.snapshot(only=DUE_SOON)]
        for alert in alerts:
            self._out(alert)
        return alerts

    def stop(self) -> None:
        self._stop_event.set()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()
