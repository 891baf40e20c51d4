"""Command-line interface loop for the reminder list.

Reads one line at a time, dispatches on the first token and prints the
outcome. All store access goes through TodoStore's locked methods, so the
due watcher can scan concurrently without seeing half-applied commands.
"""
import logging
from datetime import date, datetime, time
from typing import List, Optional

import clock
from store import TodoStore, NotFound
from theme import highlight

logger = logging.getLogger(__name__)

DEFAULT_TIME = "00:00"
EXIT_MESSAGE = "Exiting program..."
DATE_ERROR = "Invalid date format. Please use YYYY-MM-DD."
TIME_ERROR = "Invalid time format. Please use HH:MM."

USAGE = {
    'add': "Invalid command. Usage: add <name> <date> [time]",
    'remove': "Invalid command. Usage: remove <name>",
    'settime': "Invalid command. Usage: settime <name> <HH:MM>",
}


class CLI:
    def __init__(self, store: TodoStore, prompt: str = "> "):
        self.store: TodoStore = store
        self.prompt: str = prompt

    def run(self) -> None:
        """Main REPL loop; returns on 'exit', end of input or Ctrl-C."""
        try:
            while True:
                line = input(self.prompt)
                if not self.handle_line(line):
                    break
        except (KeyboardInterrupt, EOFError):
            print()
        finally:
            print(EXIT_MESSAGE)

    def handle_line(self, line: str) -> bool:
        """Run one command line. Returns False once the loop should stop."""
        tokens = line.split()
        if not tokens:
            return True
        if tokens[0] == 'exit':
            return False
        self._handle_command(tokens)
        return True

    # -------------------- command dispatch --------------------
    def _handle_command(self, tokens: List[str]) -> None:
        cmd = tokens[0]
        logger.debug("command %s", tokens)
        if cmd == 'add':
            self._cmd_add(tokens)
        elif cmd == 'remove':
            self._cmd_remove(tokens)
        elif cmd == 'list':
            self._cmd_list()
        elif cmd == 'settime':
            self._cmd_settime(tokens)
        else:
            print("Invalid command.")

    # ---- individual command helpers ----
    def _cmd_add(self, tokens: List[str]) -> None:
        if len(tokens) < 3:
            print(USAGE['add'])
            return
        name, date_text = tokens[1], tokens[2]
        time_text = tokens[3] if len(tokens) > 3 else DEFAULT_TIME
        day = _parse_date(date_text)
        if day is None:
            print(DATE_ERROR)
            return
        at = _parse_time(time_text)
        if at is None:
            print(TIME_ERROR)
            return
        due_at = _to_utc(day, at)
        if due_at is None:
            print(DATE_ERROR)
            return
        self.store.add(name, due_at)
        print("Item added.")

    def _cmd_remove(self, tokens: List[str]) -> None:
        if len(tokens) < 2:
            print(USAGE['remove'])
            return
        self.store.remove(tokens[1])
        print("Item removed.")

    def _cmd_list(self) -> None:
        lines = self.store.snapshot()
        if not lines:
            print("No items.")
            return
        for line in lines:
            print(highlight(line))

    def _cmd_settime(self, tokens: List[str]) -> None:
        if len(tokens) < 3:
            print(USAGE['settime'])
            return
        name = tokens[1]
        at = _parse_time(tokens[2])
        if at is None:
            print(TIME_ERROR)
            return
        due_at = _to_utc(clock.local_today(), at)
        if due_at is None:
            print(TIME_ERROR)
            return
        try:
            self.store.set_due_time(name, due_at)
        except NotFound as e:
            print(e)
            return
        print("Due time updated.")


def _parse_date(text: str) -> Optional[date]:
    try:
        return clock.parse_date(text)
    except ValueError:
        return None


def _parse_time(text: str) -> Optional[time]:
    try:
        return clock.parse_time(text)
    except ValueError:
        return None


def _to_utc(day: date, at: time) -> Optional[datetime]:
    try:
        return clock.local_to_utc(day, at)
    except ValueError:
        logger.debug("cannot place %s %s on the local clock", day, at)
        return None
