"""Main entry point for terminal reminders.

Wires settings and logging, then runs the due watcher on a background thread
and the command loop in the foreground. Both share one TodoStore.
"""
import argparse
import logging
from datetime import timedelta
from typing import List, Optional

from cli import CLI
from scheduler import DueWatcher
from settings import Settings
from store import TodoStore
from theme import highlight

JOIN_TIMEOUT = 5.0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Terminal reminder list with due-soon alerts")
    parser.add_argument("--interval", type=float, help="seconds between due-soon scans")
    parser.add_argument("--due-soon-minutes", type=int, help="how close to due an item counts as due soon")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.load()
    if args.interval is not None:
        settings.watch_interval = args.interval
    if args.due_soon_minutes is not None:
        settings.due_soon_minutes = args.due_soon_minutes
    if args.log_level:
        settings.log_level = args.log_level.upper()
    settings.validate()
    return settings


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = build_settings(args)
    except ValueError as e:
        parser.error(str(e))
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    store = TodoStore(due_soon_window=timedelta(minutes=settings.due_soon_minutes))
    watcher = DueWatcher(store, interval=settings.watch_interval,
                         out=lambda alert: print(highlight(alert)))
    watcher.start()
    try:
        CLI(store, prompt=settings.prompt).run()
    finally:
        watcher.stop()
        watcher.join(timeout=JOIN_TIMEOUT)

if __name__ == "__main__":
    main()
