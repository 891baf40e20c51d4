"""Runtime settings.

Resolution priority for every key: real environment variable > project .env
file > built-in default. Command-line flags parsed in main.py override the
result afterwards.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

ENV_FILE = Path(__file__).resolve().parent.parent / '.env'
ENV_PREFIX = 'REMINDERS_'

DEFAULT_WATCH_INTERVAL = 300.0
DEFAULT_DUE_SOON_MINUTES = 60
DEFAULT_LOG_LEVEL = 'WARNING'
DEFAULT_PROMPT = '> '


def read_env_file(path: Optional[Path] = None) -> Dict[str, str]:
    """Parse KEY=VALUE lines; blank lines and '#' comments are skipped."""
    path = path or ENV_FILE
    values: Dict[str, str] = {}
    if not path.exists():
        return values
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        values[k.strip()] = v.strip().strip('"\'')
    return values


def lookup(key: str, env: Optional[Mapping[str, str]] = None,
           file_values: Optional[Mapping[str, str]] = None) -> Optional[str]:
    env = os.environ if env is None else env
    if env.get(key):
        return env[key]
    if file_values is None:
        file_values = read_env_file()
    return file_values.get(key)


@dataclass
class Settings:
    watch_interval: float = DEFAULT_WATCH_INTERVAL
    due_soon_minutes: int = DEFAULT_DUE_SOON_MINUTES
    log_level: str = DEFAULT_LOG_LEVEL
    prompt: str = DEFAULT_PROMPT

    @classmethod
    def load(cls, env: Optional[Mapping[str, str]] = None,
             env_file: Optional[Path] = None) -> 'Settings':
        """Build settings from the environment; bad numbers raise ValueError."""
        file_values = read_env_file(env_file)

        def get(name: str) -> Optional[str]:
            return lookup(ENV_PREFIX + name, env, file_values)

        settings = cls()
        interval = get('WATCH_INTERVAL')
        if interval is not None:
            settings.watch_interval = _number(float, ENV_PREFIX + 'WATCH_INTERVAL', interval)
        minutes = get('DUE_SOON_MINUTES')
        if minutes is not None:
            settings.due_soon_minutes = _number(int, ENV_PREFIX + 'DUE_SOON_MINUTES', minutes)
        level = get('LOG_LEVEL')
        if level:
            settings.log_level = level.upper()
        prompt = get('PROMPT')
        if prompt is not None:
            settings.prompt = prompt
        settings.validate()
        return settings

    def validate(self) -> None:
        if self.watch_interval <= 0:
            raise ValueError(f'watch interval must be positive, got {self.watch_interval}')
        if self.due_soon_minutes <= 0:
            raise ValueError(f'due-soon window must be positive, got {self.due_soon_minutes}')
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f'unknown log level {self.log_level!r}')


def _number(kind, key: str, raw: str):
    try:
        return kind(raw)
    except ValueError:
        raise ValueError(f'{key} must be a number, got {raw!r}') from None
