"""Color & style helpers for status tags.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Palette overrides via REMINDERS_OVERDUE / REMINDERS_DUE_SOON (env or .env).
"""
from __future__ import annotations
import os, sys

from models import OVERDUE, DUE_SOON
from settings import lookup

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

def _code(part: str) -> str:
    return f"\033[{part}m" if _ENABLE else ''

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _is_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    return f"\033[38;5;{16 + 36 * r6 + 6 * g6 + b6}m"

def _from_hex(hex_code: str) -> str:
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return f"\033[38;2;{r};{g};{b}m"
    return _fg_256(r, g, b)

def _palette(key: str, default: str) -> str:
    value = lookup(key)
    return '#' + value.lstrip('#') if value and _is_hex(value) else default

RESET = _code('0')
BOLD = _code('1')

HEX_OVERDUE_DEFAULT = '#E5533D'
HEX_DUE_SOON_DEFAULT = '#F6C744'

HEX_OVERDUE = _palette('REMINDERS_OVERDUE', HEX_OVERDUE_DEFAULT)
HEX_DUE_SOON = _palette('REMINDERS_DUE_SOON', HEX_DUE_SOON_DEFAULT)

STATUS_COLOR = {
    OVERDUE: _from_hex(HEX_OVERDUE) + BOLD,
    DUE_SOON: _from_hex(HEX_DUE_SOON),
}

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

def highlight(line: str) -> str:
    """Color the first status tag found in a snapshot line; plain lines pass through."""
    for status, style in STATUS_COLOR.items():
        tag = f" {status} ("
        if tag in line:
            return line.replace(tag, f" {color(status, style)} (", 1)
    return line

__all__ = ['color', 'highlight', 'RESET', 'BOLD', 'STATUS_COLOR', 'HEX_OVERDUE', 'HEX_DUE_SOON', '_ENABLE']
