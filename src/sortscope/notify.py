# src/sortscope/notify.py
from __future__ import annotations

import sys
from typing import Callable, List, Optional, TextIO, Tuple

Notifier = Callable[[str, str], None]


def console_notifier(stream: Optional[TextIO] = None) -> Notifier:
    """A notifier printing ``⚠️ title: message`` to ``stream`` (stderr by default)."""
    def _notify(message: str, title: str = "Error") -> None:
        print(f"⚠️  {title}: {message}", file=stream or sys.stderr)
    return _notify


class RecordingNotifier:
    """Collects (title, message) pairs instead of showing them."""

    def __init__(self) -> None:
        self.alerts: List[Tuple[str, str]] = []

    def __call__(self, message: str, title: str = "Error") -> None:
        self.alerts.append((title, message))


_notifier: Notifier = console_notifier()


def set_notifier(notifier: Notifier) -> Notifier:
    """Install ``notifier`` for ``notify`` and return the previous one."""
    global _notifier
    previous = _notifier
    _notifier = notifier
    return previous


def notify(message: str, title: str = "Error") -> None:
    _notifier(message, title)
