# src/sortscope/theme.py
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

THEMES = ("light", "dark")
DEFAULT_THEME = "light"


def settings_dir() -> Path:
    """``$SORTSCOPE_HOME`` if set, else ``~/.sortscope``."""
    home = os.environ.get("SORTSCOPE_HOME")
    return Path(home) if home else Path.home() / ".sortscope"


def _theme_path(path: Optional[str | Path]) -> Path:
    return Path(path) if path is not None else settings_dir() / "theme.json"


def load_theme(path: Optional[str | Path] = None) -> str:
    """
    Return the saved theme, falling back to the default when nothing was saved
    or the file holds something unusable.
    """
    p = _theme_path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return DEFAULT_THEME
    theme = data.get("theme") if isinstance(data, dict) else None
    return theme if theme in THEMES else DEFAULT_THEME


def save_theme(theme: str, path: Optional[str | Path] = None) -> Path:
    if theme not in THEMES:
        raise ValueError(f"theme must be one of {THEMES}, got {theme!r}")
    p = _theme_path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps({"theme": theme}), encoding="utf-8")
    return p


def toggle_theme(path: Optional[str | Path] = None) -> str:
    new = "dark" if load_theme(path) == "light" else "light"
    save_theme(new, path)
    return new
