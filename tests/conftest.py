from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep saved preferences out of the real home directory."""
    monkeypatch.setenv("SORTSCOPE_HOME", str(tmp_path / "home"))
