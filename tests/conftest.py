"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from nostatoo import encode

ACCOUNT_ID = "12345678"


@pytest.fixture
def shortcuts_tree() -> dict[str, Any]:
    """Two shortcuts laid out the way Steam writes them."""
    return {
        "shortcuts": {
            "0": {
                "appid": 4206969420,
                "appname": "Nice app",
                "Exe": '"/usr/bin/nice-app"',
                "StartDir": '"/usr/bin/"',
                "icon": "",
                "ShortcutPath": "",
                "LaunchOptions": "",
                "IsHidden": 0,
                "AllowDesktopConfig": 1,
                "LastPlayTime": 0,
                "tags": {"0": "favorite"},
            },
            "1": {
                "appid": 3000000001,
                "appname": "Other game",
                "Exe": '"/opt/other/run.sh"',
                "StartDir": '"/opt/other/"',
                "LaunchOptions": "--fullscreen",
                "tags": {},
            },
        }
    }


@pytest.fixture
def shortcuts_file(tmp_path: Path, shortcuts_tree: dict[str, Any]) -> Path:
    """shortcuts.vdf written to a standalone path."""
    path = tmp_path / "shortcuts.vdf"
    path.write_bytes(encode(shortcuts_tree))
    return path


@pytest.fixture
def steam_dir(tmp_path: Path, shortcuts_tree: dict[str, Any]) -> Path:
    """Steam directory with a single logged-in account holding shortcuts.vdf."""
    steam = tmp_path / "Steam"
    config_dir = steam / "userdata" / ACCOUNT_ID / "config"
    config_dir.mkdir(parents=True)
    (config_dir / "shortcuts.vdf").write_bytes(encode(shortcuts_tree))
    return steam
