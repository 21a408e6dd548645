"""Steam-side orchestration: locating and editing ``shortcuts.vdf``."""

from __future__ import annotations

from .config import SteamConfig
from .shortcuts import (
    SHORTCUTS_KEY,
    edit_shortcut,
    find_shortcut,
    iter_shortcuts,
    load_shortcuts,
    parse_appid,
    parse_edits,
    save_shortcuts,
    shortcut_collection,
    tree_from_json,
)

__all__ = [
    "SteamConfig",
    "SHORTCUTS_KEY",
    "edit_shortcut",
    "find_shortcut",
    "iter_shortcuts",
    "load_shortcuts",
    "parse_appid",
    "parse_edits",
    "save_shortcuts",
    "shortcut_collection",
    "tree_from_json",
]
