"""Shortcut commands of the nostatoo CLI."""

from __future__ import annotations

import argparse
import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from ..exceptions import ShortcutError
from ..models import Shortcut
from ..steam import (
    SteamConfig,
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
from ..steam.shortcuts import to_shortcut

EDIT_USAGE = """\
nostatoo edit-non-steam-game <appid> [args]

args are given as key/value elements, separated by the first equal sign.

NOTE: There is no validation for fields. Non-existent fields will be added blindly.
NOTE: Tags cannot be edited this way yet.

For example:

  nostatoo edit-non-steam-game 4206969420 "appname=Nice app"
  nostatoo edit-non-steam-game 4206969420 'Exe="/run/current-system/sw/bin/nice-app"'
"""


def _json(value: Any) -> str:
    return json.dumps(value)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def print_shortcut(key: str, entry: Mapping[str, Any]) -> None:
    """Print one shortcut: known fields first, then everything else."""
    shortcut = to_shortcut(key, entry)
    known = shortcut.display_fields()

    print(f"(#{key}) {_json(shortcut.appname)}")
    for name, label in Shortcut.DISPLAY_FIELDS.items():
        print(f"  {label}: {_json(known[name])}")

    print()
    print("Extra data:")
    for name, value in shortcut.extra_data().items():
        print(f"  - {name}: {_json(value)}")


def list_non_steam_games(config: SteamConfig, args: argparse.Namespace) -> int:
    tree = load_shortcuts(config.shortcuts_path())
    for key, shortcut in iter_shortcuts(tree):
        print(f"{key}: {_text(shortcut.appid)}, {_text(shortcut.appname)} ")
    print()
    return 0


def show_non_steam_game(config: SteamConfig, args: argparse.Namespace) -> int:
    appid = parse_appid(args.appid)
    tree = load_shortcuts(config.shortcuts_path())
    key, entry = find_shortcut(tree, appid)
    print_shortcut(key, entry)
    return 0


def edit_non_steam_game(config: SteamConfig, args: argparse.Namespace) -> int:
    """Apply NAME=VALUE edits to one shortcut and write the file back."""
    if args.appid is None or not args.edits:
        print(EDIT_USAGE)
        return 1

    appid = parse_appid(args.appid)
    edits = parse_edits(args.edits)

    path = config.shortcuts_path()
    tree = load_shortcuts(path)
    key, _ = find_shortcut(tree, appid)

    edited = edit_shortcut(tree, appid, edits)
    save_shortcuts(path, edited)

    print("Edited...")
    print()
    # Looked up by key: the edit may have changed the appid
    print_shortcut(key, shortcut_collection(edited)[key])  # type: ignore[arg-type]
    return 0


def dump_non_steam_games(config: SteamConfig, args: argparse.Namespace) -> int:
    tree = load_shortcuts(config.shortcuts_path())
    print(json.dumps(tree, indent=2))
    return 0


def import_non_steam_games(config: SteamConfig, args: argparse.Namespace) -> int:
    """Replace shortcuts.vdf with the contents of a JSON dump."""
    source = Path(args.json_file)
    try:
        document = json.loads(source.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        raise ShortcutError(f"{source} is not UTF-8 text: {e}") from e
    except json.JSONDecodeError as e:
        raise ShortcutError(f"{source} is not valid JSON: {e}") from e

    tree = tree_from_json(document)
    path = config.shortcuts_path()
    save_shortcuts(path, tree)

    count = len(shortcut_collection(tree))
    print(f"Imported {count} non-steam game{'s' if count != 1 else ''} into {path}")
    return 0
