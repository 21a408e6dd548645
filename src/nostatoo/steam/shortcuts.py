"""Operations on the non-Steam game shortcuts stored in ``shortcuts.vdf``.

The decoded document looks like::

    {"shortcuts": {"0": {"appid": ..., "appname": ..., "Exe": ..., "tags": {...}},
                   "1": {...}}}

Trees are never edited in place: edit_shortcut() returns a new tree with the
edited entry swapped in at its original position.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Iterator, Mapping
from pathlib import Path
from typing import Any

import structlog
from pydantic import TypeAdapter, ValidationError

from ..codec import read_file, write_file
from ..codec.types import UINT32_MAX, VdfMap, VdfValue
from ..exceptions import ShortcutError, ShortcutNotFoundError
from ..models import AppId, Shortcut

logger = structlog.wrap_logger(logging.getLogger(__name__))

SHORTCUTS_KEY = "shortcuts"

_uint32 = TypeAdapter(AppId)


def parse_appid(text: str | int) -> int:
    """Parse an appid typed by the user.

    Raises:
        ShortcutError: If text is not an integer in the unsigned 32-bit range
    """
    try:
        return _uint32.validate_python(text)
    except ValidationError as e:
        raise ShortcutError(f"Invalid appid {text!r}: expected an integer 0-{UINT32_MAX}") from e


def shortcut_collection(tree: Mapping[str, VdfValue]) -> Mapping[str, VdfValue]:
    """Return the ``shortcuts`` map of a document.

    Raises:
        ShortcutError: If the document has no ``shortcuts`` map
    """
    collection = tree.get(SHORTCUTS_KEY) if isinstance(tree, Mapping) else None
    if not isinstance(collection, Mapping):
        raise ShortcutError(f"Document has no {SHORTCUTS_KEY!r} map")
    return collection


def iter_shortcuts(tree: Mapping[str, VdfValue]) -> Iterator[tuple[str, Shortcut]]:
    """Yield ``(key, Shortcut)`` pairs in file order.

    Raises:
        ShortcutError: If an entry is not a map or fails validation
    """
    for key, entry in shortcut_collection(tree).items():
        yield key, to_shortcut(key, entry)


def to_shortcut(key: str, entry: Any) -> Shortcut:
    """Validate one entry of the collection into a Shortcut."""
    if not isinstance(entry, Mapping):
        raise ShortcutError(f"Shortcut {key} is not a map")
    try:
        return Shortcut.from_vdf(entry)
    except ValidationError as e:
        raise ShortcutError(f"Shortcut {key} is invalid: {e}") from e


def find_shortcut(tree: Mapping[str, VdfValue], appid: int) -> tuple[str, Mapping[str, VdfValue]]:
    """Return the collection key and entry of the shortcut with this appid.

    Raises:
        ShortcutNotFoundError: If no entry carries the appid
    """
    for key, entry in shortcut_collection(tree).items():
        if isinstance(entry, Mapping) and entry.get("appid") == appid:
            return key, entry
    raise ShortcutNotFoundError(appid)


def parse_edits(args: Iterable[str]) -> dict[str, str]:
    """Parse ``NAME=VALUE`` arguments, splitting on the first equal sign.

    Later arguments win over earlier ones for the same name.

    Raises:
        ShortcutError: If an argument has no equal sign or an empty name
    """
    edits: dict[str, str] = {}
    for arg in args:
        name, sep, value = arg.partition("=")
        if not sep or not name:
            raise ShortcutError(f"Expected NAME=VALUE, got {arg!r}")
        edits[name] = value
    return edits


def edit_shortcut(tree: VdfMap, appid: int, edits: Mapping[str, str]) -> VdfMap:
    """Return a copy of tree with one shortcut's fields replaced.

    Fields that currently hold an Integer are parsed as unsigned 32-bit
    integers. Map fields (``tags``) can't be edited. Everything else,
    including fields the shortcut doesn't have yet, is stored as a String;
    new fields are appended after the existing ones.

    Args:
        tree: Decoded shortcuts document (left untouched)
        appid: Shortcut to edit
        edits: Field name -> new value as typed by the user

    Returns:
        New document

    Raises:
        ShortcutNotFoundError: If no entry carries the appid
        ShortcutError: If an edit targets a map field or an integer is invalid
    """
    key, entry = find_shortcut(tree, appid)

    edited = copy.deepcopy(dict(entry))
    for name, text in edits.items():
        edited[name] = _coerce_edit(name, entry.get(name), text)

    new_tree = copy.deepcopy(tree)
    new_tree[SHORTCUTS_KEY][key] = edited  # type: ignore[index]

    logger.info('edited shortcut', appid=appid, key=key, fields=list(edits))
    return new_tree


def _coerce_edit(name: str, current: VdfValue | None, text: str) -> VdfValue:
    if isinstance(current, Mapping):
        raise ShortcutError(f"Field {name!r} is a map and can't be edited this way")

    if isinstance(current, int) and not isinstance(current, bool):
        try:
            return _uint32.validate_python(text)
        except ValidationError as e:
            raise ShortcutError(
                f"Field {name!r} holds an integer; {text!r} is not an integer 0-{UINT32_MAX}"
            ) from e

    return text


def tree_from_json(document: Any) -> VdfMap:
    """Turn a JSON shortcuts dump back into a tree.

    Only objects, strings and unsigned 32-bit integers have a VDF form.

    Raises:
        ShortcutError: If the document can't be stored as a shortcuts file
    """
    if not isinstance(document, dict) or len(document) != 1:
        raise ShortcutError("JSON document must be an object with exactly one root entry")

    tree = _from_json(document, "")
    shortcut_collection(tree)
    return tree  # type: ignore[return-value]


def _from_json(value: Any, path: str) -> VdfValue:
    if isinstance(value, dict):
        return {
            str(name): _from_json(child, f"{path}/{name}" if path else str(name))
            for name, child in value.items()
        }

    if isinstance(value, str):
        return value

    if isinstance(value, int) and not isinstance(value, bool):
        if not 0 <= value <= UINT32_MAX:
            raise ShortcutError(f"{path}: integer {value} is outside 0-{UINT32_MAX}")
        return value

    kind = "null" if value is None else type(value).__name__
    raise ShortcutError(f"{path}: JSON {kind} values can't be stored in VDF")


def load_shortcuts(path: str | Path) -> VdfMap:
    """Read a shortcuts file and check it holds a ``shortcuts`` map."""
    tree = read_file(path)
    shortcut_collection(tree)
    return tree


def save_shortcuts(path: str | Path, tree: VdfMap) -> None:
    """Write a shortcuts document back to disk."""
    shortcut_collection(tree)
    write_file(path, tree)
    logger.info('saved shortcuts', path=str(path), count=len(shortcut_collection(tree)))
