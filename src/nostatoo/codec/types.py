"""VDF value types and wire constants.

A decoded tree is made of plain Python values:

- ``dict[str, Value]`` for a Map (insertion order is the wire order)
- ``str`` for a String (``bytes`` is accepted when encoding)
- ``int`` for an unsigned 32-bit Integer

``END_OF_MAP`` only exists on the wire; it never appears in a tree.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from typing import Any, Dict, Union

from ..exceptions import UnsupportedValueTypeError

# > Each token can be up to 1024 characters long
# https://developer.valvesoftware.com/wiki/KeyValues
TOKEN_MAX_LENGTH = 1024

UINT32_MAX = 0xFFFFFFFF

# Tokens are decoded with surrogateescape so arbitrary bytes survive a round trip.
TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"

VdfValue = Union["VdfMap", str, bytes, int]
VdfMap = Dict[str, VdfValue]


class VdfType(enum.IntEnum):
    """Type codes of the binary format."""

    MAP = 0x00
    STRING = 0x01
    INTEGER = 0x02
    # Other codes exist in the wild but are not handled.
    END_OF_MAP = 0x08


def type_for(value: Any, path: str = "") -> VdfType:
    """Return the type code a Python value is written with.

    Args:
        value: Value found in a tree
        path: Slash-separated entry names leading to the value, for error messages

    Raises:
        UnsupportedValueTypeError: If the value is not a map, string or integer
    """
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool):
        raise UnsupportedValueTypeError(value, path)
    if isinstance(value, int):
        return VdfType.INTEGER
    if isinstance(value, (str, bytes)):
        return VdfType.STRING
    if isinstance(value, Mapping):
        return VdfType.MAP
    raise UnsupportedValueTypeError(value, path)


def token_to_text(raw: bytes) -> str:
    return raw.decode(TEXT_ENCODING, TEXT_ERRORS)


def text_to_token(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode(TEXT_ENCODING, TEXT_ERRORS)
