"""Binary VDF codec for nostatoo.

This module provides decoding and encoding of the binary KeyValues (VDF)
format Steam uses for files such as ``shortcuts.vdf``.
"""

from __future__ import annotations

from .decoder import decode
from .encoder import encode
from .io import dump, load, read_file, write_file
from .types import TOKEN_MAX_LENGTH, UINT32_MAX, VdfMap, VdfType, VdfValue, type_for

__all__ = [
    "encode",
    "decode",
    "load",
    "dump",
    "read_file",
    "write_file",
    "VdfType",
    "VdfMap",
    "VdfValue",
    "TOKEN_MAX_LENGTH",
    "UINT32_MAX",
    "type_for",
]
