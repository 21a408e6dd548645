"""nostatoo: Steam shortcuts.vdf codec and editor

A Python library and command line tool for the binary KeyValues (VDF) format
Steam uses to store non-Steam game shortcuts.

Key Features:
- Order-preserving decoder and encoder for binary VDF
- Byte-identical round trips of files written by Steam
- Typed, range-checked views of shortcuts (Pydantic)
- list/show/edit/dump/import commands for non-Steam games

Quick Start:
    >>> from nostatoo import decode, encode
    >>>
    >>> data = encode({"shortcuts": {"0": {"appid": 4206969420, "appname": "Nice app"}}})
    >>> tree = decode(data)
    >>> tree["shortcuts"]["0"]["appname"]
    'Nice app'
"""

from __future__ import annotations

from .codec import (
    TOKEN_MAX_LENGTH,
    VdfMap,
    VdfType,
    VdfValue,
    decode,
    dump,
    encode,
    load,
    read_file,
    write_file,
)
from .exceptions import (
    DecodeError,
    EncodeError,
    MultipleSteamAccountsError,
    NoSteamAccountError,
    NostatooError,
    ShortcutError,
    ShortcutNotFoundError,
    SteamConfigError,
    TokenTooLongError,
    TruncatedBufferError,
    UnknownTypeError,
    UnsupportedValueTypeError,
)
from .models import Shortcut

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "load",
    "dump",
    "read_file",
    "write_file",
    # Types
    "VdfType",
    "VdfMap",
    "VdfValue",
    "TOKEN_MAX_LENGTH",
    "Shortcut",
    # Exceptions
    "NostatooError",
    "DecodeError",
    "UnknownTypeError",
    "TruncatedBufferError",
    "TokenTooLongError",
    "EncodeError",
    "UnsupportedValueTypeError",
    "ShortcutError",
    "ShortcutNotFoundError",
    "SteamConfigError",
    "NoSteamAccountError",
    "MultipleSteamAccountsError",
    # Version
    "__version__",
]
