"""Exception hierarchy for nostatoo.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from NostatooError for easy catching of any nostatoo-specific error.
"""

from __future__ import annotations

from typing import Any


class NostatooError(Exception):
    """Base exception for all nostatoo errors."""

    pass


class DecodeError(NostatooError):
    """Raised when decoding a binary VDF buffer fails.

    Examples:
        - Unknown type byte
        - Truncated buffer (name, string, integer or type tag cut short)
        - Token without a terminator inside the token window
        - Buffer without a root entry
    """

    pass


class UnknownTypeError(DecodeError):
    """Raised when a type byte outside the known codes is encountered."""

    def __init__(self, type_byte: int, offset: int) -> None:
        super().__init__(f"Unknown VDF type 0x{type_byte:02x} at offset 0x{offset:x}")
        self.type_byte = type_byte
        self.offset = offset


class TruncatedBufferError(DecodeError):
    """Raised when a read runs past the end of the buffer."""

    def __init__(self, offset: int, needed: int, available: int) -> None:
        super().__init__(
            f"Truncated buffer at offset 0x{offset:x}: need {needed} bytes, have {available}"
        )
        self.offset = offset
        self.needed = needed
        self.available = available


class TokenTooLongError(DecodeError):
    """Raised when no null terminator is found inside the token window."""

    def __init__(self, offset: int, window: int) -> None:
        super().__init__(f"No terminator within {window} bytes of offset 0x{offset:x}")
        self.offset = offset
        self.window = window


class EncodeError(NostatooError):
    """Raised when encoding a tree fails.

    Examples:
        - Root is not a map
        - Integer out of the unsigned 32-bit range
        - Name or string containing a NUL byte, or too long for the token window
    """

    pass


class UnsupportedValueTypeError(EncodeError):
    """Raised when a tree holds a value the encoder has no case for."""

    def __init__(self, value: Any, path: str = "") -> None:
        where = f" at {path!r}" if path else ""
        super().__init__(f"Unsupported VDF value type {type(value).__name__}{where}")
        self.value = value
        self.path = path


class ShortcutError(NostatooError):
    """Raised when a shortcuts document or a requested edit is invalid.

    Examples:
        - Missing "shortcuts" collection
        - Malformed appid or NAME=VALUE argument
        - Attempt to overwrite a map field such as tags
    """

    pass


class ShortcutNotFoundError(ShortcutError):
    """Raised when no shortcut carries the requested appid."""

    def __init__(self, appid: int) -> None:
        super().__init__(f"No game found for appid {appid}.")
        self.appid = appid


class SteamConfigError(NostatooError):
    """Raised when the Steam configuration directory cannot be resolved."""

    pass


class NoSteamAccountError(SteamConfigError):
    """Raised when no account directory exists under userdata."""

    pass


class MultipleSteamAccountsError(SteamConfigError):
    """Raised when several accounts exist and none was selected."""

    def __init__(self, accounts: list[str]) -> None:
        super().__init__(
            "nostatoo currently works only when a single steam account is connected "
            f"(found {', '.join(accounts)}; pick one with --user)."
        )
        self.accounts = accounts
