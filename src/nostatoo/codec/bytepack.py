"""Byte-level packing and unpacking utilities.

This module provides the low-level cursor primitives used by the VDF codec.
Integers are little-endian, tokens are null-terminated.
"""

from __future__ import annotations

import struct

from ..exceptions import TokenTooLongError, TruncatedBufferError
from .types import TOKEN_MAX_LENGTH, UINT32_MAX

_U32 = struct.Struct("<I")


class ByteWriter:
    """Packs values into a growing byte buffer.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_u8(0x02)
        >>> writer.write_token(b"appid")
        >>> writer.write_u32(42)
        >>> data = writer.to_bytes()
    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._buffer = bytearray()

    def write_u8(self, value: int) -> None:
        """Write a single byte.

        Args:
            value: Byte value (0-255)

        Raises:
            ValueError: If value doesn't fit in one byte
        """
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Byte value must be 0-255, got {value}")
        self._buffer.append(value)

    def write_u32(self, value: int) -> None:
        """Write an unsigned 32-bit integer, little-endian.

        Args:
            value: Unsigned integer value to write

        Raises:
            ValueError: If value is negative or doesn't fit in 32 bits
        """
        if value < 0:
            raise ValueError(f"write_u32 requires non-negative value, got {value}")
        if value > UINT32_MAX:
            raise ValueError(f"Value {value} requires more than 32 bits (max: {UINT32_MAX})")
        self._buffer += _U32.pack(value)

    def write_token(self, data: bytes, max_length: int = TOKEN_MAX_LENGTH) -> None:
        """Write a null-terminated token.

        The terminator has to fit inside the token window, so the token itself
        can hold at most ``max_length - 1`` bytes.

        Args:
            data: Token bytes, without terminator
            max_length: Size of the token window

        Raises:
            ValueError: If data contains a NUL byte or is too long
        """
        if b"\x00" in data:
            raise ValueError("Token must not contain a NUL byte")
        if len(data) >= max_length:
            raise ValueError(
                f"Token of {len(data)} bytes does not fit the {max_length}-byte token window"
            )
        self._buffer += data
        self._buffer.append(0)

    def __len__(self) -> int:
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return the packed bytes."""
        return bytes(self._buffer)


class ByteReader:
    """Unpacks values from an in-memory byte buffer.

    Every read advances the cursor; reading past the end raises
    TruncatedBufferError instead of returning short data.

    Example:
        >>> reader = ByteReader(data)
        >>> type_byte = reader.read_u8()
        >>> name = reader.read_token()
        >>> value = reader.read_u32()
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a reader positioned at the start of data.

        Args:
            data: Byte buffer to unpack
        """
        self._data = bytes(data)
        self._position = 0

    def _require(self, count: int) -> None:
        available = len(self._data) - self._position
        if count > available:
            raise TruncatedBufferError(self._position, count, max(available, 0))

    def read_u8(self) -> int:
        """Read a single byte.

        Raises:
            TruncatedBufferError: If no more bytes are available
        """
        self._require(1)
        value = self._data[self._position]
        self._position += 1
        return value

    def read_u32(self) -> int:
        """Read an unsigned 32-bit little-endian integer.

        Raises:
            TruncatedBufferError: If fewer than 4 bytes are available
        """
        self._require(4)
        (value,) = _U32.unpack_from(self._data, self._position)
        self._position += 4
        return value

    def read_token(self, max_length: int = TOKEN_MAX_LENGTH) -> bytes:
        """Read a null-terminated token and skip past its terminator.

        The terminator is searched for within ``max_length`` bytes of the cursor.

        Args:
            max_length: Size of the token window

        Returns:
            Token bytes without the terminator

        Raises:
            TruncatedBufferError: If the buffer ends before a terminator is found
            TokenTooLongError: If the window holds no terminator
        """
        start = self._position
        end = self._data.find(b"\x00", start, start + max_length)
        if end == -1:
            window_end = start + max_length
            if window_end >= len(self._data):
                available = len(self._data) - start
                raise TruncatedBufferError(start, available + 1, available)
            raise TokenTooLongError(start, max_length)

        self._position = end + 1
        return self._data[start:end]

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current read offset."""
        return self._position
