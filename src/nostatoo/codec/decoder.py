"""Binary VDF decoder.

This module provides the decode() function that turns a binary VDF buffer
into an ordered tree of plain Python values.
"""

from __future__ import annotations

from ..exceptions import DecodeError, UnknownTypeError
from .bytepack import ByteReader
from .types import VdfMap, VdfType, VdfValue, token_to_text

Entry = tuple[str, VdfValue]


def decode(data: bytes | bytearray | memoryview) -> VdfMap:
    """Decode a binary VDF buffer.

    The whole buffer is a single named root entry, returned as a one-item map.
    Bytes left over once the root entry is complete are ignored; files written
    by Steam end with one such extra end-of-map byte.

    Args:
        data: Binary VDF contents

    Returns:
        ``{root_name: root_value}``, with maps in wire order

    Raises:
        UnknownTypeError: If a type byte is not a known code
        TruncatedBufferError: If the buffer ends in the middle of an entry
        DecodeError: If the buffer holds no root entry or nests too deeply

    Examples:
        ```python
        from nostatoo import decode

        tree = decode(b"\\x00m\\x00\\x08\\x08")
        assert tree == {"m": {}}
        ```
    """
    reader = ByteReader(data)

    try:
        entry = _decode_entry(reader)
    except RecursionError as e:
        raise DecodeError(f"Maps nested too deeply near offset 0x{reader.position():x}") from e

    if entry is None:
        raise DecodeError("Buffer holds no root entry (starts with end-of-map)")

    name, value = entry
    return {name: value}


def _decode_entry(reader: ByteReader) -> Entry | None:
    """Decode one entry at the reader's cursor.

    Args:
        reader: ByteReader positioned at a type byte

    Returns:
        ``(name, value)``, or None when the type byte closes the enclosing map

    Raises:
        DecodeError: If data is invalid or truncated
    """
    offset = reader.position()
    raw_type = reader.read_u8()
    try:
        value_type = VdfType(raw_type)
    except ValueError:
        raise UnknownTypeError(raw_type, offset) from None

    if value_type is VdfType.END_OF_MAP:
        return None

    name = token_to_text(reader.read_token())

    if value_type is VdfType.MAP:
        children: VdfMap = {}
        while True:
            child = _decode_entry(reader)
            if child is None:
                break
            child_name, child_value = child
            children[child_name] = child_value
        return name, children

    if value_type is VdfType.STRING:
        return name, token_to_text(reader.read_token())

    if value_type is VdfType.INTEGER:
        return name, reader.read_u32()

    raise DecodeError(f"Unhandled VDF type {value_type.name} at offset 0x{offset:x}")
