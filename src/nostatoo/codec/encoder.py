"""Binary VDF encoder.

This module provides the encode() function that turns a tree of plain Python
values back into the binary VDF layout Steam writes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..exceptions import EncodeError
from .bytepack import ByteWriter
from .types import VdfType, VdfValue, text_to_token, type_for


def encode(tree: Mapping[str, VdfValue]) -> bytes:
    """Encode a tree to binary VDF.

    The root map is written without a type or name of its own: its entries
    are written one after the other and closed with an end-of-map byte. A
    ``{"shortcuts": {...}}`` tree therefore ends with two end-of-map bytes,
    one for ``shortcuts`` and one for the unnamed root.

    Args:
        tree: Root map, usually holding a single named entry

    Returns:
        Binary VDF contents

    Raises:
        EncodeError: If the root is not a map, a name or value can't be written,
            or maps nest too deeply
        UnsupportedValueTypeError: If the tree holds a value that is not a map,
            string or integer

    Examples:
        ```python
        from nostatoo import encode

        data = encode({"shortcuts": {"x": 1}})
        assert data == b"\\x00shortcuts\\x00\\x02x\\x00\\x01\\x00\\x00\\x00\\x08\\x08"
        ```
    """
    if not isinstance(tree, Mapping):
        raise EncodeError(
            f"Root of a VDF document must be a map, got {type(tree).__name__}"
        )

    writer = ByteWriter()
    try:
        _encode_map(writer, tree, "")
    except RecursionError as e:
        raise EncodeError(f"Maps nested too deeply after {len(writer)} bytes") from e
    return writer.to_bytes()


def _encode_map(writer: ByteWriter, entries: Mapping[Any, Any], path: str) -> None:
    """Write each entry of a map followed by the end-of-map byte.

    Nested maps recurse straight back into this function, one call per level,
    so any tree decode() can build is shallow enough to encode.

    Args:
        writer: ByteWriter to write to
        entries: Map to encode
        path: Slash-separated names leading to this map

    Raises:
        EncodeError: If a name or value is invalid
    """
    for name, value in entries.items():
        entry_path = f"{path}/{name}" if path else str(name)
        value_type = type_for(value, entry_path)

        if not isinstance(name, (str, bytes)):
            raise EncodeError(
                f"Entry {entry_path}: names must be str or bytes, got {type(name).__name__}"
            )

        writer.write_u8(value_type)
        _write_token(writer, name, f"Entry {entry_path}: name")

        if value_type is VdfType.MAP:
            _encode_map(writer, value, entry_path)
        elif value_type is VdfType.STRING:
            _write_token(writer, value, f"Entry {entry_path}: value")
        elif value_type is VdfType.INTEGER:
            try:
                writer.write_u32(value)
            except ValueError as e:
                raise EncodeError(
                    f"Entry {entry_path}: integer {value} is not an unsigned 32-bit value"
                ) from e
        else:
            raise EncodeError(f"Entry {entry_path}: unhandled VDF type {value_type.name}")

    writer.write_u8(VdfType.END_OF_MAP)


def _write_token(writer: ByteWriter, text: str | bytes, context: str) -> None:
    try:
        writer.write_token(text_to_token(text))
    except ValueError as e:
        raise EncodeError(f"{context}: {e}") from e
