"""Reading and writing binary VDF files."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import BinaryIO

import structlog

from .decoder import decode
from .encoder import encode
from .types import VdfMap, VdfValue

# unconfigured structlog falls through to stdlib logging, which drops debug
logger = structlog.wrap_logger(logging.getLogger(__name__))


def load(fp: BinaryIO) -> VdfMap:
    """Decode the whole contents of a binary file object."""
    return decode(fp.read())


def dump(tree: Mapping[str, VdfValue], fp: BinaryIO) -> None:
    """Encode a tree and write it to a binary file object.

    Nothing is written if encoding fails.
    """
    fp.write(encode(tree))


def read_file(path: str | Path) -> VdfMap:
    """Read and decode a binary VDF file.

    Args:
        path: File to read

    Returns:
        Decoded tree

    Raises:
        OSError: If the file can't be read
        DecodeError: If the contents are not valid binary VDF
    """
    path = Path(path)
    data = path.read_bytes()
    logger.debug('read vdf', path=str(path), size=len(data))
    return decode(data)


def write_file(path: str | Path, tree: Mapping[str, VdfValue]) -> None:
    """Encode a tree and write it to a file.

    The tree is encoded before the file is opened, so an EncodeError leaves an
    existing file untouched.

    Args:
        path: File to write
        tree: Root map to encode

    Raises:
        EncodeError: If the tree can't be encoded
        OSError: If the file can't be written
    """
    path = Path(path)
    data = encode(tree)
    with open(path, "wb") as fp:
        fp.write(data)
    logger.debug('wrote vdf', path=str(path), size=len(data))
