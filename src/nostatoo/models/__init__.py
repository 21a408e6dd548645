"""Pydantic views over decoded VDF trees.

This module provides the VdfModel base class, field helpers and the
Shortcut model used by the command line.
"""

from __future__ import annotations

from .base import VdfModel
from .fields import AppId, BoundedInt, UInt32
from .shortcut import Shortcut

__all__ = [
    "VdfModel",
    "AppId",
    "BoundedInt",
    "UInt32",
    "Shortcut",
]
