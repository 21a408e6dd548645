"""Field type helpers and utilities.

This module provides convenience functions and type aliases for modeling
VDF entries with range-checked identifiers.
"""

from __future__ import annotations

from typing import Annotated, Any, cast

from pydantic import Field
from pydantic.fields import FieldInfo

from ..codec.types import UINT32_MAX


def BoundedInt(*, ge: int | None = None, le: int | None = None, **kwargs: Any) -> FieldInfo:
    """Create a bounded integer field.

    This is a convenience wrapper around Pydantic's Field() that sets both
    ge= and le= constraints.

    Args:
        ge: Minimum value (inclusive)
        le: Maximum value (inclusive)
        **kwargs: Additional Field() arguments (description, default, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.
    """
    return cast(FieldInfo, Field(ge=ge, le=le, **kwargs))


def UInt32(**kwargs: Any) -> FieldInfo:
    """Create a field holding a VDF Integer (unsigned, 32 bits).

    Example:
        >>> class Entry(VdfModel):
        ...     appid: int = UInt32()
        ...     last_played: Annotated[int, UInt32(default=0)]
    """
    return BoundedInt(ge=0, le=UINT32_MAX, **kwargs)


AppId = Annotated[int, UInt32(description="Steam application identifier")]
