"""Base model class for typed views over VDF maps."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

M = TypeVar("M", bound="VdfModel")


class VdfModel(BaseModel):
    """Base class for read-only, typed views of a decoded VDF map.

    Known entries are declared as fields, using the on-disk entry name as the
    alias. Entries without a field are kept as extra data in file order, so a
    view never hides anything the map holds.

    Example:
        >>> class Entry(VdfModel):
        ...     appid: int = UInt32()
        ...     exe: str | None = Field(default=None, alias="Exe")
        >>> entry = Entry.from_vdf({"appid": 7, "Exe": "/bin/true", "Devkit": 0})
        >>> entry.model_extra
        {'Devkit': 0}
    """

    model_config = ConfigDict(
        # Lax validation: VDF strings come back as str, integers as int
        strict=False,
        # Entries are addressed by their on-disk names
        populate_by_name=True,
        # Unknown entries are kept, not rejected
        extra="allow",
        # Views are never edited; edits go through a new tree
        frozen=True,
    )

    @classmethod
    def from_vdf(cls: type[M], entries: Mapping[str, Any]) -> M:
        """Validate a decoded VDF map into a model instance."""
        return cls.model_validate(dict(entries))
