"""Typed view of a non-Steam game shortcut."""

from __future__ import annotations

from typing import ClassVar

from pydantic import AliasChoices, Field

from .base import VdfModel
from .fields import UInt32


class Shortcut(VdfModel):
    """One entry of the ``shortcuts`` collection in ``shortcuts.vdf``.

    Entries such as ``tags``, ``IsHidden`` or ``LastPlayTime`` are not
    declared and end up in ``model_extra``.
    """

    appid: int | None = UInt32(default=None)
    # Older clients write "appname", current ones "AppName"
    appname: str | None = Field(default=None, validation_alias=AliasChoices("appname", "AppName"))
    exe: str | None = Field(default=None, alias="Exe")
    start_dir: str | None = Field(default=None, alias="StartDir")
    launch_options: str | None = Field(default=None, alias="LaunchOptions")
    shortcut_path: str | None = Field(default=None, alias="ShortcutPath")

    # On-disk entry name -> label used when showing a shortcut
    DISPLAY_FIELDS: ClassVar[dict[str, str]] = {
        "appname": "Name",
        "appid": "Steam appid",
        "Exe": "Executable",
        "StartDir": "Start directory",
        "LaunchOptions": "Launch options",
        "ShortcutPath": "Desktop file",
    }

    def display_fields(self) -> dict[str, object]:
        """Known entries keyed by their on-disk name, in display order."""
        dumped = self.model_dump(by_alias=True)
        return {name: dumped.get(name) for name in self.DISPLAY_FIELDS}

    def extra_data(self) -> dict[str, object]:
        """Entries without a declared field, in file order."""
        return dict(self.model_extra or {})
