"""Locating the Steam configuration directory.

This module provides the SteamConfig dataclass that resolves which
``shortcuts.vdf`` the command line operates on.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from ..exceptions import MultipleSteamAccountsError, NoSteamAccountError, SteamConfigError

STEAM_DIR_ENV = "NOSTATOO_STEAM_DIR"
SHORTCUTS_RELPATH = Path("config") / "shortcuts.vdf"


def default_steam_dir() -> Path:
    """Return the native Linux Steam installation directory."""
    return Path.home() / ".local" / "share" / "Steam"


@dataclass
class SteamConfig:
    """Where to find ``shortcuts.vdf``.

    Steam keeps one directory per account under ``<steam_dir>/userdata``.
    When exactly one account exists it is picked automatically; otherwise
    ``user_id`` has to name one.

    Attributes:
        steam_dir: Steam installation directory (default ~/.local/share/Steam)
        user_id: Account directory under userdata to use (digits only)
        shortcuts_file: Explicit shortcuts.vdf path; skips account discovery

    Examples:
        ```python
        from nostatoo.steam import SteamConfig

        # Single account, default location
        path = SteamConfig().shortcuts_path()

        # Pick one of several accounts
        path = SteamConfig(user_id="12345678").shortcuts_path()

        # Location taken from NOSTATOO_STEAM_DIR when set
        path = SteamConfig.from_env().shortcuts_path()
        ```
    """

    steam_dir: Path = field(default_factory=default_steam_dir)
    user_id: str | None = None
    shortcuts_file: Path | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        self.steam_dir = Path(self.steam_dir).expanduser()

        if self.shortcuts_file is not None:
            self.shortcuts_file = Path(self.shortcuts_file).expanduser()

        if self.user_id is not None and not self.user_id.isdigit():
            raise SteamConfigError(f"user_id must be a numeric account id, got {self.user_id!r}")

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        steam_dir: str | Path | None = None,
        user_id: str | None = None,
        shortcuts_file: str | Path | None = None,
    ) -> SteamConfig:
        """Build a configuration, falling back to the environment for steam_dir.

        Explicit arguments win over ``NOSTATOO_STEAM_DIR``.
        """
        environ = os.environ if environ is None else environ

        if steam_dir is None and environ.get(STEAM_DIR_ENV):
            steam_dir = environ[STEAM_DIR_ENV]

        kwargs: dict[str, object] = {"user_id": user_id}
        if steam_dir is not None:
            kwargs["steam_dir"] = Path(steam_dir)
        if shortcuts_file is not None:
            kwargs["shortcuts_file"] = Path(shortcuts_file)
        return cls(**kwargs)  # type: ignore[arg-type]

    def accounts(self) -> list[str]:
        """Return the account directory names under userdata, sorted."""
        userdata = self.steam_dir / "userdata"
        if not userdata.is_dir():
            return []
        return sorted(entry.name for entry in userdata.iterdir() if entry.is_dir())

    def userdata_dir(self) -> Path:
        """Return the account directory to operate on.

        Raises:
            NoSteamAccountError: If no account has logged in yet
            MultipleSteamAccountsError: If several accounts exist and user_id is unset
            SteamConfigError: If user_id names an account that doesn't exist
        """
        accounts = self.accounts()

        if self.user_id is not None:
            if self.user_id not in accounts:
                raise SteamConfigError(
                    f"No Steam account {self.user_id} under {self.steam_dir / 'userdata'}"
                )
            return self.steam_dir / "userdata" / self.user_id

        if not accounts:
            raise NoSteamAccountError("You must log into a steam account once before using this.")
        if len(accounts) > 1:
            raise MultipleSteamAccountsError(accounts)

        return self.steam_dir / "userdata" / accounts[0]

    def shortcuts_path(self) -> Path:
        """Return the shortcuts.vdf path to operate on."""
        if self.shortcuts_file is not None:
            return self.shortcuts_file
        return self.userdata_dir() / SHORTCUTS_RELPATH
