"""Tests for CLI tool."""

from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

import pytest

from nostatoo import __version__, decode, encode
from nostatoo.cli.main import EXIT_MULTIPLE_ACCOUNTS, main
from nostatoo.steam.config import STEAM_DIR_ENV

SRC_DIR = Path(__file__).resolve().parents[2] / "src"

SHOW_NICE_APP = """\
(#0) "Nice app"
  Name: "Nice app"
  Steam appid: 4206969420
  Executable: "\\"/usr/bin/nice-app\\""
  Start directory: "\\"/usr/bin/\\""
  Launch options: ""
  Desktop file: ""

Extra data:
  - icon: ""
  - IsHidden: 0
  - AllowDesktopConfig: 1
  - LastPlayTime: 0
  - tags: {"0": "favorite"}
"""


def run_module(*args: str) -> subprocess.CompletedProcess[str]:
    env = {**os.environ, "PYTHONPATH": str(SRC_DIR)}
    return subprocess.run(
        [sys.executable, "-m", "nostatoo.cli.main", *args],
        capture_output=True,
        text=True,
        env=env,
    )


def test_cli_help() -> None:
    """Test CLI --help flag."""
    result = run_module("--help")
    assert result.returncode == 0
    assert "nostatoo: manage Steam non-Steam game shortcuts" in result.stdout
    assert "list-non-steam-games" in result.stdout
    assert "import-non-steam-games" in result.stdout


def test_cli_version() -> None:
    """Test CLI --version flag."""
    result = run_module("--version")
    assert result.returncode == 0
    assert f"nostatoo {__version__}" in result.stdout


def test_cli_no_args(capsys: pytest.CaptureFixture[str]) -> None:
    """Test CLI with no command shows help and fails."""
    assert main([]) == 1
    assert "<command>" in capsys.readouterr().out


def test_cli_unknown_command() -> None:
    """Test argparse rejects unknown commands."""
    result = run_module("frobnicate")
    assert result.returncode == 2
    assert "invalid choice" in result.stderr


class TestList:
    def test_list(self, shortcuts_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--file", str(shortcuts_file), "list-non-steam-games"]) == 0
        assert capsys.readouterr().out == (
            "0: 4206969420, Nice app \n" "1: 3000000001, Other game \n" "\n"
        )

    def test_list_from_steam_dir(
        self, steam_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--steam-dir", str(steam_dir), "list-non-steam-games"]) == 0
        assert "Nice app" in capsys.readouterr().out

    def test_list_from_environment(
        self,
        steam_dir: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv(STEAM_DIR_ENV, str(steam_dir))

        assert main(["list-non-steam-games"]) == 0
        assert "Other game" in capsys.readouterr().out

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--file", str(tmp_path / "nope.vdf"), "list-non-steam-games"]) == 1
        assert "Error" in capsys.readouterr().err

    def test_corrupt_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "shortcuts.vdf"
        path.write_bytes(b"\x05shortcuts\x00")

        assert main(["--file", str(path), "list-non-steam-games"]) == 1
        assert "Unknown VDF type 0x05" in capsys.readouterr().err


class TestAccounts:
    def test_no_account(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--steam-dir", str(tmp_path), "list-non-steam-games"]) == 1
        assert "log into a steam account" in capsys.readouterr().err

    def test_multiple_accounts(
        self, steam_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (steam_dir / "userdata" / "999").mkdir()

        result = main(["--steam-dir", str(steam_dir), "list-non-steam-games"])

        assert result == EXIT_MULTIPLE_ACCOUNTS == 60
        assert "single steam account" in capsys.readouterr().err

    def test_user_picks_account(
        self, steam_dir: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        (steam_dir / "userdata" / "999").mkdir()

        args = ["--steam-dir", str(steam_dir), "--user", "12345678", "list-non-steam-games"]
        assert main(args) == 0
        assert "Nice app" in capsys.readouterr().out


class TestShow:
    def test_show(self, shortcuts_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--file", str(shortcuts_file), "show-non-steam-game", "4206969420"]) == 0
        assert capsys.readouterr().out == SHOW_NICE_APP

    def test_show_missing(self, shortcuts_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--file", str(shortcuts_file), "show-non-steam-game", "1"]) == 1
        assert "No game found for appid 1." in capsys.readouterr().err

    def test_show_invalid_appid(
        self, shortcuts_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--file", str(shortcuts_file), "show-non-steam-game", "x"]) == 1
        assert "Invalid appid" in capsys.readouterr().err


class TestEdit:
    def test_edit(self, shortcuts_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        args = ["--file", str(shortcuts_file), "edit-non-steam-game", "4206969420"]
        assert main([*args, "appname=Renamed", "LaunchOptions=-novid"]) == 0

        out = capsys.readouterr().out
        assert out.startswith("Edited...\n\n(#0) \"Renamed\"\n")
        assert '  Launch options: "-novid"' in out

        tree = decode(shortcuts_file.read_bytes())
        assert tree["shortcuts"]["0"]["appname"] == "Renamed"  # type: ignore[index]
        assert tree["shortcuts"]["0"]["LaunchOptions"] == "-novid"  # type: ignore[index]

    def test_edit_appid(self, shortcuts_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        args = ["--file", str(shortcuts_file), "edit-non-steam-game", "4206969420", "appid=5"]
        assert main(args) == 0
        assert "  Steam appid: 5\n" in capsys.readouterr().out

    def test_edit_usage(self, shortcuts_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        before = shortcuts_file.read_bytes()

        assert main(["--file", str(shortcuts_file), "edit-non-steam-game", "4206969420"]) == 1
        assert "separated by the first equal sign" in capsys.readouterr().out
        assert shortcuts_file.read_bytes() == before

    def test_edit_tags_rejected(
        self, shortcuts_file: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        before = shortcuts_file.read_bytes()
        args = ["--file", str(shortcuts_file), "edit-non-steam-game", "4206969420", "tags=x"]

        assert main(args) == 1
        assert "'tags' is a map" in capsys.readouterr().err
        assert shortcuts_file.read_bytes() == before


class TestDumpImport:
    def test_dump(
        self, shortcuts_file: Path, shortcuts_tree: dict, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--file", str(shortcuts_file), "dump-non-steam-games"]) == 0

        out = capsys.readouterr().out
        assert json.loads(out) == shortcuts_tree
        assert out.startswith('{\n  "shortcuts": {\n')

    def test_debug_logs_stay_off_stdout(
        self, shortcuts_file: Path, shortcuts_tree: dict, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main(["--debug", "--file", str(shortcuts_file), "dump-non-steam-games"]) == 0

        captured = capsys.readouterr()
        assert json.loads(captured.out) == shortcuts_tree
        assert "read vdf" in captured.err

    def test_import(
        self, tmp_path: Path, shortcuts_tree: dict, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = tmp_path / "shortcuts.json"
        source.write_text(json.dumps(shortcuts_tree), encoding="utf-8")
        target = tmp_path / "shortcuts.vdf"

        assert main(["--file", str(target), "import-non-steam-games", str(source)]) == 0
        assert "Imported 2 non-steam games" in capsys.readouterr().out
        assert target.read_bytes() == encode(shortcuts_tree)

    def test_import_invalid_json(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = tmp_path / "broken.json"
        source.write_text("{", encoding="utf-8")
        target = tmp_path / "shortcuts.vdf"

        assert main(["--file", str(target), "import-non-steam-games", str(source)]) == 1
        assert "not valid JSON" in capsys.readouterr().err
        assert not target.exists()

    def test_import_non_utf8(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        source = tmp_path / "latin1.json"
        source.write_bytes(b'{"shortcuts": {"0": {"appname": "\xff"}}}')
        target = tmp_path / "shortcuts.vdf"

        assert main(["--file", str(target), "import-non-steam-games", str(source)]) == 1
        assert "not UTF-8 text" in capsys.readouterr().err
        assert not target.exists()

    def test_import_rejects_floats(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = tmp_path / "shortcuts.json"
        source.write_text('{"shortcuts": {"0": {"appid": 1.5}}}', encoding="utf-8")

        assert main(["--file", str(tmp_path / "s.vdf"), "import-non-steam-games", str(source)]) == 1
        assert "JSON float" in capsys.readouterr().err
