"""Main CLI entry point for nostatoo."""

from __future__ import annotations

import argparse
import sys

from structlog import get_logger

from .. import __version__
from ..exceptions import MultipleSteamAccountsError, NostatooError
from ..steam import SteamConfig
from . import commands
from .util import setup_logging

logger = get_logger()

# Exit status when several Steam accounts exist and none was picked
EXIT_MULTIPLE_ACCOUNTS = 60


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog="nostatoo",
        description="nostatoo: manage Steam non-Steam game shortcuts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  nostatoo list-non-steam-games
  nostatoo show-non-steam-game 4206969420
  nostatoo edit-non-steam-game 4206969420 "appname=Nice app"
  nostatoo dump-non-steam-games > shortcuts.json
  nostatoo import-non-steam-games shortcuts.json
        """,
    )

    parser.add_argument(
        "--steam-dir",
        metavar="DIR",
        help="Steam installation directory (default: $NOSTATOO_STEAM_DIR or ~/.local/share/Steam)",
    )
    parser.add_argument(
        "--user",
        metavar="ID",
        help="Steam account id under userdata, required when several accounts exist",
    )
    parser.add_argument(
        "--file",
        metavar="PATH",
        help="Operate on this shortcuts.vdf instead of looking it up",
    )
    parser.add_argument("--debug", action="store_true", help="Show debug logs on stderr")
    parser.add_argument(
        "--version",
        action="version",
        version=f"nostatoo {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    list_parser = subparsers.add_parser("list-non-steam-games", help="Lists non-steam games")
    list_parser.set_defaults(func=commands.list_non_steam_games)

    show_parser = subparsers.add_parser(
        "show-non-steam-game", help="Show a given non-steam game by appid"
    )
    show_parser.add_argument("appid")
    show_parser.set_defaults(func=commands.show_non_steam_game)

    edit_parser = subparsers.add_parser("edit-non-steam-game", help="Edit a given non-steam game")
    edit_parser.add_argument("appid", nargs="?")
    edit_parser.add_argument("edits", nargs="*", metavar="NAME=VALUE")
    edit_parser.set_defaults(func=commands.edit_non_steam_game)

    dump_parser = subparsers.add_parser(
        "dump-non-steam-games", help="Dumps all non-steam games as JSON"
    )
    dump_parser.set_defaults(func=commands.dump_non_steam_games)

    import_parser = subparsers.add_parser(
        "import-non-steam-games", help="Imports all non-steam games from JSON"
    )
    import_parser.add_argument("json_file", metavar="FILE")
    import_parser.set_defaults(func=commands.import_non_steam_games)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the nostatoo CLI.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(debug=args.debug)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        config = SteamConfig.from_env(
            steam_dir=args.steam_dir,
            user_id=args.user,
            shortcuts_file=args.file,
        )
        logger.debug('running command', command=args.command, config=config)
        return args.func(config, args)
    except MultipleSteamAccountsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_MULTIPLE_ACCOUNTS
    except (NostatooError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
