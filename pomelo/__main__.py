"""Entry point for the pomelo CLI."""

from __future__ import annotations

import argparse
import sys

from . import __version__
from .commands import HANDLERS, STORELESS
from .console import report_error
from .errors import PomeloError
from .log import logger, setup_logging
from .paths import config_path
from .persistence import ConfigStore
from .shell import DEFAULT_FUNCTION_NAME, SUPPORTED_SHELLS, check_function_name


def _alias(value: str) -> str:
    """argparse type: reject empty aliases before any file is touched."""
    if not value:
        raise argparse.ArgumentTypeError("alias must not be empty")
    return value


def _function_name(value: str) -> str:
    try:
        return check_function_name(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _add_alias_arg(parser: argparse.ArgumentParser, help_text: str) -> None:
    parser.add_argument("--alias", "-a", required=True, type=_alias, help=help_text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pomelo",
        description="Bookmark directories under short aliases.",
    )
    parser.add_argument(
        "--version",
        "-V",
        action="version",
        version=f"pomelo {__version__}",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug information to stderr",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Use this config file instead of ~/.pomelo/config.toml",
    )

    sub = parser.add_subparsers(dest="command", metavar="COMMAND")
    sub.required = True

    add = sub.add_parser("add", help="Creates a bookmark for the current directory.")
    _add_alias_arg(add, "The alias for the current directory.")

    remove = sub.add_parser("remove", help="Removes a bookmark.")
    _add_alias_arg(remove, "The alias you want to remove.")

    sub.add_parser("list", help="Lists all your bookmarks.")

    edit = sub.add_parser("edit", help="Edits an existing bookmark.")
    _add_alias_arg(edit, "The alias of the bookmark you want to edit.")
    edit.add_argument(
        "--new", "-n", required=True, type=_alias, help="The new alias for the bookmark."
    )

    jump = sub.add_parser(
        "jump", help="Prints the directory of a bookmark (see 'init')."
    )
    _add_alias_arg(jump, "The bookmark you want to jump to.")

    init = sub.add_parser(
        "init", help="Prints a shell function that cds into bookmarks."
    )
    init.add_argument("shell", choices=SUPPORTED_SHELLS, help="Target shell")
    init.add_argument(
        "--name",
        default=DEFAULT_FUNCTION_NAME,
        type=_function_name,
        help=f"Function name (default: {DEFAULT_FUNCTION_NAME})",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """Run the pomelo CLI and exit with the command's status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    handler = HANDLERS[args.command]
    try:
        store = None
        if args.command not in STORELESS:
            store = ConfigStore(config_path(args.config))
            logger.debug("using config file %s", store.path)
        code = handler(store, args)
    except PomeloError as exc:
        logger.debug("Fatal error in pomelo", exc_info=True)
        report_error(str(exc))
        sys.exit(1)
    sys.exit(code)


if __name__ == "__main__":
    main()
