"""Command handlers.

Each handler loads the collection once, performs a single operation,
saves only when the collection changed, and returns the exit code.
Fatal ``PomeloError``s propagate to the caller.
"""

from __future__ import annotations

import argparse
import os

from .bookmarks import Outcome
from .console import report, report_not_found
from .errors import PomeloError
from .log import logger
from .persistence import ConfigStore
from .shell import init_script


def cmd_add(store: ConfigStore, args: argparse.Namespace) -> int:
    """Bookmark the current working directory."""
    try:
        cwd = os.getcwd()
    except OSError as exc:
        raise PomeloError(f"Failed to get current directory: {exc.strerror}") from exc
    collection = store.load()
    result = collection.add(args.alias, cwd)
    store.save(collection)
    report(result)
    return 0


def cmd_remove(store: ConfigStore, args: argparse.Namespace) -> int:
    collection = store.load()
    result = collection.remove(args.alias)
    if result.changed:
        store.save(collection)
    report(result)
    return 0


def cmd_edit(store: ConfigStore, args: argparse.Namespace) -> int:
    collection = store.load()
    result = collection.rename(args.alias, args.new)
    if result.changed:
        store.save(collection)
    report(result)
    return 0


def cmd_list(store: ConfigStore, args: argparse.Namespace) -> int:
    report(store.load().listing())
    return 0


def cmd_jump(store: ConfigStore, args: argparse.Namespace) -> int:
    """Print the bookmarked path alone on stdout for a shell wrapper.

    An unknown alias is reported on stderr and stdout stays empty, which
    tells the wrapper not to ``cd``.
    """
    result = store.load().jump(args.alias)
    if result.outcome is Outcome.FOUND and result.bookmark is not None:
        logger.debug("jump %r -> %s", args.alias, result.bookmark.path)
        print(result.bookmark.path)
    else:
        report_not_found(result)
    return 0


def cmd_init(store: ConfigStore | None, args: argparse.Namespace) -> int:
    """Print shell integration code; touches no config."""
    print(init_script(args.shell, name=args.name), end="")
    return 0


# Commands that run without a config store.
STORELESS = frozenset({"init"})

HANDLERS = {
    "add": cmd_add,
    "remove": cmd_remove,
    "edit": cmd_edit,
    "list": cmd_list,
    "jump": cmd_jump,
    "init": cmd_init,
}
