"""Render operation results as terminal text."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

from .bookmarks import Bookmark, Outcome, Result

# Plain, unwrapped output: paths must survive copy/paste intact.
console = Console(highlight=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


def format_entry(index: int, bm: Bookmark) -> str:
    """``1. Alias: 'home', Path: '/home/u'``"""
    return f"{index}. Alias: '{bm.alias}', Path: '{bm.path}'"


def format_result(result: Result) -> list[str]:
    """Return the plain-text lines describing *result*."""
    outcome = result.outcome
    if outcome is Outcome.ADDED:
        return [f"Added bookmark with alias '{result.alias}'"]
    if outcome is Outcome.REMOVED:
        return [f"Removed bookmark with alias '{result.alias}'"]
    if outcome is Outcome.RENAMED:
        return [f"Updated alias '{result.alias}' to '{result.new_alias}'"]
    if outcome is Outcome.NOT_FOUND:
        return [f"No bookmark found with alias '{result.alias}'"]
    if outcome is Outcome.EMPTY:
        return ["You have no bookmarks."]
    if outcome is Outcome.LISTED:
        return ["Your bookmarks:"] + [format_entry(i, bm) for i, bm in result.entries]
    if outcome is Outcome.FOUND and result.bookmark is not None:
        return [result.bookmark.path]
    return []


def report(result: Result) -> None:
    """Print *result* for a human reader."""
    for line in format_result(result):
        console.print(escape(line))


def report_error(message: str) -> None:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def report_not_found(result: Result) -> None:
    """Not-found message on stderr, keeping stdout free for shell capture."""
    for line in format_result(result):
        err_console.print(escape(line))
