"""In-memory bookmark list and the operations the CLI performs on it.

Aliases are not unique.  Every operation that targets an alias acts on the
first (lowest-index) bookmark carrying it, located through ``find``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


@dataclass
class Bookmark:
    """A directory remembered under a short alias."""

    alias: str
    path: str

    def __post_init__(self) -> None:
        _require_non_empty("alias", self.alias)
        _require_non_empty("path", self.path)

    def to_dict(self) -> dict[str, str]:
        return {"alias": self.alias, "path": self.path}


def _require_non_empty(name: str, value: str) -> None:
    if not isinstance(value, str) or not value:
        raise ValueError(f"bookmark {name} must be a non-empty string")


class Outcome(Enum):
    """What an operation did, for reporting."""

    ADDED = "added"
    REMOVED = "removed"
    RENAMED = "renamed"
    FOUND = "found"
    NOT_FOUND = "not_found"
    LISTED = "listed"
    EMPTY = "empty"


_CHANGING = frozenset({Outcome.ADDED, Outcome.REMOVED, Outcome.RENAMED})


@dataclass(frozen=True)
class Result:
    """Outcome of one collection operation."""

    outcome: Outcome
    alias: str = ""
    new_alias: str | None = None
    bookmark: Bookmark | None = None
    entries: tuple[tuple[int, Bookmark], ...] = ()

    @property
    def changed(self) -> bool:
        """True when the collection was mutated and must be saved."""
        return self.outcome in _CHANGING


@dataclass
class BookmarkCollection:
    """Ordered list of bookmarks; insertion order is display order."""

    bookmarks: list[Bookmark] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.bookmarks)

    def __iter__(self) -> Iterator[Bookmark]:
        return iter(self.bookmarks)

    # -- conversion -----------------------------------------------------------

    @classmethod
    def from_list(cls, items: list[dict]) -> BookmarkCollection:
        """Build a collection from ``[{"alias": ..., "path": ...}, ...]``."""
        return cls([Bookmark(alias=item["alias"], path=item["path"]) for item in items])

    def to_list(self) -> list[dict[str, str]]:
        return [bm.to_dict() for bm in self.bookmarks]

    # -- lookup ---------------------------------------------------------------

    def find(self, alias: str) -> int | None:
        """Return the index of the first bookmark named *alias*, or None."""
        for index, bm in enumerate(self.bookmarks):
            if bm.alias == alias:
                return index
        return None

    # -- operations -----------------------------------------------------------

    def add(self, alias: str, path: str) -> Result:
        """Append a bookmark.  Duplicate aliases are allowed."""
        bm = Bookmark(alias=alias, path=path)
        self.bookmarks.append(bm)
        return Result(Outcome.ADDED, alias=alias, bookmark=bm)

    def remove(self, alias: str) -> Result:
        """Delete the first bookmark named *alias*."""
        index = self.find(alias)
        if index is None:
            return Result(Outcome.NOT_FOUND, alias=alias)
        bm = self.bookmarks.pop(index)
        return Result(Outcome.REMOVED, alias=alias, bookmark=bm)

    def rename(self, old_alias: str, new_alias: str) -> Result:
        """Give the first bookmark named *old_alias* the alias *new_alias*."""
        _require_non_empty("alias", new_alias)
        index = self.find(old_alias)
        if index is None:
            return Result(Outcome.NOT_FOUND, alias=old_alias, new_alias=new_alias)
        bm = self.bookmarks[index]
        bm.alias = new_alias
        return Result(Outcome.RENAMED, alias=old_alias, new_alias=new_alias, bookmark=bm)

    def listing(self) -> Result:
        """Number the bookmarks from 1, or report that there are none."""
        if not self.bookmarks:
            return Result(Outcome.EMPTY)
        entries = tuple(enumerate(self.bookmarks, start=1))
        return Result(Outcome.LISTED, entries=entries)

    def jump(self, alias: str) -> Result:
        """Resolve *alias* to its bookmark without changing anything."""
        index = self.find(alias)
        if index is None:
            return Result(Outcome.NOT_FOUND, alias=alias)
        return Result(Outcome.FOUND, alias=alias, bookmark=self.bookmarks[index])
