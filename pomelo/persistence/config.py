"""Bookmark config persistence store."""

from __future__ import annotations

from pathlib import Path

from ..bookmarks import BookmarkCollection
from ..errors import ConfigParseFailed
from ._base import TomlStore


class ConfigStore(TomlStore):
    """The bookmark list (``bookmarks = [{alias, path}, ...]``)."""

    def __init__(self, path: Path) -> None:
        super().__init__(path)

    def load(self) -> BookmarkCollection:
        """Load the bookmark collection, empty if there is no file yet."""
        data = self.load_raw()
        items = data.get("bookmarks", [])
        if not isinstance(items, list):
            raise ConfigParseFailed(self.path, "'bookmarks' must be an array")

        cleaned: list[dict] = []
        for position, item in enumerate(items, start=1):
            if not isinstance(item, dict):
                raise ConfigParseFailed(
                    self.path, f"bookmark #{position} must be a table"
                )
            for key in ("alias", "path"):
                value = item.get(key)
                if not isinstance(value, str) or not value:
                    raise ConfigParseFailed(
                        self.path,
                        f"bookmark #{position} needs a non-empty string '{key}'",
                    )
            cleaned.append({"alias": item["alias"], "path": item["path"]})
        return BookmarkCollection.from_list(cleaned)

    def save(self, collection: BookmarkCollection) -> None:
        """Persist *collection*, replacing the file."""
        self.save_raw({"bookmarks": collection.to_list()})

    def _default(self) -> dict:
        return {"bookmarks": []}
