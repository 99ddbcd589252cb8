"""Base TOML persistence store."""

from __future__ import annotations

import os
import stat
import tempfile
import tomllib
from pathlib import Path

import tomli_w

from ..errors import ConfigDirCreateFailed, ConfigParseFailed, ConfigWriteFailed
from ..log import logger


class TomlStore:
    """TOML file store with atomic write.

    A missing or unreadable file loads as ``_default()``.  A file that
    exists but is not valid TOML raises ``ConfigParseFailed``, so a later
    save never silently replaces hand-edited data the user still wants.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    # -- core I/O -------------------------------------------------------------

    def load_raw(self) -> dict:
        """Read and parse the TOML file."""
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return self._default()
        except (OSError, UnicodeDecodeError):
            logger.debug("failed to read TOML store from %s", self.path, exc_info=True)
            return self._default()

        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigParseFailed(self.path, str(exc)) from exc
        logger.debug("loaded TOML store from %s", self.path)
        return data

    def save_raw(self, data: dict) -> None:
        """Write *data* as TOML, creating parents as needed.

        The document goes to a temporary file next to the target which is
        then renamed over it.  A symlinked path is written through: the
        link stays and the file it points to is replaced.  The new file
        keeps the old file's mode, or the umask default when it is new.
        """
        parent = self.path.parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
            target = self.path.resolve()
            target.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ConfigDirCreateFailed(parent, exc.strerror or str(exc)) from exc

        try:
            text = tomli_w.dumps(data)
        except (TypeError, ValueError) as exc:
            raise ConfigWriteFailed(self.path, str(exc)) from exc

        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=target.parent, prefix=f".{target.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(text)
            os.chmod(tmp_name, _file_mode(target))
            os.replace(tmp_name, target)
        except OSError as exc:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.debug("failed to remove %s", tmp_name, exc_info=True)
            raise ConfigWriteFailed(self.path, exc.strerror or str(exc)) from exc
        logger.debug("saved TOML store to %s", target)

    # -- override point -------------------------------------------------------

    def _default(self) -> dict:  # noqa: PLR6301
        """Return the empty-state document for this store."""
        return {}


def _file_mode(path: Path) -> int:
    """Permission bits for a rewrite of *path*."""
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
