"""Fatal error kinds.

Each of these aborts the current invocation.  They propagate untouched to
``pomelo.__main__.main`` which reports them and exits non-zero.  Expected
outcomes such as an unknown alias are *not* errors; see ``Outcome``.
"""

from __future__ import annotations

from pathlib import Path


class PomeloError(Exception):
    """Base class for unrecoverable environment or data errors."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class HomeDirNotFound(PomeloError):
    """The user's home directory could not be determined."""

    def __init__(self) -> None:
        super().__init__(
            "Failed to find home directory (set HOME or POMELO_HOME)"
        )


class ConfigDirCreateFailed(PomeloError):
    """The directory holding the config file could not be created."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to create config directory {path}: {reason}", path)


class ConfigWriteFailed(PomeloError):
    """The config file could not be written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to write config file {path}: {reason}", path)


class ConfigParseFailed(PomeloError):
    """The config file exists but does not hold a valid bookmark list."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Failed to parse config file {path}: {reason}", path)
