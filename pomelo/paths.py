"""Config file location.

``~/.pomelo/config.toml`` by default.  The location is computed once per
invocation and handed to ``ConfigStore``; nothing else reads these
environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

from .errors import HomeDirNotFound

CONFIG_DIR_NAME = ".pomelo"
CONFIG_FILE_NAME = "config.toml"

# Environment overrides, most specific first.
ENV_CONFIG = "POMELO_CONFIG"
ENV_HOME = "POMELO_HOME"


def home_dir() -> Path:
    """Return the user's home directory or raise ``HomeDirNotFound``."""
    try:
        return Path.home()
    except (RuntimeError, KeyError) as exc:
        raise HomeDirNotFound() from exc


def pomelo_home() -> Path:
    """Return the directory holding the config file (``~/.pomelo``)."""
    override = os.environ.get(ENV_HOME, "").strip()
    if override:
        return Path(override).expanduser()
    return home_dir() / CONFIG_DIR_NAME


def config_path(override: str | os.PathLike[str] | None = None) -> Path:
    """Resolve the config file path.

    *override* (the ``--config`` option) wins, then ``POMELO_CONFIG``,
    then ``POMELO_HOME/config.toml``, then ``~/.pomelo/config.toml``.
    """
    if override:
        return Path(override).expanduser()
    env_path = os.environ.get(ENV_CONFIG, "").strip()
    if env_path:
        return Path(env_path).expanduser()
    return pomelo_home() / CONFIG_FILE_NAME
