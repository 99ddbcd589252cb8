"""Shared test fixtures for the pomelo test suite."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from pomelo.bookmarks import BookmarkCollection
from pomelo.log import logger
from pomelo.persistence import ConfigStore


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at a temp dir so nothing touches the real ~/.pomelo."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    for var in ("POMELO_CONFIG", "POMELO_HOME", "POMELO_DEBUG"):
        monkeypatch.delenv(var, raising=False)
    return home


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers bound to a previous test's captured stderr."""
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Location of a config file that does not exist yet."""
    return tmp_path / "cfg" / ".pomelo" / "config.toml"


@pytest.fixture
def store(config_file: Path) -> ConfigStore:
    return ConfigStore(config_file)


@pytest.fixture
def sample_collection() -> BookmarkCollection:
    """Three bookmarks with a duplicated alias ``x``."""
    return BookmarkCollection.from_list(
        [
            {"alias": "x", "path": "/p1"},
            {"alias": "y", "path": "/p2"},
            {"alias": "x", "path": "/p3"},
        ]
    )
