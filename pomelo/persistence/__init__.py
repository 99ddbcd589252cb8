"""Persistence layer – each store owns its file path, data format, and I/O."""

from .config import ConfigStore

__all__ = [
    "ConfigStore",
]
