"""Package-wide logger."""

from __future__ import annotations

import logging
import os
import sys

logger = logging.getLogger("pomelo")

_FORMAT = "%(levelname)s %(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Attach a stderr handler to the pomelo logger.

    Debug output is enabled by ``--verbose`` or ``POMELO_DEBUG=1``.
    Calling this more than once replaces the previous handler.
    """
    if not verbose:
        verbose = os.environ.get("POMELO_DEBUG", "") not in ("", "0")

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
