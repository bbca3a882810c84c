"""Logging helpers.

The searchers only emit records on the ``cliff_search`` logger; they never
configure handlers. A benchmarking harness that embeds them calls
``configure_logging`` once at startup, with ``verbose=True`` to see every
bracket change.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Install a root handler for the embedding harness; DEBUG shows bound movement."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def get_logger() -> logging.Logger:
    """Return the ``cliff_search`` logger shared by the searchers and the runner."""
    return logging.getLogger("cliff_search")
