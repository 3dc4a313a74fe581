"""
Logging setup.

Modules log through `logging.getLogger(__name__)` using `event key=value`
messages; this only wires the root handler and level once per process.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logging(level: str = "INFO") -> None:
    # No-op for the handler if something (e.g. uvicorn, pytest) already configured root.
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stdout)
    logging.getLogger().setLevel(level)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)
