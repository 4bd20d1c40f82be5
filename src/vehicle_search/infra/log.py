from __future__ import annotations

import logging

from vehicle_search.infra.config import log_level

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: int | None = None) -> None:
    """
    Install a stream handler on the root logger at the configured level.

    Does nothing to handlers when the root logger already has some (for
    example when running under uvicorn's or pytest's logging setup), but
    still applies the level.
    """
    resolved = level if level is not None else log_level()
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("vehicle_search").setLevel(resolved)
