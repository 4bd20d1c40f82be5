from __future__ import annotations

import logging
import os

from vehicle_search.domain.vehicle import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


def page_size() -> int:
    raw = os.getenv("SEARCH_PAGE_SIZE")

    if not raw:
        return DEFAULT_PAGE_SIZE

    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"SEARCH_PAGE_SIZE must be an integer, got {raw!r}") from None

    if not 1 <= value <= MAX_PAGE_SIZE:
        raise RuntimeError(f"SEARCH_PAGE_SIZE must be between 1 and {MAX_PAGE_SIZE}, got {value}")

    return value


def log_level() -> int:
    name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)

    if not isinstance(level, int):
        raise RuntimeError(f"LOG_LEVEL must be a standard logging level name, got {name!r}")

    return level
