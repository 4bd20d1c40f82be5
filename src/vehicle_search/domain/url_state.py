"""Conversion between URL query strings and SearchState.

Parsing is permissive: any query string yields a valid SearchState.
Serialization is canonical: parameters are emitted in the order
``q, page, sort`` and omitted when equal to their defaults.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import replace
from urllib.parse import parse_qs, urlencode

from vehicle_search.domain.vehicle import SearchState, SortOption

_DEFAULT_STATE = SearchState()
_PAGE_PATTERN = re.compile(r"[+-]?[0-9]+")

SEARCH_PATH = "/search"


def parse_state(query: str | Mapping[str, str] | None) -> SearchState:
    """
    Build a SearchState from a raw query string or a parameter mapping.

    Args:
        query: Raw query string (a leading '?' is ignored), or a mapping such
            as Starlette's QueryParams. For repeated keys the first value wins.

    Returns:
        A valid SearchState. Never raises for malformed input.
    """
    params = _first_values(query)

    return SearchState(
        query=params.get("q") or "",
        page=_parse_page(params.get("page")),
        sort=_parse_sort(params.get("sort")),
    )


def serialize_state(state: SearchState) -> str:
    """
    Serialize a SearchState to a canonical query string (without '?').

    Parameters equal to their default are omitted, so the default state
    serializes to an empty string.
    """
    pairs: list[tuple[str, str]] = []

    # Stable order: q, page, sort
    if state.query != _DEFAULT_STATE.query:
        pairs.append(("q", state.query))
    if state.page != _DEFAULT_STATE.page:
        pairs.append(("page", str(state.page)))
    if state.sort != _DEFAULT_STATE.sort:
        pairs.append(("sort", SortOption(state.sort).value))

    return urlencode(pairs)


def to_url(state: SearchState, path: str = SEARCH_PATH) -> str:
    """Canonical URL for a state: the path plus its query string, if any."""
    query_string = serialize_state(state)
    return f"{path}?{query_string}" if query_string else path


def page_url(state: SearchState, page: int, path: str = SEARCH_PATH) -> str:
    """Canonical URL for another page of the same search."""
    return to_url(replace(state, page=page), path=path)


def _first_values(query: str | Mapping[str, str] | None) -> dict[str, str]:
    if query is None:
        return {}

    if isinstance(query, str):
        parsed = parse_qs(query.removeprefix("?"), keep_blank_values=True)
        return {key: values[0] for key, values in parsed.items() if values}

    # Starlette's QueryParams.get() returns the last value; getlist() keeps order
    getlist = getattr(query, "getlist", None)
    values: dict[str, str] = {}
    for key in ("q", "page", "sort"):
        if getlist is not None:
            found = getlist(key)
            value = found[0] if found else None
        else:
            value = query.get(key)
        if isinstance(value, str):
            values[key] = value
    return values


def _parse_page(raw: str | None) -> int:
    if raw is None:
        return 1

    candidate = raw.strip()
    if not _PAGE_PATTERN.fullmatch(candidate):
        return 1

    try:
        page = int(candidate)
    except ValueError:  # exceeds the int string conversion limit
        return 1

    return max(1, page)


def _parse_sort(raw: str | None) -> SortOption:
    try:
        return SortOption(raw)
    except ValueError:
        return SortOption.RELEVANCE
