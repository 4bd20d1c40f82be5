from __future__ import annotations

from collections.abc import Iterable, Sequence

from vehicle_search.domain.vehicle import (
    DEFAULT_PAGE_SIZE,
    SearchResultPage,
    SearchState,
    SortOption,
    Vehicle,
)


def search(
    state: SearchState,
    vehicles: Sequence[Vehicle],
    page_size: int = DEFAULT_PAGE_SIZE,
) -> SearchResultPage:
    """
    Filter, sort and paginate a catalog.

    - Filter: case-insensitive substring match on title OR description
    - Sort: stable sort by price; relevance keeps catalog order
    - Paginate: window [(page - 1) * page_size, page * page_size)

    Pure function: the catalog is never mutated.

    Raises:
        ValueError: If page_size is less than 1
    """
    if page_size < 1:
        raise ValueError("page_size must be >= 1")

    matches = _filter(vehicles, state.query)
    ordered = _sort(matches, state.sort)
    total = len(ordered)  # Count BEFORE paging

    start = (state.page - 1) * page_size
    end = start + page_size

    return SearchResultPage(
        results=ordered[start:end],
        total=total,
        has_prev=state.page > 1,
        has_next=end < total,
    )


def matches_query(vehicle: Vehicle, query: str) -> bool:
    if not query:
        return True
    needle = query.casefold()
    return needle in vehicle.title.casefold() or needle in vehicle.description.casefold()


def _filter(vehicles: Iterable[Vehicle], query: str) -> list[Vehicle]:
    return [vehicle for vehicle in vehicles if matches_query(vehicle, query)]


def _sort(vehicles: list[Vehicle], sort: SortOption) -> list[Vehicle]:
    # sorted() is stable, so equal prices keep catalog order in both directions
    if sort == SortOption.PRICE_ASC:
        return sorted(vehicles, key=lambda vehicle: vehicle.price)
    if sort == SortOption.PRICE_DESC:
        return sorted(vehicles, key=lambda vehicle: vehicle.price, reverse=True)
    return vehicles
