from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum

from vehicle_search.domain.errors import StateValidationError


DEFAULT_PAGE_SIZE = 5
MAX_PAGE_SIZE = 100


class SortOption(str, Enum):
    RELEVANCE = "relevance"
    PRICE_ASC = "price_asc"
    PRICE_DESC = "price_desc"


@dataclass(frozen=True)
class Vehicle:
    id: str
    title: str
    price: Decimal
    description: str


@dataclass(frozen=True, slots=True)
class SearchState:
    """Normalized query/sort/page selection, rebuilt from the URL on every request."""

    query: str = ""
    page: int = 1
    sort: SortOption = SortOption.RELEVANCE

    def validate(self) -> None:
        """
        Validate state built outside the query codec.

        Raises:
            StateValidationError: If page is below 1 or sort is not a SortOption
        """
        if isinstance(self.page, bool) or not isinstance(self.page, int):
            raise StateValidationError(
                errors=[{"field": "page", "message": "Must be an integer", "code": "INVALID_TYPE"}]
            )
        if self.page < 1:
            raise StateValidationError(
                errors=[{"field": "page", "message": "Must be >= 1", "code": "OUT_OF_RANGE"}]
            )
        if not isinstance(self.sort, SortOption):
            raise StateValidationError(
                errors=[
                    {
                        "field": "sort",
                        "message": f"Must be one of {[option.value for option in SortOption]}",
                        "code": "INVALID_VALUE",
                    }
                ]
            )


@dataclass(frozen=True, slots=True)
class SearchResultPage:
    results: list[Vehicle] = field(default_factory=list)
    total: int = 0
    has_prev: bool = False
    has_next: bool = False
