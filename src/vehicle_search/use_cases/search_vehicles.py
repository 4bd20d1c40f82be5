from __future__ import annotations

import logging
from dataclasses import dataclass

from vehicle_search.domain.errors import ValidationError
from vehicle_search.domain.search import search
from vehicle_search.domain.vehicle import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    SearchResultPage,
    SearchState,
)
from vehicle_search.ports.vehicle_catalog import VehicleCatalog

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SearchVehiclesRequest:
    state: SearchState


@dataclass(frozen=True, slots=True)
class SearchVehiclesResponse:
    state: SearchState
    page: SearchResultPage


class SearchVehicles:
    """
    Vehicle search with free-text filter, price sort and pagination.

    The use case reads the injected catalog and hands the vehicles to the
    pure domain search routine. No filtering logic lives here.
    """

    def __init__(
        self,
        vehicle_catalog: VehicleCatalog,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> None:
        """
        Initialize use case with dependencies.

        Args:
            vehicle_catalog: Read-only catalog port
            page_size: Results per page (1..MAX_PAGE_SIZE)

        Raises:
            ValidationError: If page_size is out of range
        """
        if not 1 <= page_size <= MAX_PAGE_SIZE:
            raise ValidationError(
                errors=[
                    {
                        "field": "page_size",
                        "message": f"Must be between 1 and {MAX_PAGE_SIZE}",
                        "code": "OUT_OF_RANGE",
                    }
                ]
            )
        self._vehicle_catalog = vehicle_catalog
        self._page_size = page_size

    @property
    def page_size(self) -> int:
        return self._page_size

    def execute(self, request: SearchVehiclesRequest) -> SearchVehiclesResponse:
        """
        Execute vehicle search.

        Args:
            request: Search state parsed from the URL

        Returns:
            Response echoing the state with the requested result page

        Raises:
            StateValidationError: If the state was built with invalid values
            CatalogUnavailableError: If the catalog cannot be read
        """
        request.state.validate()

        vehicles = self._vehicle_catalog.list_vehicles()
        page = search(request.state, vehicles, page_size=self._page_size)

        logger.debug(
            "Vehicle search executed",
            extra={
                "query": request.state.query,
                "page": request.state.page,
                "sort": request.state.sort.value,
                "total": page.total,
                "returned": len(page.results),
            },
        )

        return SearchVehiclesResponse(state=request.state, page=page)
