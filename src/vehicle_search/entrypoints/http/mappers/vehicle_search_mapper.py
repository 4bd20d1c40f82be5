from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal

from vehicle_search.domain.url_state import parse_state
from vehicle_search.domain.vehicle import SearchResultPage, SearchState, Vehicle
from vehicle_search.entrypoints.http.dtos.vehicle_search import (
    BootPayloadDTO,
    SearchPageDTO,
    SearchQueryDTO,
    SearchResponseDTO,
    SearchStateDTO,
    VehicleResponseDTO,
)
from vehicle_search.use_cases.search_vehicles import (
    SearchVehiclesRequest,
    SearchVehiclesResponse,
)

CENTS = Decimal("0.01")


class VehicleSearchMapper:
    """Maps between REST DTOs and domain models for vehicle search."""

    @staticmethod
    def to_domain_state(query: SearchQueryDTO | Mapping[str, str]) -> SearchState:
        """
        Converts query params to a normalized SearchState via the query codec.

        Args:
            query: Query DTO, or a raw mapping such as Starlette's QueryParams

        Returns:
            SearchState: Always valid; malformed values fall back to defaults
        """
        if isinstance(query, SearchQueryDTO):
            return parse_state(query.to_params())
        return parse_state(query)

    @staticmethod
    def to_domain_request(query: SearchQueryDTO | Mapping[str, str]) -> SearchVehiclesRequest:
        return SearchVehiclesRequest(state=VehicleSearchMapper.to_domain_state(query))

    @staticmethod
    def to_state_response(state: SearchState) -> SearchStateDTO:
        return SearchStateDTO(q=state.query, page=state.page, sort=state.sort.value)

    @staticmethod
    def to_vehicle_response(vehicle: Vehicle) -> VehicleResponseDTO:
        """
        Converts domain Vehicle entity to REST response DTO.

        Handles Decimal → str conversion at the boundary. Prices always carry
        two decimal places, whichever catalog produced them.
        """
        return VehicleResponseDTO(
            id=vehicle.id,
            title=vehicle.title,
            price=str(vehicle.price.quantize(CENTS)),  # Decimal → str at boundary
            description=vehicle.description,
        )

    @staticmethod
    def to_page_response(page: SearchResultPage) -> SearchPageDTO:
        return SearchPageDTO(
            results=[VehicleSearchMapper.to_vehicle_response(v) for v in page.results],
            total=page.total,
            has_prev=page.has_prev,
            has_next=page.has_next,
        )

    @staticmethod
    def to_response(result: SearchVehiclesResponse) -> SearchResponseDTO:
        """
        Converts domain search result to the JSON API response.

        Args:
            result: Use case response with the state and the result page

        Returns:
            SearchResponseDTO: state echo, results and pagination flags
        """
        page = VehicleSearchMapper.to_page_response(result.page)
        return SearchResponseDTO(
            state=VehicleSearchMapper.to_state_response(result.state),
            results=page.results,
            total=page.total,
            has_prev=page.has_prev,
            has_next=page.has_next,
        )

    @staticmethod
    def to_boot_payload(result: SearchVehiclesResponse) -> BootPayloadDTO:
        """Builds the {state, data} payload embedded in rendered pages."""
        return BootPayloadDTO(
            state=VehicleSearchMapper.to_state_response(result.state),
            data=VehicleSearchMapper.to_page_response(result.page),
        )
