from fastapi import APIRouter, Depends

from vehicle_search.entrypoints.http.dependencies import get_search_vehicles_use_case
from vehicle_search.entrypoints.http.dtos.vehicle_search import (
    SearchQueryDTO,
    SearchResponseDTO,
)
from vehicle_search.entrypoints.http.error_responses import ErrorResponse
from vehicle_search.entrypoints.http.mappers.vehicle_search_mapper import VehicleSearchMapper
from vehicle_search.use_cases.search_vehicles import SearchVehicles


router = APIRouter(tags=["Search"])


@router.get(
    "/api/search",
    response_model=SearchResponseDTO,
    summary="Search vehicles",
    description="""
    Search the vehicle catalog with free text, a sort option and a page number.

    ## Parameters
    - q: case-insensitive substring of title or description (empty matches all)
    - page: 1-based page number; invalid or missing values mean page 1
    - sort: relevance (catalog order), price_asc or price_desc

    Malformed values never produce an error; they fall back to defaults.
    The normalized state is echoed back in the response.

    ## Example
    ```
    GET /api/search?q=sedan&page=2&sort=price_asc
    ```
    """,
    responses={
        500: {
            "description": "Catalog unavailable or unexpected error",
            "model": ErrorResponse,
        },
    },
)
def search_vehicles(
    query: SearchQueryDTO = Depends(),
    use_case: SearchVehicles = Depends(get_search_vehicles_use_case),
) -> SearchResponseDTO:
    """Search endpoint following parse → execute → map → return pattern."""
    # 1. Map to domain request (normalizes malformed input)
    request = VehicleSearchMapper.to_domain_request(query)

    # 2. Execute use case
    result = use_case.execute(request)

    # 3. Map to response
    return VehicleSearchMapper.to_response(result)
