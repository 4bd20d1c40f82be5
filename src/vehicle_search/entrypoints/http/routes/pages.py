"""Server-rendered search page, its partial results fragment, and the root redirect."""

from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from vehicle_search.domain.url_state import SEARCH_PATH, to_url
from vehicle_search.entrypoints.http.dependencies import get_search_vehicles_use_case
from vehicle_search.entrypoints.http.dtos.vehicle_search import SearchQueryDTO
from vehicle_search.entrypoints.http.mappers.vehicle_search_mapper import VehicleSearchMapper
from vehicle_search.entrypoints.http.rendering import templates
from vehicle_search.use_cases.search_vehicles import SearchVehicles, SearchVehiclesResponse


router = APIRouter(tags=["Pages"])

PARTIAL_REQUEST_HEADER = "X-Requested-With"
PARTIAL_REQUEST_VALUE = "XMLHttpRequest"


def _page_context(result: SearchVehiclesResponse) -> dict[str, Any]:
    boot = VehicleSearchMapper.to_boot_payload(result)
    return {
        "state": result.state,
        "page": result.page,
        "boot": boot.model_dump(mode="json", by_alias=True),
        "search_path": SEARCH_PATH,
    }


@router.get("/", include_in_schema=False)
def index() -> RedirectResponse:
    return RedirectResponse(url=SEARCH_PATH)


@router.get(SEARCH_PATH, response_class=HTMLResponse, summary="Search page")
def search_page(
    request: Request,
    query: SearchQueryDTO = Depends(),
    use_case: SearchVehicles = Depends(get_search_vehicles_use_case),
) -> Response:
    """Full page with the boot payload embedded for client-side re-hydration."""
    result = use_case.execute(VehicleSearchMapper.to_domain_request(query))

    return templates.TemplateResponse(request, "search.html", _page_context(result))


@router.get(f"{SEARCH_PATH}/results", response_class=HTMLResponse, summary="Results fragment")
def search_results_fragment(
    request: Request,
    query: SearchQueryDTO = Depends(),
    use_case: SearchVehicles = Depends(get_search_vehicles_use_case),
) -> Response:
    """
    Results and pagination markup only, for in-page updates.

    Requests that are not XMLHttpRequest navigations are redirected to the
    canonical full-page URL for the same state.
    """
    request_state = VehicleSearchMapper.to_domain_request(query)

    if request.headers.get(PARTIAL_REQUEST_HEADER) != PARTIAL_REQUEST_VALUE:
        return RedirectResponse(url=to_url(request_state.state))

    result = use_case.execute(request_state)

    return templates.TemplateResponse(request, "_results.html", _page_context(result))
