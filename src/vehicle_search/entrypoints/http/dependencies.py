"""
Dependency injection for FastAPI routes.

Key principle: Database sessions are per-request, never cached.
Only stateless, read-only singletons (the demo catalog) use lru_cache.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from fastapi import Depends

from vehicle_search.adapters.demo_catalog import build_demo_catalog
from vehicle_search.adapters.in_memory_vehicle_catalog import InMemoryVehicleCatalog
from vehicle_search.adapters.sql_vehicle_catalog import SqlVehicleCatalog
from vehicle_search.infra.config import page_size
from vehicle_search.infra.db.config import database_configured
from vehicle_search.infra.db.session import get_session
from vehicle_search.ports.vehicle_catalog import VehicleCatalog
from vehicle_search.use_cases.search_vehicles import SearchVehicles


@lru_cache(maxsize=1)
def get_demo_catalog() -> InMemoryVehicleCatalog:
    """Shared immutable demo catalog, built once per process."""
    return build_demo_catalog()


def get_vehicle_catalog() -> Generator[VehicleCatalog, None, None]:
    """
    Provides the catalog for a single request.

    - DATABASE_URL set: a SqlVehicleCatalog bound to a per-request session;
      the session is committed/rolled back and closed when the request ends
    - Otherwise: the shared in-memory demo catalog

    Yields:
        VehicleCatalog: Catalog adapter for this request
    """
    if not database_configured():
        yield get_demo_catalog()
        return

    with get_session() as session:
        yield SqlVehicleCatalog(session=session)


def get_search_vehicles_use_case(
    catalog: VehicleCatalog = Depends(get_vehicle_catalog),
) -> SearchVehicles:
    """
    Factory function that returns a configured SearchVehicles use case.

    Args:
        catalog: Catalog adapter (injected by FastAPI via Depends(get_vehicle_catalog))

    Returns:
        SearchVehicles: Configured use case instance
    """
    return SearchVehicles(vehicle_catalog=catalog, page_size=page_size())
