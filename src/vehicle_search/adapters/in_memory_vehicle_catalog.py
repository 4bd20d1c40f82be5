from __future__ import annotations

from collections.abc import Iterable, Sequence

from vehicle_search.domain.vehicle import Vehicle
from vehicle_search.ports.vehicle_catalog import VehicleCatalog


class InMemoryVehicleCatalog(VehicleCatalog):
    """
    Read-only catalog held in memory.

    - Stores vehicles in insertion order
    - Copies the input into a tuple, so later changes to the caller's
      list are not visible to searches
    """

    def __init__(self, vehicles: Iterable[Vehicle]) -> None:
        self._vehicles = tuple(vehicles)

    def list_vehicles(self) -> Sequence[Vehicle]:
        return self._vehicles

    def __len__(self) -> int:
        return len(self._vehicles)
