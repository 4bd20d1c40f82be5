from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence

from vehicle_search.domain.vehicle import Vehicle


class VehicleCatalog(ABC):
    """
    Port for read-only catalog access.

    Implementations return every vehicle in catalog order; filtering,
    sorting and paging happen in the domain search routine so that every
    adapter shares the same semantics.

    Contract:
        - The returned sequence must not be mutated by callers
        - Catalog order is the "relevance" order
        - Failures to read the catalog raise CatalogUnavailableError
    """

    @abstractmethod
    def list_vehicles(self) -> Sequence[Vehicle]:
        """
        Return all vehicles in catalog order.

        Raises:
            CatalogUnavailableError: If the underlying store cannot be read
        """
        ...
