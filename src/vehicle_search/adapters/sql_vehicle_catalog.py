"""SQLAlchemy implementation of VehicleCatalog."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from vehicle_search.domain.errors import CatalogUnavailableError
from vehicle_search.domain.vehicle import Vehicle
from vehicle_search.infra.db.models.vehicle import VehicleRow
from vehicle_search.ports.vehicle_catalog import VehicleCatalog

logger = logging.getLogger(__name__)


class SqlVehicleCatalog(VehicleCatalog):
    """
    Catalog backed by the ``vehicles`` table.

    - Reads every row ordered by ``position`` (catalog order)
    - Converts VehicleRow (infrastructure) to Vehicle (domain)
    - Translates driver failures into CatalogUnavailableError
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize catalog with a database session.

        Args:
            session: SQLAlchemy session for the current request
        """
        self._session = session

    def list_vehicles(self) -> Sequence[Vehicle]:
        query = select(VehicleRow).order_by(VehicleRow.position, VehicleRow.id)

        try:
            rows = self._session.execute(query).scalars().all()
        except SQLAlchemyError as exc:
            logger.error(
                "Failed to read vehicle catalog",
                exc_info=exc,
                extra={"error_type": type(exc).__name__},
            )
            raise CatalogUnavailableError() from exc

        return [self._to_domain(row) for row in rows]

    def _to_domain(self, row: VehicleRow) -> Vehicle:
        return Vehicle(
            id=row.id,
            title=row.title,
            price=row.price,  # Already Decimal from NUMERIC column
            description=row.description,
        )
