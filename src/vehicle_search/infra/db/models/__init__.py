from vehicle_search.infra.db.models.vehicle import VehicleRow

__all__ = ["VehicleRow"]
