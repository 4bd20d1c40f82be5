"""Demo catalog used when no database is configured."""

from __future__ import annotations

from decimal import Decimal

from vehicle_search.adapters.in_memory_vehicle_catalog import InMemoryVehicleCatalog
from vehicle_search.domain.vehicle import Vehicle

# (id, title, price, description)
_DEMO_ROWS: tuple[tuple[str, str, str, str], ...] = (
    ("1", "2023 Honda Civic", "25000", "Reliable sedan with great fuel economy"),
    ("2", "2024 Toyota Camry", "28000", "Mid-size sedan with premium features"),
    ("3", "2023 Ford F-150", "35000", "America's best-selling truck"),
    ("4", "2024 Tesla Model 3", "42000", "Electric performance sedan"),
    ("5", "2023 BMW 3 Series", "45000", "Luxury sports sedan"),
    ("6", "2024 Chevrolet Silverado", "38000", "Heavy-duty pickup truck"),
    ("7", "2023 Mazda CX-5", "27000", "Sporty compact SUV"),
    ("8", "2024 Hyundai Sonata", "26000", "Stylish mid-size sedan"),
    ("9", "2023 Subaru Outback", "31000", "All-wheel drive wagon"),
    ("10", "2024 Jeep Wrangler", "36000", "Iconic off-road SUV"),
    ("11", "2023 Nissan Altima", "25500", "Comfortable family sedan"),
    ("12", "2024 Kia Telluride", "37000", "Spacious three-row SUV"),
    ("13", "2023 Volkswagen Jetta", "24000", "German-engineered compact"),
    ("14", "2024 Mercedes-Benz C-Class", "48000", "Luxury performance"),
    ("15", "2023 Audi A4", "44000", "Premium sports sedan"),
)


def demo_vehicles() -> list[Vehicle]:
    """Fresh list of the demo vehicles, in catalog order."""
    return [
        Vehicle(id=vehicle_id, title=title, price=Decimal(price), description=description)
        for vehicle_id, title, price, description in _DEMO_ROWS
    ]


def build_demo_catalog() -> InMemoryVehicleCatalog:
    return InMemoryVehicleCatalog(demo_vehicles())
