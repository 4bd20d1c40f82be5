#!/usr/bin/env python3
"""
Seed the vehicles table with the demo catalog.

Features:
- Deterministic: same rows, same catalog order on every run
- Idempotent: safe to run multiple times (clears before seeding)

Usage:
    DATABASE_URL=postgresql+psycopg://... alembic upgrade head
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_vehicles.py
"""

from __future__ import annotations

import sys
from pathlib import Path

from sqlalchemy import delete
from sqlalchemy.orm import Session

# Add src to path so we can import our modules
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from vehicle_search.adapters.demo_catalog import demo_vehicles
from vehicle_search.domain.vehicle import Vehicle
from vehicle_search.infra.db.models.vehicle import VehicleRow
from vehicle_search.infra.db.session import get_session


def to_row(vehicle: Vehicle, position: int) -> VehicleRow:
    return VehicleRow(
        id=vehicle.id,
        position=position,
        title=vehicle.title,
        price=vehicle.price,
        description=vehicle.description,
    )


def seed_vehicles(session: Session, vehicles: list[Vehicle]) -> int:
    """
    Replace the vehicles table contents, keeping the given order.

    Args:
        session: Open session; the caller commits
        vehicles: Vehicles in catalog order

    Returns:
        Number of rows inserted
    """
    deleted = session.execute(delete(VehicleRow)).rowcount
    print(f"🗑️  Deleted {deleted} existing vehicles")

    rows = [to_row(vehicle, position) for position, vehicle in enumerate(vehicles)]
    session.add_all(rows)
    session.flush()

    return len(rows)


def main() -> None:
    vehicles = demo_vehicles()
    print(f"🌱 Seeding database with {len(vehicles)} vehicles...")

    with get_session() as session:
        inserted = seed_vehicles(session, vehicles)

    print(f"✅ Successfully seeded {inserted} vehicles!")
    for vehicle in vehicles[:5]:
        print(f"   {vehicle.id}. {vehicle.title} - ${vehicle.price:,}")
    if len(vehicles) > 5:
        print(f"   ... and {len(vehicles) - 5} more")


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        print(f"❌ Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
