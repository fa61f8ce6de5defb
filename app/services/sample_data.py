"""
Demo fleet seeded into an empty store on first startup (SEED_SAMPLE_DATA)
or by scripts/setup/init_db.py --seed.
"""

from datetime import datetime

from app.services.storage import FleetStorage
from app.utils.logger import get_logger

logger = get_logger(__name__)

SAMPLE_VEHICLES = [
    {"plate": "ABC-123-FR", "make": "Renault", "model": "Master", "year": 2020, "type": "van", "mileage": 125430, "status": "operational"},
    {"plate": "XYZ-789-FR", "make": "Peugeot", "model": "Partner", "year": 2019, "type": "van", "mileage": 89750, "status": "maintenance_due"},
    {"plate": "DEF-456-FR", "make": "Ford", "model": "Transit", "year": 2018, "type": "van", "mileage": 156890, "status": "in_repair"},
]

SAMPLE_PARTS = [
    {"name": "Oil filter", "reference": "FLT-001-D", "category": "filters", "stock": 25, "min_stock": 5, "unit_price": 1250},
    {"name": "Brake pads", "reference": "BRK-002-F", "category": "brakes", "stock": 3, "min_stock": 5, "unit_price": 4500},
    {"name": "12V battery", "reference": "BAT-003-70", "category": "engine", "stock": 0, "min_stock": 2, "unit_price": 8500},
    {"name": "Tyre 215/75 R16", "reference": "TYR-004-16", "category": "tyres", "stock": 8, "min_stock": 4, "unit_price": 12000},
]

# vehicle_index refers to SAMPLE_VEHICLES
SAMPLE_MAINTENANCE = [
    {"vehicle_index": 0, "type": "oil_change", "description": "Engine oil and filter change", "cost": 6500, "duration": 90,
     "technician": "J. Dubois", "completed_at": datetime(2024, 1, 8), "next_due": datetime(2024, 7, 8)},
    {"vehicle_index": 1, "type": "repair", "description": "Brake pad replacement", "cost": 12000, "duration": 165,
     "technician": "M. Martin", "completed_at": datetime(2024, 1, 5), "next_due": None},
    {"vehicle_index": 2, "type": "inspection", "description": "Periodic roadworthiness inspection", "cost": 7800, "duration": 60,
     "technician": "Auto Control+", "completed_at": datetime(2023, 12, 22), "next_due": datetime(2024, 12, 22)},
]

SAMPLE_ALERTS = [
    {"vehicle_index": 0, "type": "maintenance_due", "message": "Oil change due in 7 days", "priority": "medium"},
    {"vehicle_index": 1, "type": "overdue", "message": "Roadworthiness inspection expired 3 days ago", "priority": "urgent"},
    {"vehicle_index": 2, "type": "inspection_needed", "message": "Brake pads to be checked", "priority": "high"},
]


def seed_sample_data(storage: FleetStorage) -> bool:
    """Insert the demo fleet. Does nothing and returns False if the store has data."""
    if not storage.is_empty():
        logger.info("Store already has data — sample data not loaded")
        return False

    vehicles = [storage.create_vehicle(v) for v in SAMPLE_VEHICLES]
    for p in SAMPLE_PARTS:
        storage.create_part(p)
    for m in SAMPLE_MAINTENANCE:
        data = {k: v for k, v in m.items() if k != "vehicle_index"}
        storage.create_maintenance_record({**data, "vehicle_id": vehicles[m["vehicle_index"]].id})
    for a in SAMPLE_ALERTS:
        data = {k: v for k, v in a.items() if k != "vehicle_index"}
        storage.create_alert({**data, "vehicle_id": vehicles[a["vehicle_index"]].id})

    logger.info(f"Sample data loaded: {len(SAMPLE_VEHICLES)} vehicles, {len(SAMPLE_PARTS)} parts")
    return True
