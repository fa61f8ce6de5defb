"""
Vehicle validation: recompute status from alerts, maintenance history and
mileage (rules in status_classifier) and persist it on the vehicle.
Used by the vehicles router ("validate one" / "validate all").
"""

from datetime import date
from typing import Optional

from app.services.status_classifier import classify_vehicle, ValidationResult
from app.services.storage import FleetStorage
from app.utils.logger import get_logger

logger = get_logger(__name__)


class VehicleValidation:
    """Outcome of validating one vehicle."""

    def __init__(self, vehicle, previous_status: str, result: ValidationResult):
        self.vehicle = vehicle
        self.previous_status = previous_status
        self.result = result

    @property
    def changed(self) -> bool:
        return self.previous_status != self.result.status


def _apply(storage: FleetStorage, vehicle, alerts, records, today) -> VehicleValidation:
    previous = vehicle.status
    result = classify_vehicle(vehicle, alerts, records, today=today)
    if result.status != previous:
        vehicle = storage.update_vehicle(vehicle.id, {"status": result.status})
        logger.info(f"[VALIDATION] {vehicle.plate}: {previous} → {result.status} ({'; '.join(result.reasons)})")
    else:
        logger.debug(f"[VALIDATION] {vehicle.plate}: unchanged ({previous})")
    return VehicleValidation(vehicle, previous, result)


def validate_vehicle(storage: FleetStorage, vehicle_id: int, today: Optional[date] = None) -> Optional[VehicleValidation]:
    """Validate a single vehicle. Returns None if it does not exist."""
    vehicle = storage.get_vehicle(vehicle_id)
    if vehicle is None:
        return None
    return _apply(
        storage, vehicle,
        storage.list_alerts_by_vehicle(vehicle_id),
        storage.list_maintenance_by_vehicle(vehicle_id),
        today,
    )


def validate_all(storage: FleetStorage, today: Optional[date] = None) -> list[VehicleValidation]:
    """Validate every vehicle in turn. Re-running with unchanged data changes nothing."""
    alerts = storage.list_alerts()
    records = storage.list_maintenance_records()
    results = [_apply(storage, v, alerts, records, today) for v in storage.list_vehicles()]
    changed = sum(1 for r in results if r.changed)
    logger.info(f"[VALIDATION] Fleet validated: {len(results)} vehicles, {changed} status change(s)")
    return results
