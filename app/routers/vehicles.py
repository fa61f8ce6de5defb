"""Fleet vehicles — CRUD, detail views and status validation."""

from fastapi import APIRouter, Depends, HTTPException
from typing import Optional

from app.deps import get_storage
from app.schemas.alert import AlertOut
from app.schemas.maintenance import MaintenanceRecordOut
from app.schemas.validation import FleetValidationOut, ValidationOut, VehicleValidationOut
from app.schemas.vehicle import VehicleCreate, VehicleOut, VehicleUpdate, VehicleWithAlerts
from app.services.storage import FleetStorage
from app.services.validation_service import validate_all, validate_vehicle, VehicleValidation

router = APIRouter()


def _validation_out(v: VehicleValidation) -> VehicleValidationOut:
    return VehicleValidationOut(
        vehicle=VehicleOut.model_validate(v.vehicle),
        previous_status=v.previous_status,
        validation=ValidationOut.model_validate(v.result),
    )


def _vehicle_or_404(storage: FleetStorage, vehicle_id: int):
    vehicle = storage.get_vehicle(vehicle_id)
    if not vehicle:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return vehicle


@router.get("/vehicles", response_model=list[VehicleOut], summary="List vehicles")
def list_vehicles(status: Optional[str] = None, storage: FleetStorage = Depends(get_storage)):
    vehicles = storage.list_vehicles()
    if status:
        vehicles = [v for v in vehicles if v.status == status]
    return vehicles


@router.post("/vehicles", response_model=VehicleOut, status_code=201, summary="Register a vehicle")
def create_vehicle(body: VehicleCreate, storage: FleetStorage = Depends(get_storage)):
    """Duplicate plates are rejected with 409."""
    return storage.create_vehicle(body.model_dump())


@router.post("/vehicles/validate-all", response_model=FleetValidationOut, summary="Validate every vehicle")
def validate_fleet(storage: FleetStorage = Depends(get_storage)):
    results = validate_all(storage)
    return FleetValidationOut(
        validated=len(results),
        changed=sum(1 for r in results if r.changed),
        results=[_validation_out(r) for r in results],
    )


@router.get("/vehicles/{vehicle_id}", response_model=VehicleOut)
def get_vehicle(vehicle_id: int, storage: FleetStorage = Depends(get_storage)):
    return _vehicle_or_404(storage, vehicle_id)


@router.get("/vehicles/{vehicle_id}/details", response_model=VehicleWithAlerts,
            summary="Vehicle with its alerts and last maintenance")
def get_vehicle_details(vehicle_id: int, storage: FleetStorage = Depends(get_storage)):
    detail = storage.get_vehicle_with_alerts(vehicle_id)
    if not detail:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return detail


@router.get("/vehicles/{vehicle_id}/maintenance", response_model=list[MaintenanceRecordOut])
def get_vehicle_maintenance(vehicle_id: int, storage: FleetStorage = Depends(get_storage)):
    _vehicle_or_404(storage, vehicle_id)
    return storage.list_maintenance_by_vehicle(vehicle_id)


@router.get("/vehicles/{vehicle_id}/alerts", response_model=list[AlertOut])
def get_vehicle_alerts(vehicle_id: int, storage: FleetStorage = Depends(get_storage)):
    _vehicle_or_404(storage, vehicle_id)
    return storage.list_alerts_by_vehicle(vehicle_id)


@router.patch("/vehicles/{vehicle_id}", response_model=VehicleOut, summary="Update a vehicle")
def update_vehicle(vehicle_id: int, body: VehicleUpdate, storage: FleetStorage = Depends(get_storage)):
    """Partial update. Setting `status` here overrides it until the next validation."""
    vehicle = storage.update_vehicle(vehicle_id, body.model_dump(exclude_unset=True))
    if not vehicle:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return vehicle


@router.delete("/vehicles/{vehicle_id}", summary="Remove a vehicle")
def delete_vehicle(vehicle_id: int, storage: FleetStorage = Depends(get_storage)):
    """Maintenance records and alerts of the vehicle are kept."""
    if not storage.delete_vehicle(vehicle_id):
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return {"status": "deleted", "id": vehicle_id}


@router.post("/vehicles/{vehicle_id}/validate", response_model=VehicleValidationOut,
             summary="Recompute a vehicle's status")
def validate_one(vehicle_id: int, storage: FleetStorage = Depends(get_storage)):
    result = validate_vehicle(storage, vehicle_id)
    if result is None:
        raise HTTPException(status_code=404, detail="Vehicle not found")
    return _validation_out(result)
