"""Maintenance history — CRUD plus the parts consumed by each job."""

from fastapi import APIRouter, Depends, HTTPException
from typing import Optional

from app.deps import get_storage
from app.schemas.maintenance import (
    MaintenanceRecordCreate, MaintenanceRecordOut, MaintenanceRecordUpdate,
    MaintenanceWithParts, PartUsageCreate, PartUsageOut,
)
from app.schemas.part import PartOut
from app.services.storage import FleetStorage

router = APIRouter()


@router.get("/maintenance", response_model=list[MaintenanceWithParts],
            summary="Maintenance history with vehicle and parts used")
def list_maintenance(vehicle_id: Optional[int] = None, storage: FleetStorage = Depends(get_storage)):
    records = storage.list_maintenance_with_parts()
    if vehicle_id is not None:
        records = [r for r in records if r.vehicle_id == vehicle_id]
    return records


@router.post("/maintenance", response_model=MaintenanceRecordOut, status_code=201,
             summary="Record a maintenance job")
def create_maintenance(body: MaintenanceRecordCreate, storage: FleetStorage = Depends(get_storage)):
    """
    Omit `completed_at` to stamp the job as finished now.
    Send `completed_at: null` to record a job still in progress.
    """
    if not storage.get_vehicle(body.vehicle_id):
        raise HTTPException(status_code=404, detail=f"Vehicle {body.vehicle_id} not found")
    return storage.create_maintenance_record(body.model_dump(exclude_unset=True))


@router.get("/maintenance/{record_id}", response_model=MaintenanceRecordOut)
def get_maintenance(record_id: int, storage: FleetStorage = Depends(get_storage)):
    record = storage.get_maintenance_record(record_id)
    if not record:
        raise HTTPException(status_code=404, detail="Maintenance record not found")
    return record


@router.patch("/maintenance/{record_id}", response_model=MaintenanceRecordOut)
def update_maintenance(record_id: int, body: MaintenanceRecordUpdate, storage: FleetStorage = Depends(get_storage)):
    data = body.model_dump(exclude_unset=True)
    if data.get("vehicle_id") is not None and not storage.get_vehicle(data["vehicle_id"]):
        raise HTTPException(status_code=404, detail=f"Vehicle {data['vehicle_id']} not found")
    record = storage.update_maintenance_record(record_id, data)
    if not record:
        raise HTTPException(status_code=404, detail="Maintenance record not found")
    return record


@router.delete("/maintenance/{record_id}")
def delete_maintenance(record_id: int, storage: FleetStorage = Depends(get_storage)):
    if not storage.delete_maintenance_record(record_id):
        raise HTTPException(status_code=404, detail="Maintenance record not found")
    return {"status": "deleted", "id": record_id}


@router.get("/maintenance/{record_id}/parts", response_model=list[PartUsageOut])
def list_parts_used(record_id: int, storage: FleetStorage = Depends(get_storage)):
    if not storage.get_maintenance_record(record_id):
        raise HTTPException(status_code=404, detail="Maintenance record not found")
    return storage.list_part_usage(record_id)


@router.post("/maintenance/{record_id}/parts", response_model=PartUsageOut, status_code=201,
             summary="Attach a consumed part to a maintenance job")
def add_part_used(record_id: int, body: PartUsageCreate, storage: FleetStorage = Depends(get_storage)):
    if not storage.get_maintenance_record(record_id):
        raise HTTPException(status_code=404, detail="Maintenance record not found")
    part = storage.get_part(body.part_id)
    if not part:
        raise HTTPException(status_code=404, detail=f"Part {body.part_id} not found")
    usage = storage.create_part_usage({"maintenance_id": record_id, **body.model_dump()})
    out = PartUsageOut.model_validate(usage)
    out.part = PartOut.model_validate(part)
    return out
