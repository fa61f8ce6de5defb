"""Vehicle alerts — list, raise, mark as read, delete."""

from fastapi import APIRouter, Depends, HTTPException
from typing import Optional

from app.deps import get_storage
from app.schemas.alert import AlertCreate, AlertOut
from app.services.storage import FleetStorage

router = APIRouter()


@router.get("/alerts", response_model=list[AlertOut], summary="All alerts — newest first")
def get_all_alerts(
    vehicle_id: Optional[int] = None,
    priority: Optional[str] = None,
    unread_only: bool = False,
    limit: int = 50,
    storage: FleetStorage = Depends(get_storage),
):
    """Filter by vehicle, priority or read state."""
    alerts = storage.list_alerts_by_vehicle(vehicle_id) if vehicle_id is not None else storage.list_alerts()
    if priority:
        alerts = [a for a in alerts if a.priority == priority]
    if unread_only:
        alerts = [a for a in alerts if not a.is_read]
    alerts = sorted(alerts, key=lambda a: (a.created_at, a.id), reverse=True)
    return alerts[:limit]


@router.post("/alerts", response_model=AlertOut, status_code=201, summary="Raise an alert")
def create_alert(body: AlertCreate, storage: FleetStorage = Depends(get_storage)):
    if not storage.get_vehicle(body.vehicle_id):
        raise HTTPException(status_code=404, detail=f"Vehicle {body.vehicle_id} not found")
    return storage.create_alert(body.model_dump())


@router.patch("/alerts/{alert_id}/read", summary="Mark an alert as read")
def mark_alert_read(alert_id: int, storage: FleetStorage = Depends(get_storage)):
    """Idempotent: marking a read alert again succeeds."""
    if not storage.mark_alert_read(alert_id):
        raise HTTPException(status_code=404, detail="Alert not found")
    return {"status": "read", "id": alert_id}


@router.delete("/alerts/{alert_id}")
def delete_alert(alert_id: int, storage: FleetStorage = Depends(get_storage)):
    if not storage.delete_alert(alert_id):
        raise HTTPException(status_code=404, detail="Alert not found")
    return {"status": "deleted", "id": alert_id}
