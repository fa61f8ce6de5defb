"""Spare parts inventory — CRUD. Every part is returned with its stock status."""

from fastapi import APIRouter, Depends, HTTPException
from typing import Optional

from app.deps import get_storage
from app.schemas.part import PartCreate, PartUpdate, PartWithStatus
from app.services.storage import FleetStorage

router = APIRouter()


@router.get("/parts", response_model=list[PartWithStatus], summary="List parts with stock status")
def list_parts(
    category: Optional[str] = None,
    status: Optional[str] = None,
    storage: FleetStorage = Depends(get_storage),
):
    """Filter by category or by stock status (in_stock | low_stock | out_of_stock)."""
    parts = storage.list_parts_with_status()
    if category:
        parts = [p for p in parts if p.category == category]
    if status:
        parts = [p for p in parts if p.status == status]
    return parts


@router.post("/parts", response_model=PartWithStatus, status_code=201, summary="Add a part")
def create_part(body: PartCreate, storage: FleetStorage = Depends(get_storage)):
    return storage.with_status(storage.create_part(body.model_dump()))


@router.get("/parts/{part_id}", response_model=PartWithStatus)
def get_part(part_id: int, storage: FleetStorage = Depends(get_storage)):
    part = storage.get_part(part_id)
    if not part:
        raise HTTPException(status_code=404, detail="Part not found")
    return storage.with_status(part)


@router.patch("/parts/{part_id}", response_model=PartWithStatus, summary="Update a part (e.g. restock)")
def update_part(part_id: int, body: PartUpdate, storage: FleetStorage = Depends(get_storage)):
    part = storage.update_part(part_id, body.model_dump(exclude_unset=True))
    if not part:
        raise HTTPException(status_code=404, detail="Part not found")
    return storage.with_status(part)


@router.delete("/parts/{part_id}", summary="Remove a part")
def delete_part(part_id: int, storage: FleetStorage = Depends(get_storage)):
    if not storage.delete_part(part_id):
        raise HTTPException(status_code=404, detail="Part not found")
    return {"status": "deleted", "id": part_id}
