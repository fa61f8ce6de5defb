from pydantic import BaseModel, Field, field_validator
from datetime import datetime, timezone
from typing import Optional

from app.schemas.part import PartOut


def _to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Timestamps are stored as naive UTC."""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


class MaintenanceRecordCreate(BaseModel):
    vehicle_id: int
    type: str                # oil_change | repair | inspection ...
    description: str
    cost: int = Field(ge=0)          # cents
    duration: int = Field(ge=0)      # minutes
    technician: str
    completed_at: Optional[datetime] = None   # omitted → now, explicit null → in progress
    next_due: Optional[datetime] = None

    @field_validator("completed_at", "next_due")
    @classmethod
    def naive_utc(cls, value):
        return _to_naive_utc(value)


class MaintenanceRecordUpdate(BaseModel):
    vehicle_id: Optional[int] = None
    type: Optional[str] = None
    description: Optional[str] = None
    cost: Optional[int] = Field(default=None, ge=0)
    duration: Optional[int] = Field(default=None, ge=0)
    technician: Optional[str] = None
    completed_at: Optional[datetime] = None
    next_due: Optional[datetime] = None

    @field_validator("completed_at", "next_due")
    @classmethod
    def naive_utc(cls, value):
        return _to_naive_utc(value)


class MaintenanceRecordOut(BaseModel):
    id: int
    vehicle_id: int
    type: str
    description: str
    cost: int
    duration: int
    technician: str
    completed_at: Optional[datetime]
    next_due: Optional[datetime]

    class Config:
        from_attributes = True


class PartUsageCreate(BaseModel):
    part_id: int
    quantity: int = Field(default=1, ge=1)


class PartUsageOut(BaseModel):
    id: int
    maintenance_id: int
    part_id: int
    quantity: int
    part: Optional[PartOut] = None     # None when the part was deleted

    class Config:
        from_attributes = True


class VehicleSummary(BaseModel):
    id: int
    plate: str
    make: str
    model: str

    class Config:
        from_attributes = True


class MaintenanceWithParts(MaintenanceRecordOut):
    vehicle: Optional[VehicleSummary] = None   # None when the vehicle was deleted
    parts_used: list[PartUsageOut] = []
