from pydantic import BaseModel, Field
from datetime import datetime
from typing import Literal, Optional

from app.schemas.alert import AlertOut
from app.schemas.maintenance import MaintenanceRecordOut

VehicleStatus = Literal["operational", "maintenance_due", "in_repair"]


class VehicleCreate(BaseModel):
    plate: str = Field(min_length=1, max_length=20)
    make: str
    model: str
    year: int
    type: str                # van | truck | car ...
    mileage: int = Field(default=0, ge=0)
    status: VehicleStatus = "operational"


class VehicleUpdate(BaseModel):
    """Partial patch — only fields sent by the client are applied."""
    plate: Optional[str] = Field(default=None, min_length=1, max_length=20)
    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    type: Optional[str] = None
    mileage: Optional[int] = Field(default=None, ge=0)
    status: Optional[VehicleStatus] = None


class VehicleOut(BaseModel):
    id: int
    plate: str
    make: str
    model: str
    year: int
    type: str
    mileage: int
    status: str
    created_at: datetime

    class Config:
        from_attributes = True


class VehicleWithAlerts(VehicleOut):
    alerts: list[AlertOut] = []
    last_maintenance: Optional[MaintenanceRecordOut] = None
