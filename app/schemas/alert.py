from pydantic import BaseModel
from datetime import datetime
from typing import Literal

AlertPriority = Literal["medium", "high", "urgent"]


class AlertCreate(BaseModel):
    vehicle_id: int
    type: str                # maintenance_due | overdue | inspection_needed | breakdown ...
    message: str
    priority: AlertPriority = "medium"


class AlertOut(BaseModel):
    id: int
    vehicle_id: int
    type: str
    message: str
    priority: str
    is_read: bool
    created_at: datetime

    class Config:
        from_attributes = True
