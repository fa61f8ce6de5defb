from pydantic import BaseModel
from datetime import datetime
from typing import Optional

from app.schemas.vehicle import VehicleOut


class ValidationOut(BaseModel):
    status: str
    reasons: list[str]
    urgent_issues: list[str]
    last_inspection: Optional[datetime]
    next_maintenance_due: Optional[datetime]

    class Config:
        from_attributes = True


class VehicleValidationOut(BaseModel):
    vehicle: VehicleOut
    previous_status: str
    validation: ValidationOut


class FleetValidationOut(BaseModel):
    validated: int
    changed: int
    results: list[VehicleValidationOut]
