"""
Maintenance history table.
A record with completed_at = NULL is a job still in progress.
"""

from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey
from app.database import Base


class MaintenanceRecord(Base):
    __tablename__ = "maintenance_records"

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id"), nullable=False, index=True)
    type = Column(String(50), nullable=False)          # oil_change | repair | inspection ...
    description = Column(Text, nullable=False)
    cost = Column(Integer, nullable=False)             # minor currency units
    duration = Column(Integer, nullable=False)         # minutes
    technician = Column(String(200), nullable=False)
    completed_at = Column(DateTime, index=True)
    next_due = Column(DateTime)

    def __repr__(self):
        return f"<MaintenanceRecord {self.id} vehicle={self.vehicle_id} type={self.type}>"
