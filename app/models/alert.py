"""
Alerts table — vehicle-linked notices (maintenance due, overdue, breakdown ...).
Unread alerts feed vehicle validation and the dashboard unread counter.
"""

from sqlalchemy import Column, Integer, String, DateTime, Text, Boolean, ForeignKey
from app.database import Base


class Alert(Base):
    __tablename__ = "alerts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id"), nullable=False, index=True)
    type = Column(String(50), nullable=False, index=True)
    message = Column(Text, nullable=False)
    priority = Column(String(10), default="medium", nullable=False)
    is_read = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime, nullable=False, index=True)

    def __repr__(self):
        return f"<Alert {self.id} vehicle={self.vehicle_id} priority={self.priority} read={self.is_read}>"
