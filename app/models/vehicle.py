"""
Fleet vehicles table.
Status is set manually through the API or recomputed by validation_service.
"""

from sqlalchemy import Column, Integer, String, DateTime
from app.database import Base


class Vehicle(Base):
    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    plate = Column(String(20), unique=True, nullable=False, index=True)
    make = Column(String(100), nullable=False)
    model = Column(String(100), nullable=False)
    year = Column(Integer, nullable=False)
    type = Column(String(50), nullable=False)          # van | truck | car ...
    mileage = Column(Integer, default=0, nullable=False)  # km
    status = Column(String(20), default="operational", nullable=False, index=True)
    created_at = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<Vehicle {self.plate} {self.make} {self.model} status={self.status}>"
