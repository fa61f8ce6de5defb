"""
Spare parts inventory table.
Stock status (in/low/out) is derived, never stored — see status_classifier.
"""

from sqlalchemy import Column, Integer, String, DateTime
from app.database import Base


class Part(Base):
    __tablename__ = "parts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    reference = Column(String(50), unique=True, nullable=False, index=True)
    category = Column(String(50), nullable=False)
    stock = Column(Integer, default=0, nullable=False)
    min_stock = Column(Integer, default=5, nullable=False)
    unit_price = Column(Integer, nullable=False)       # minor currency units (cents)
    created_at = Column(DateTime, nullable=False)

    def __repr__(self):
        return f"<Part {self.reference} stock={self.stock}/{self.min_stock}>"
