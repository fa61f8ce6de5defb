"""Join table: parts consumed by a maintenance job."""

from sqlalchemy import Column, Integer, ForeignKey
from app.database import Base


class PartUsage(Base):
    __tablename__ = "part_usage"

    id = Column(Integer, primary_key=True, autoincrement=True)
    maintenance_id = Column(Integer, ForeignKey("maintenance_records.id"), nullable=False, index=True)
    part_id = Column(Integer, ForeignKey("parts.id"), nullable=False)
    quantity = Column(Integer, default=1, nullable=False)

    def __repr__(self):
        return f"<PartUsage maintenance={self.maintenance_id} part={self.part_id} x{self.quantity}>"
