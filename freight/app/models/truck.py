"""
Truck database model.
"""

from sqlalchemy import Column, Integer, String, Float, Enum
from freight.app.db.session import Base
from freight.app.models.status_enums import TruckStatus


class Truck(Base):
    """Truck model."""
    __tablename__ = "trucks"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # Identification
    brand = Column(String(100), nullable=False)
    model = Column(String(100), nullable=False)
    year = Column(Integer, nullable=True)
    plate_number = Column(String(20), nullable=False, index=True)

    # Capacity
    capacity_tons = Column(Float, nullable=False)

    # Status
    status = Column(Enum(TruckStatus), default=TruckStatus.FREE, nullable=False, index=True)

    def __repr__(self):
        return f"<Truck(id={self.id}, plate='{self.plate_number}', status='{self.status.value if self.status else None}')>"
