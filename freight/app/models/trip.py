"""
Trip database model.

A trip binds one driver, one truck and one cargo to a route.
"""

from sqlalchemy import Column, Integer, ForeignKey, DateTime, Enum
from sqlalchemy.sql import func
from freight.app.db.session import Base
from freight.app.models.status_enums import TripStatus


class Trip(Base):
    """
    Trip model.

    The status column is derived from the actual dates by the trip status
    resolver on every save and during bulk resynchronization.
    """
    __tablename__ = "trips"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # Assignment
    driver_id = Column(Integer, ForeignKey('drivers.id'), nullable=False, index=True)
    truck_id = Column(Integer, ForeignKey('trucks.id'), nullable=False, index=True)
    cargo_id = Column(Integer, ForeignKey('cargos.id'), nullable=False, index=True)
    route_id = Column(Integer, ForeignKey('routes.id'), nullable=False, index=True)

    # Planned dates
    departure_date = Column(DateTime(timezone=True), nullable=False)
    arrival_date = Column(DateTime(timezone=True), nullable=False)

    # Actual dates
    departure_date_actual = Column(DateTime(timezone=True), nullable=True)
    arrival_date_actual = Column(DateTime(timezone=True), nullable=True)

    # Status (derived)
    status = Column(Enum(TripStatus), default=TripStatus.PLANNED, nullable=False, index=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    def __repr__(self):
        return f"<Trip(id={self.id}, driver_id={self.driver_id}, truck_id={self.truck_id}, status='{self.status.value if self.status else None}')>"
