"""
Driver database model.
"""

from sqlalchemy import Column, Integer, String, Date, Enum
from freight.app.db.session import Base
from freight.app.models.status_enums import DriverStatus


class Driver(Base):
    """
    Driver model.

    The status is owned by the fleet status engine: it only changes when a
    trip referencing the driver is cascaded or the fleet is resynchronized.
    """
    __tablename__ = "drivers"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # Personal details
    surname = Column(String(100), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    middle_name = Column(String(100), nullable=True)
    birth_date = Column(Date, nullable=True)

    # Contact and licensing
    phone_number = Column(String(30), nullable=False)
    license_number = Column(String(50), nullable=False)

    # Status
    status = Column(Enum(DriverStatus), default=DriverStatus.FREE, nullable=False, index=True)

    @property
    def full_name(self) -> str:
        parts = [self.surname, self.name]
        if self.middle_name and self.middle_name.strip():
            parts.append(self.middle_name)
        return " ".join(parts)

    def __repr__(self):
        return f"<Driver(id={self.id}, name='{self.full_name}', status='{self.status.value if self.status else None}')>"
