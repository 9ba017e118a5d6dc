"""
Cargo database model.
"""

from sqlalchemy import Column, Integer, String, Float, Enum
from freight.app.db.session import Base
from freight.app.models.status_enums import CargoStatus, CargoType


class Cargo(Base):
    """
    Cargo model.

    A cargo is carried by at most one trip over its lifetime.
    """
    __tablename__ = "cargos"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    description = Column(String(50), nullable=False)
    weight_tons = Column(Float, nullable=False)
    sender = Column(String(200), nullable=False)
    receiver = Column(String(200), nullable=False)
    cargo_type = Column(Enum(CargoType), nullable=False)

    # Status
    status = Column(Enum(CargoStatus), default=CargoStatus.NOT_DELIVERED, nullable=False, index=True)

    def __repr__(self):
        return f"<Cargo(id={self.id}, description='{self.description}', status='{self.status.value if self.status else None}')>"
