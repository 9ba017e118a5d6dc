"""
Route database model.
"""

from sqlalchemy import Column, Integer, String
from freight.app.db.session import Base


class Route(Base):
    """Route model: an origin and a destination. Read-only input to trips."""
    __tablename__ = "routes"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    origin = Column(String(200), nullable=False)
    destination = Column(String(200), nullable=False)

    @property
    def full_route(self) -> str:
        return f"{self.origin} → {self.destination}"

    def __repr__(self):
        return f"<Route(id={self.id}, route='{self.full_route}')>"
