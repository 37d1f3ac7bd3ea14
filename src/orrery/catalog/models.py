from sqlalchemy import Column, DateTime, Float, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""

    pass


class PlanetRow(Base):
    """
    A stored planet record.

    Distances are kept in scene units; ``orbit_period_days`` is null for
    bodies that do not orbit.
    """

    __tablename__ = "planets"
    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String, nullable=False, unique=True)
    name = Column(String, nullable=False)
    distance = Column(Float, nullable=False, default=0.0)
    orbit_period_days = Column(Float)
    radius = Column(Float)
    texture_url = Column(String)
    info = Column(Text)

    created_on = Column(DateTime, server_default=func.now(), nullable=False)

    def to_record(self) -> dict:
        """Render the row in the same loose shape as a JSON catalog record."""
        return {
            "key": self.key,
            "name": self.name,
            "distance": self.distance,
            "orbitPeriodDays": self.orbit_period_days,
            "radius": self.radius,
            "textureUrl": self.texture_url,
            "info": self.info,
        }
