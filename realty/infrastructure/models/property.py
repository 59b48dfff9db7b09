"""SQLAlchemy model for listed properties."""

from sqlalchemy import Column, Float, Integer, String

from realty.infrastructure.database import Base


class PropertyModel(Base):
    """Database representation of a property listing."""

    __tablename__ = "property"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=True)
    property_title = Column(String(255), nullable=True)
    price = Column(String(80), nullable=True)
    location = Column(String(255), nullable=True)
    total_area = Column(Float, nullable=True)
    baths = Column(Integer, nullable=True)


__all__ = ["PropertyModel"]
