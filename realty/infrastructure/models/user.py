"""SQLAlchemy model for the user table."""

from sqlalchemy import Column, Integer, String

from realty.infrastructure.database import Base


class UserModel(Base):
    """Database representation of a property seeker."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(120), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)
    first_name = Column(String(80), nullable=True)
    last_name = Column(String(80), nullable=True)
    phone = Column(String(40), nullable=True)
    address = Column(String(255), nullable=True)
    city = Column(String(80), nullable=True)
    state = Column(String(80), nullable=True)
    zip = Column(String(20), nullable=True)


__all__ = ["UserModel"]
