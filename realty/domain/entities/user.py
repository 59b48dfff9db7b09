"""Domain entity representing a property seeker."""

from dataclasses import dataclass


@dataclass
class User:
    """Person browsing properties through the mobile app."""

    id: int | None
    email: str
    password: str
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None


__all__ = ["User"]
