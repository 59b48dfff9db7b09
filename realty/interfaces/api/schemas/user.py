"""User schemas."""

from pydantic import EmailStr, Field

from .common import CamelModel, IdStr


class UserProfile(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None


class UserSignup(UserProfile):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserLogin(CamelModel):
    email: EmailStr
    password: str


class UserUpdate(UserProfile):
    email: EmailStr


class UserRead(UserProfile):
    id: IdStr = Field(alias="_id")
    email: str


class UserEnvelope(CamelModel):
    message: str
    user: UserRead


__all__ = ["UserEnvelope", "UserLogin", "UserRead", "UserSignup", "UserUpdate"]
