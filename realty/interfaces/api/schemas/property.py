"""Property schemas.

Listings keep the PascalCase keys the mobile client was built against.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

from .common import IdStr


class PropertyRead(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_pascal, populate_by_name=True, from_attributes=True
    )

    id: IdStr = Field(alias="_id")
    name: str | None = None
    property_title: str | None = None
    price: str | None = None
    location: str | None = None
    total_area: float | None = None
    baths: int | None = None


class PropertyList(BaseModel):
    data: list[PropertyRead]
    message: str | None = None


__all__ = ["PropertyList", "PropertyRead"]
