"""Shared pydantic configuration for request and response bodies."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel

# Identifiers leave the API as strings whatever the store uses.
IdStr = Annotated[str, BeforeValidator(str)]


class CamelModel(BaseModel):
    """Model exposing ``snake_case`` attributes under ``camelCase`` keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    message: str


__all__ = ["CamelModel", "IdStr", "MessageResponse"]
