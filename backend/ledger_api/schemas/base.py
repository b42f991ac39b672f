"""Shared schema configuration."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts and emits camelCase field names (``fullName``, ``userId``)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StoredRecord(CamelModel):
    """Identifiers carried by every stored record."""

    oid: str = Field(serialization_alias="_id")
    id: int

    model_config = ConfigDict(from_attributes=True)


def reject_nulls(values: dict) -> dict:
    """Refuse explicit ``null`` for fields that are merged into a stored record."""
    if isinstance(values, dict):
        nulls = sorted(key for key, value in values.items() if value is None)
        if nulls:
            raise ValueError(f"Fields may not be null: {', '.join(nulls)}")
    return values


class DeleteResponse(BaseModel):
    message: str
