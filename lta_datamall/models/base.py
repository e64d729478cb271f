"""
Base classes for raw wire-shaped models.

A raw model mirrors the JSON the API literally returns (PascalCase keys,
numbers as strings, coded enums) and knows how to convert itself into the
caller-facing domain record through ``into()``.
"""

from typing import Any, Generic, List, TypeVar

from pydantic import BaseModel, ConfigDict


class RawModel(BaseModel):
    """Pydantic model aliased to the API's wire field names."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    @classmethod
    def wire_name(cls, field_name: str) -> str:
        """Get the wire (alias) name of a model field."""
        field = cls.model_fields.get(field_name)
        if field is not None and field.alias:
            return field.alias
        return field_name

    def into(self) -> Any:
        """Convert into the caller-facing domain value."""
        raise NotImplementedError


RawT = TypeVar("RawT", bound=RawModel)


class RawValueEnvelope(RawModel, Generic[RawT]):
    """The ``{"value": [...]}`` envelope used by list endpoints."""

    value: List[RawT]

    def into(self) -> List[Any]:
        return [item.into() for item in self.value]
