"""Pydantic models for the schema descriptors the decimal codec reads.

Only the pieces the codec needs are modelled: primitive and fixed base
schemas, a logical wrapper that carries schema properties (precision, scale
and anything else), and the generic fixed-length value.

Schemas can be built directly or parsed from Avro-style JSON dicts:

    schema = parse_schema({"type": "bytes", "logicalType": "decimal", "precision": 4, "scale": 2})
    schema.get_property("precision")   # "4"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Any, Literal, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from avro_decimal.errors import SizingError

__all__ = [
    "PrimitiveType",
    "PrimitiveSchema",
    "FixedSchema",
    "BaseSchema",
    "LogicalSchema",
    "SchemaDescriptor",
    "FixedValue",
    "parse_schema",
]

PrimitiveType = Literal["null", "boolean", "int", "long", "float", "double", "bytes", "string"]

# Keys of a fixed schema that belong to the fixed type rather than the logical wrapper
_FIXED_KEYS = frozenset({"type", "name", "namespace", "aliases", "size", "doc"})


class PrimitiveSchema(BaseModel):
    """A primitive Avro type such as bytes."""

    type: PrimitiveType

    model_config = ConfigDict(frozen=True)


class FixedSchema(BaseModel):
    """A named fixed-length byte type."""

    type: Literal["fixed"] = "fixed"
    name: str
    namespace: str | None = None
    aliases: list[str] = Field(default_factory=list)
    size: int = Field(gt=0, description="Number of bytes in every value")

    model_config = ConfigDict(frozen=True)

    @property
    def fullname(self) -> str:
        return f"{self.namespace}.{self.name}" if self.namespace else self.name


BaseSchema = Annotated[PrimitiveSchema | FixedSchema, Field(union_mode="left_to_right")]


class LogicalSchema(BaseModel):
    """A base schema annotated with a logical type and its properties.

    Properties other than the logical type name (precision, scale, custom
    keys) are kept as pydantic extra fields.
    """

    base_schema: BaseSchema
    logical_type: str = Field(alias="logicalType")

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)

    @property
    def properties(self) -> dict[str, Any]:
        """Schema properties other than the logical type name."""
        return dict(self.model_extra or {})

    def get_property(self, name: str) -> str | None:
        """Return a property as a string, or None if absent.

        Non-string JSON values are returned in their text form, so a
        precision of 4 reads back as "4".
        """
        extra = self.model_extra or {}
        raw = extra.get(name)
        if raw is None:
            return None
        return raw if isinstance(raw, str) else str(raw)


@runtime_checkable
class SchemaDescriptor(Protocol):
    """What the codec needs from a schema: a base type and string properties."""

    @property
    def base_schema(self) -> PrimitiveSchema | FixedSchema: ...

    def get_property(self, name: str) -> str | None: ...


@dataclass(frozen=True)
class FixedValue:
    """A value of a fixed schema: exactly schema.size raw bytes.

    Raises:
        SizingError: If the byte count differs from schema.size
    """

    schema: FixedSchema
    value: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.value, bytes):
            object.__setattr__(self, "value", bytes(self.value))
        if len(self.value) != self.schema.size:
            raise SizingError(
                f"Fixed '{self.schema.fullname}' requires {self.schema.size} bytes, got {len(self.value)}",
                value=self.value,
                required=len(self.value),
                limit=self.schema.size,
            )


def parse_schema(data: dict[str, Any]) -> LogicalSchema:
    """Parse an Avro-style logical schema dict.

    Accepts both the flat form, where the base type's attributes sit next
    to the logical ones:

        {"type": "fixed", "name": "d", "size": 5, "logicalType": "decimal", "precision": 9}

    and the nested form, where "type" holds the base schema:

        {"type": {"type": "fixed", "name": "d", "size": 5}, "logicalType": "decimal", "precision": 9}

    Raises:
        pydantic.ValidationError: If the dict is not a logical schema
    """
    base_raw = data.get("type")
    if isinstance(base_raw, dict):
        base: dict[str, Any] = base_raw
        props = {k: v for k, v in data.items() if k != "type"}
    elif base_raw == "fixed":
        base = {k: v for k, v in data.items() if k in _FIXED_KEYS}
        props = {k: v for k, v in data.items() if k not in _FIXED_KEYS}
    else:
        base = {"type": base_raw}
        props = {k: v for k, v in data.items() if k != "type"}
    return LogicalSchema.model_validate({"base_schema": base, **props})
