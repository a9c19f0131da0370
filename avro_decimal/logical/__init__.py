"""Logical type implementations."""

from avro_decimal.logical.base import LogicalType
from avro_decimal.logical.decimal_type import (
    DECIMAL,
    LOGICAL_TYPE_NAME,
    BaseKind,
    DecimalLogicalType,
    DecimalSchemaConstraint,
    decode,
    encode,
    max_precision_for_fixed,
    validate_schema,
)

__all__ = [
    "LogicalType",
    "DECIMAL",
    "LOGICAL_TYPE_NAME",
    "BaseKind",
    "DecimalLogicalType",
    "DecimalSchemaConstraint",
    "decode",
    "encode",
    "max_precision_for_fixed",
    "validate_schema",
]
