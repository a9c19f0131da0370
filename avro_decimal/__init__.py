"""Avro decimal logical type - Python Implementation."""

from avro_decimal.config import DEFAULT_CODEC_CONFIG, CodecConfig
from avro_decimal.errors import (
    AvroDecimalError,
    InvalidCastError,
    PrecisionExceededError,
    ScaleMismatchError,
    SchemaConstraintError,
    SizingError,
)
from avro_decimal.logical import (
    DECIMAL,
    BaseKind,
    DecimalLogicalType,
    DecimalSchemaConstraint,
    decode,
    encode,
    validate_schema,
)
from avro_decimal.native import NativeKind
from avro_decimal.schema import FixedSchema, FixedValue, LogicalSchema, PrimitiveSchema, parse_schema
from avro_decimal.value import MINUS_ONE, ONE, ZERO, AvroDecimal

__version__ = "0.1.0"
__all__ = [
    "AvroDecimal",
    "ZERO",
    "ONE",
    "MINUS_ONE",
    "NativeKind",
    "CodecConfig",
    "DEFAULT_CODEC_CONFIG",
    "AvroDecimalError",
    "InvalidCastError",
    "PrecisionExceededError",
    "ScaleMismatchError",
    "SchemaConstraintError",
    "SizingError",
    "DECIMAL",
    "BaseKind",
    "DecimalLogicalType",
    "DecimalSchemaConstraint",
    "decode",
    "encode",
    "validate_schema",
    "FixedSchema",
    "FixedValue",
    "LogicalSchema",
    "PrimitiveSchema",
    "parse_schema",
    "__version__",
]
