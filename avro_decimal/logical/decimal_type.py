"""The 'decimal' logical type.

Decimals are stored on the wire as the two's-complement big-endian bytes of
their unscaled value, on top of either a variable-length bytes type or a
fixed type. Precision and scale come from the schema, not from the bytes:

    {"type": "bytes", "logicalType": "decimal", "precision": 4, "scale": 2}

    AvroDecimal(-1, 2)   -> b"\\xff"
    AvroDecimal(1234, 2) -> b"\\x04\\xd2"

For a fixed(size) base the bytes are sign-extended to exactly size bytes.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

import structlog

from avro_decimal.config import DEFAULT_CODEC_CONFIG, CodecConfig
from avro_decimal.errors import (
    InvalidCastError,
    PrecisionExceededError,
    ScaleMismatchError,
    SchemaConstraintError,
    SizingError,
)
from avro_decimal.math import from_signed_bytes, pow10, sign_extend, to_signed_bytes
from avro_decimal.schema import FixedValue, SchemaDescriptor
from avro_decimal.value import AvroDecimal

from .base import LogicalType

__all__ = [
    "LOGICAL_TYPE_NAME",
    "BaseKind",
    "DecimalSchemaConstraint",
    "DecimalLogicalType",
    "DECIMAL",
    "max_precision_for_fixed",
    "validate_schema",
    "encode",
    "decode",
]

logger = structlog.get_logger()

LOGICAL_TYPE_NAME = "decimal"

_INT_PROPERTY = re.compile(r"[+-]?[0-9]+")

# Schema integers are Int32
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class BaseKind(str, Enum):
    """Wire types the decimal logical type can be layered on."""

    BYTES = "bytes"
    FIXED = "fixed"


@dataclass(frozen=True)
class DecimalSchemaConstraint:
    """Validated decimal properties of a schema.

    Attributes:
        precision: Maximum number of significant digits (> 0)
        scale: Number of fractional digits, 0 <= scale <= precision
        base_kind: Underlying wire type
        fixed_size: Byte width when base_kind is FIXED, else None
    """

    precision: int
    scale: int = 0
    base_kind: BaseKind = BaseKind.BYTES
    fixed_size: int | None = None

    @property
    def is_fixed(self) -> bool:
        return self.base_kind is BaseKind.FIXED


def max_precision_for_fixed(size: int) -> int:
    """Largest number of decimal digits a signed fixed(size) can always hold.

    Examples:
        max_precision_for_fixed(1) = 2    # up to 127
        max_precision_for_fixed(4) = 9    # up to 2147483647
        max_precision_for_fixed(16) = 38
    """
    if size <= 0:
        return 0
    return math.floor(math.log10(2 ** (8 * size - 1) - 1))


def _int_property(schema: SchemaDescriptor, name: str, default: int | None = None) -> int | None:
    """Read an integer schema property; absent or empty returns default."""
    raw = schema.get_property(name)
    if raw is None or raw == "":
        return default
    if not _INT_PROPERTY.fullmatch(raw):
        raise SchemaConstraintError(f"'decimal' requires an integer '{name}' property, got '{raw}'")
    # Int32 has at most 10 digits; longer strings are never parsed
    digits = raw.lstrip("+-").lstrip("0")
    value = int(raw) if len(digits) <= 10 else None
    if value is None or not INT32_MIN <= value <= INT32_MAX:
        raise SchemaConstraintError(
            f"'decimal' requires a '{name}' property in [{INT32_MIN}, {INT32_MAX}], got {raw}"
        )
    return value


def _exceeds_precision(unscaled: int, precision: int) -> bool:
    """True if |unscaled| has more than precision decimal digits."""
    magnitude = abs(unscaled)
    # magnitude < 2**bits <= 8**precision < 10**precision
    if magnitude.bit_length() <= 3 * precision:
        return False
    return magnitude >= pow10(precision)


def validate_schema(schema: SchemaDescriptor) -> DecimalSchemaConstraint:
    """Validate a schema for the decimal logical type.

    Checks run in order and the first failure is raised:
    1. the base type is bytes or fixed
    2. precision is present, an integer, and greater than zero
    3. scale (default 0) is an integer in [0, precision]

    Returns:
        The validated constraint

    Raises:
        SchemaConstraintError: On the first violated check
    """
    base = schema.base_schema
    base_type = getattr(base, "type", None)
    fixed_size: int | None = None
    if base_type == BaseKind.BYTES.value:
        base_kind = BaseKind.BYTES
    elif base_type == BaseKind.FIXED.value:
        base_kind = BaseKind.FIXED
        fixed_size = base.size  # type: ignore[union-attr]
    else:
        logger.debug("decimal_schema_rejected", reason="base_type", base_type=base_type)
        raise SchemaConstraintError(
            f"'decimal' can only be used with an underlying bytes or fixed type, got '{base_type}'"
        )

    precision = _int_property(schema, "precision")
    if precision is None:
        logger.debug("decimal_schema_rejected", reason="missing_precision")
        raise SchemaConstraintError("'decimal' requires a 'precision' property")
    if precision <= 0:
        logger.debug("decimal_schema_rejected", reason="precision", precision=precision)
        raise SchemaConstraintError(
            f"'decimal' requires a 'precision' property that is greater than zero, got {precision}"
        )

    scale = _int_property(schema, "scale", 0)
    assert scale is not None
    if scale < 0 or scale > precision:
        logger.debug("decimal_schema_rejected", reason="scale", scale=scale, precision=precision)
        raise SchemaConstraintError(
            f"'decimal' requires a 'scale' property that is zero or less than or equal to "
            f"'precision' ({precision}), got {scale}"
        )

    if fixed_size is not None and precision > max_precision_for_fixed(fixed_size):
        logger.warning(
            "decimal_precision_exceeds_fixed_size",
            precision=precision,
            size=fixed_size,
            max_precision=max_precision_for_fixed(fixed_size),
        )

    logger.debug(
        "decimal_schema_validated",
        precision=precision,
        scale=scale,
        base=base_kind.value,
        size=fixed_size,
    )
    return DecimalSchemaConstraint(
        precision=precision,
        scale=scale,
        base_kind=base_kind,
        fixed_size=fixed_size,
    )


def encode(
    value: AvroDecimal,
    schema: SchemaDescriptor,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
    constraint: DecimalSchemaConstraint | None = None,
) -> bytes:
    """Encode a decimal as the bytes of its unscaled value.

    Args:
        value: Decimal whose scale matches the schema's scale
        schema: Decimal logical schema
        config: Controls precision overflow handling
        constraint: Result of validate_schema(schema), if already known

    Returns:
        Minimal two's-complement big-endian bytes for a bytes base;
        exactly size bytes, sign-extended, for a fixed(size) base

    Raises:
        SchemaConstraintError: If schema is not a valid decimal schema
        InvalidCastError: If value is not an AvroDecimal
        ScaleMismatchError: If value.scale differs from the schema scale
        PrecisionExceededError: If the value has more digits than precision
            and config.reject_on_precision_overflow is set
        SizingError: If the value needs more bytes than the fixed size
    """
    if not isinstance(value, AvroDecimal):
        raise InvalidCastError(f"'decimal' can only encode AvroDecimal values, got {type(value).__name__}")
    if constraint is None:
        constraint = validate_schema(schema)

    if value.scale != constraint.scale:
        raise ScaleMismatchError(value, constraint.scale, value.scale)

    unscaled = value.unscaled_value
    if _exceeds_precision(unscaled, constraint.precision):
        if config.reject_on_precision_overflow:
            raise PrecisionExceededError(
                f"The decimal value {value} has more than {constraint.precision} digits",
                value=value,
                limit=constraint.precision,
            )
        logger.warning("decimal_precision_exceeded", value=str(value), precision=constraint.precision)

    buffer = to_signed_bytes(unscaled, "big")
    if not constraint.is_fixed:
        return buffer

    size = constraint.fixed_size
    assert size is not None
    if len(buffer) > size:
        logger.debug("decimal_fixed_overflow", value=str(value), required=len(buffer), size=size)
        raise SizingError(
            f"The decimal value {value} needs {len(buffer)} bytes which cannot fit "
            f"into a fixed of size {size}",
            value=value,
            required=len(buffer),
            limit=size,
        )
    return sign_extend(buffer, size, unscaled < 0)


def decode(
    data: bytes | bytearray | memoryview | FixedValue,
    schema: SchemaDescriptor,
    constraint: DecimalSchemaConstraint | None = None,
) -> AvroDecimal:
    """Decode the bytes of an unscaled value into a decimal.

    The bytes are read as a two's-complement big-endian integer; fixed
    values already carry their sign extension. The input is never modified.

    Raises:
        SchemaConstraintError: If schema is not a valid decimal schema
        InvalidCastError: If data is not bytes-like or a FixedValue
        SizingError: If a fixed base gets a buffer of the wrong length
    """
    if constraint is None:
        constraint = validate_schema(schema)

    if isinstance(data, FixedValue):
        buffer = data.value
    elif isinstance(data, (bytes, bytearray, memoryview)):
        buffer = bytes(data)
    else:
        raise InvalidCastError(f"'decimal' can only decode bytes or fixed values, got {type(data).__name__}")

    if constraint.is_fixed and len(buffer) != constraint.fixed_size:
        raise SizingError(
            f"Fixed decimal requires {constraint.fixed_size} bytes, got {len(buffer)}",
            value=buffer,
            required=len(buffer),
            limit=constraint.fixed_size,
        )

    return AvroDecimal(from_signed_bytes(buffer, "big"), constraint.scale)


class DecimalLogicalType(LogicalType):
    """The 'decimal' logical type bound to a codec configuration."""

    def __init__(self, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> None:
        super().__init__(LOGICAL_TYPE_NAME)
        self._config = config

    @property
    def config(self) -> CodecConfig:
        return self._config

    def validate_schema(self, schema: SchemaDescriptor) -> DecimalSchemaConstraint:
        return validate_schema(schema)

    def convert_to_base_value(self, logical_value: Any, schema: SchemaDescriptor) -> bytes | FixedValue:
        """Encode logical_value, wrapping the bytes in a FixedValue for fixed schemas."""
        constraint = validate_schema(schema)
        buffer = encode(logical_value, schema, self._config, constraint)
        if constraint.is_fixed:
            return FixedValue(schema.base_schema, buffer)  # type: ignore[arg-type]
        return buffer

    def convert_to_logical_value(self, base_value: Any, schema: SchemaDescriptor) -> AvroDecimal:
        return decode(base_value, schema)

    def get_native_type_name(self, nullable: bool) -> str:
        type_name = f"{AvroDecimal.__module__}.{AvroDecimal.__qualname__}"
        return f"typing.Optional[{type_name}]" if nullable else type_name

    def is_instance_of_logical_type(self, logical_value: Any) -> bool:
        return isinstance(logical_value, AvroDecimal)


# Shared instance with the default configuration
DECIMAL = DecimalLogicalType()
