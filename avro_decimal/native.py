"""Conversion from (unscaled, scale) pairs to native numeric types.

Each target kind has an inclusive range for the integral part of the value.
Conversion splits the value into a truncated quotient and a remainder,
checks the quotient against the range, and rebuilds the value in the target
representation:

    quotient = trunc(unscaled / 10^scale)
    remainder = unscaled - quotient * 10^scale
    value = quotient + remainder / 10^scale

Integer kinds keep the quotient (truncation toward zero).
"""

from __future__ import annotations

import struct
import sys
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from avro_decimal.config import DEFAULT_CODEC_CONFIG, CodecConfig
from avro_decimal.errors import InvalidCastError, SizingError
from avro_decimal.math import div_trunc, pow10

__all__ = [
    "NativeKind",
    "NativeRange",
    "NativeTarget",
    "native_range",
    "resolve_kind",
    "unscaled_to_decimal",
    "convert_unscaled",
]

# Largest finite IEEE-754 values as exact integers
FLOAT32_MAX = (2**24 - 1) * 2**104
FLOAT64_MAX = int(sys.float_info.max)


class NativeKind(str, Enum):
    """Native numeric representations a decimal can be converted to."""

    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    UINT8 = "uint8"
    UINT16 = "uint16"
    UINT32 = "uint32"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    DECIMAL = "decimal"

    @property
    def is_integer(self) -> bool:
        return self not in (NativeKind.FLOAT32, NativeKind.FLOAT64, NativeKind.DECIMAL)

    @property
    def is_float(self) -> bool:
        return self in (NativeKind.FLOAT32, NativeKind.FLOAT64)


@dataclass(frozen=True)
class NativeRange:
    """Inclusive range of integral values a native kind can hold."""

    min_value: int
    max_value: int

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


_FIXED_RANGES: dict[NativeKind, NativeRange] = {
    NativeKind.INT8: NativeRange(-(2**7), 2**7 - 1),
    NativeKind.INT16: NativeRange(-(2**15), 2**15 - 1),
    NativeKind.INT32: NativeRange(-(2**31), 2**31 - 1),
    NativeKind.INT64: NativeRange(-(2**63), 2**63 - 1),
    NativeKind.UINT8: NativeRange(0, 2**8 - 1),
    NativeKind.UINT16: NativeRange(0, 2**16 - 1),
    NativeKind.UINT32: NativeRange(0, 2**32 - 1),
    NativeKind.UINT64: NativeRange(0, 2**64 - 1),
    NativeKind.FLOAT32: NativeRange(-FLOAT32_MAX, FLOAT32_MAX),
    NativeKind.FLOAT64: NativeRange(-FLOAT64_MAX, FLOAT64_MAX),
}

# Python types accepted as conversion targets
_TYPE_KINDS: dict[type, NativeKind] = {
    int: NativeKind.INT64,
    float: NativeKind.FLOAT64,
    Decimal: NativeKind.DECIMAL,
}

NativeTarget = NativeKind | str | type


def native_range(kind: NativeKind, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> NativeRange:
    """Return the integral range of a native kind.

    DECIMAL has no fixed width in Python; its range comes from
    config.native_decimal_max.
    """
    if kind is NativeKind.DECIMAL:
        return NativeRange(-config.native_decimal_max, config.native_decimal_max)
    return _FIXED_RANGES[kind]


def resolve_kind(target: Any) -> NativeKind:
    """Resolve a conversion target to a NativeKind.

    Accepts a NativeKind, its string value ("int32"), or one of the Python
    types int, float and Decimal.

    Raises:
        InvalidCastError: If the target is not a supported numeric kind
    """
    if isinstance(target, NativeKind):
        return target
    if isinstance(target, str):
        try:
            return NativeKind(target.lower())
        except ValueError as err:
            raise InvalidCastError(f"Cannot cast AvroDecimal to '{target}'") from err
    # bool is an int subclass but not a numeric target
    if isinstance(target, type) and target is not bool and target in _TYPE_KINDS:
        return _TYPE_KINDS[target]
    name = getattr(target, "__name__", repr(target))
    raise InvalidCastError(f"Cannot cast AvroDecimal to {name}")


def unscaled_to_decimal(unscaled: int, scale: int) -> Decimal:
    """Build the exact Decimal for unscaled * 10^-scale.

    The Decimal is assembled from its digit tuple, so the active decimal
    context precision never rounds it.
    """
    sign, digits, _ = Decimal(unscaled).as_tuple()
    return Decimal((sign, digits, -scale))


def _to_float32(value: float) -> float:
    return struct.unpack(">f", struct.pack(">f", value))[0]


def convert_unscaled(
    unscaled: int,
    scale: int,
    target: NativeTarget,
    config: CodecConfig = DEFAULT_CODEC_CONFIG,
) -> int | float | Decimal:
    """Convert unscaled * 10^-scale to a native numeric value.

    Args:
        unscaled: Unscaled integer value
        scale: Number of implied fractional digits
        target: NativeKind, kind name, or Python type (int, float, Decimal)
        config: Supplies the DECIMAL range

    Returns:
        int for integer kinds (truncated toward zero), float for float
        kinds, Decimal for DECIMAL

    Raises:
        InvalidCastError: If target is not a supported numeric kind
        SizingError: If the integral part does not fit the target kind
    """
    kind = resolve_kind(target)
    quotient = div_trunc(unscaled, pow10(scale))

    bounds = native_range(kind, config)
    if not bounds.contains(quotient):
        raise SizingError(
            f"The value {unscaled_to_decimal(unscaled, scale)} cannot fit into {kind.value} "
            f"(range [{bounds.min_value}, {bounds.max_value}])",
            value=unscaled,
            required=quotient,
            limit=bounds.max_value if quotient > 0 else bounds.min_value,
        )

    if kind.is_integer:
        return quotient

    # quotient + remainder / 10^scale, without intermediate rounding
    exact = unscaled_to_decimal(unscaled, scale)
    if kind is NativeKind.DECIMAL:
        return exact
    if kind is NativeKind.FLOAT32:
        return _to_float32(float(exact))
    return float(exact)
