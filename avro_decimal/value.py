"""Arbitrary-precision fixed-point decimal value.

AvroDecimal holds an unscaled integer and a non-negative scale and denotes
unscaled * 10^-scale. The scale is part of the value's identity:

    AvroDecimal(10, 1) != AvroDecimal(100, 2)    # both denote 1.0

Ordering compares numeric values exactly, so the two values above compare
as neither less nor greater than each other.

Usage:
    from avro_decimal import AvroDecimal

    price = AvroDecimal.from_decimal(Decimal("19.99"))   # AvroDecimal(1999, 2)
    price.to_float()                                   # 19.99
    str(AvroDecimal(-5, 3))                            # "-0.005"
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import ClassVar

from avro_decimal.config import DEFAULT_CODEC_CONFIG, CodecConfig
from avro_decimal.errors import InvalidCastError, SizingError
from avro_decimal.math import div_trunc, from_signed_bytes, pow10, to_signed_bytes
from avro_decimal.native import NativeKind, NativeTarget, convert_unscaled, resolve_kind, unscaled_to_decimal

__all__ = [
    "AvroDecimal",
    "ZERO",
    "ONE",
    "MINUS_ONE",
    "SCALE_FIELD_SIZE",
    "MAX_SCALE",
]

# Width of the little-endian Int32 scale field in to_byte_array()
SCALE_FIELD_SIZE = 4
MAX_SCALE = 2**31 - 1


class AvroDecimal:
    """Immutable decimal number stored as an unscaled int and a scale.

    Attributes:
        unscaled_value: The exact integer significand (read-only)
        scale: Number of implied fractional digits (read-only)
    """

    MAX_SCALE: ClassVar[int] = MAX_SCALE

    __slots__ = ("_unscaled_value", "_scale")
    _unscaled_value: int
    _scale: int

    def __init__(self, unscaled_value: int, scale: int = 0) -> None:
        """Create a decimal from an unscaled value and a scale.

        Both are stored verbatim; trailing zeros are not normalized.

        Raises:
            TypeError: If unscaled_value or scale is not an int
            ValueError: If scale is outside [0, 2^31 - 1]
        """
        if not isinstance(unscaled_value, int) or isinstance(unscaled_value, bool):
            raise TypeError(f"AvroDecimal requires an int unscaled value, got {type(unscaled_value).__name__}")
        if not isinstance(scale, int) or isinstance(scale, bool):
            raise TypeError(f"AvroDecimal requires an int scale, got {type(scale).__name__}")
        if not 0 <= scale <= MAX_SCALE:
            raise ValueError(f"AvroDecimal scale must be in [0, {MAX_SCALE}], got {scale}")
        self._unscaled_value = unscaled_value
        self._scale = scale

    # --- Construction from native values ---

    @classmethod
    def from_int(cls, value: int) -> AvroDecimal:
        """Create from an integer with scale 0."""
        return cls(value, 0)

    @classmethod
    def from_decimal(cls, value: Decimal) -> AvroDecimal:
        """Create from a Decimal, keeping its own digits and exponent.

        Decimal("1.50") becomes AvroDecimal(150, 2). A positive exponent is
        folded into the unscaled value: Decimal("1E+3") becomes
        AvroDecimal(1000, 0).

        Raises:
            InvalidCastError: If value is NaN or infinite
        """
        if not value.is_finite():
            raise InvalidCastError(f"Cannot convert non-finite Decimal {value} to AvroDecimal")
        sign, digits, exponent = value.as_tuple()
        assert isinstance(exponent, int)
        unscaled = int("".join(map(str, digits))) if digits else 0
        if exponent > 0:
            unscaled *= pow10(exponent)
            exponent = 0
        return cls(-unscaled if sign else unscaled, -exponent)

    @classmethod
    def from_float(
        cls,
        value: float,
        exact: bool | None = None,
        config: CodecConfig = DEFAULT_CODEC_CONFIG,
    ) -> AvroDecimal:
        """Create from a float.

        By default the float's shortest round-tripping repr is used, so
        0.1 becomes AvroDecimal(1, 1). With exact=True the exact binary
        expansion is used instead (0.1 has 55 significant digits).

        Args:
            value: Finite float
            exact: Override config.exact_float_conversion

        Raises:
            InvalidCastError: If value is NaN or infinite
        """
        if not math.isfinite(value):
            raise InvalidCastError(f"Cannot convert non-finite float {value} to AvroDecimal")
        if exact is None:
            exact = config.exact_float_conversion
        return cls.from_decimal(Decimal(value) if exact else Decimal(repr(value)))

    @classmethod
    def from_native(cls, value: object, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> AvroDecimal:
        """Create from an int, float, Decimal, or AvroDecimal.

        Raises:
            InvalidCastError: For any other type (including bool)
        """
        if isinstance(value, AvroDecimal):
            return value
        if isinstance(value, bool):
            raise InvalidCastError("Cannot convert bool to AvroDecimal")
        if isinstance(value, int):
            return cls.from_int(value)
        if isinstance(value, float):
            return cls.from_float(value, config=config)
        if isinstance(value, Decimal):
            return cls.from_decimal(value)
        raise InvalidCastError(f"Cannot convert {type(value).__name__} to AvroDecimal")

    @classmethod
    def from_byte_array(cls, data: bytes | bytearray | memoryview) -> AvroDecimal:
        """Inverse of to_byte_array().

        Raises:
            SizingError: If data is shorter than one unscaled byte plus the
                scale field
        """
        data = bytes(data)
        if len(data) < SCALE_FIELD_SIZE + 1:
            raise SizingError(
                f"AvroDecimal byte array needs at least {SCALE_FIELD_SIZE + 1} bytes, got {len(data)}",
                value=data,
                required=SCALE_FIELD_SIZE + 1,
                limit=len(data),
            )
        number, flags = data[:-SCALE_FIELD_SIZE], data[-SCALE_FIELD_SIZE:]
        return cls(from_signed_bytes(number, "little"), from_signed_bytes(flags, "little"))

    # --- Properties ---

    @property
    def unscaled_value(self) -> int:
        """The unscaled integer value."""
        return self._unscaled_value

    @property
    def scale(self) -> int:
        """Number of implied fractional digits."""
        return self._scale

    @property
    def sign(self) -> int:
        """-1, 0, or 1."""
        return (self._unscaled_value > 0) - (self._unscaled_value < 0)

    @property
    def is_zero(self) -> bool:
        return self._unscaled_value == 0

    @property
    def is_one(self) -> bool:
        """True if the unscaled value is 1 (regardless of scale)."""
        return self._unscaled_value == 1

    @property
    def is_even(self) -> bool:
        """True if the unscaled value is even."""
        return self._unscaled_value % 2 == 0

    @property
    def is_power_of_two(self) -> bool:
        """True if the unscaled value is a positive power of two."""
        u = self._unscaled_value
        return u > 0 and (u & (u - 1)) == 0

    # --- Comparison ---

    def compare(self, other: AvroDecimal | int | Decimal) -> int:
        """Compare numeric values exactly, returning -1, 0, or 1.

        When scales differ the lower-scale operand is multiplied up to the
        higher scale before comparing, so no digits are dropped:
        AvroDecimal(105, 2) (1.05) compares greater than AvroDecimal(1049, 3).

        Raises:
            TypeError: If other is not a decimal, int, or Decimal
        """
        rhs = _coerce(other)
        if rhs is None:
            raise TypeError(f"Cannot compare AvroDecimal with {type(other).__name__}")
        a, b = self._unscaled_value, rhs._unscaled_value
        if self._scale < rhs._scale:
            a *= pow10(rhs._scale - self._scale)
        elif self._scale > rhs._scale:
            b *= pow10(self._scale - rhs._scale)
        return (a > b) - (a < b)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AvroDecimal):
            return NotImplemented
        return self._scale == other._scale and self._unscaled_value == other._unscaled_value

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> int:
        return hash((self._unscaled_value, self._scale))

    def __lt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) < 0

    def __le__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) <= 0

    def __gt__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) > 0

    def __ge__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.compare(rhs) >= 0

    # --- String and byte forms ---

    def __repr__(self) -> str:
        return f"AvroDecimal({self._unscaled_value}, {self._scale})"

    def __str__(self) -> str:
        if self._scale == 0:
            return str(self._unscaled_value)
        sign = "-" if self._unscaled_value < 0 else ""
        digits = str(abs(self._unscaled_value)).rjust(self._scale + 1, "0")
        return f"{sign}{digits[: -self._scale]}.{digits[-self._scale :]}"

    def to_byte_array(self) -> bytes:
        """Serialize as unscaled bytes followed by the scale.

        Layout: minimal two's-complement little-endian unscaled value, then
        a 4-byte little-endian signed scale.
        """
        return to_signed_bytes(self._unscaled_value, "little") + self._scale.to_bytes(
            SCALE_FIELD_SIZE, byteorder="little", signed=True
        )

    # --- Native conversion ---

    def to_integral(self) -> int:
        """Integral part, truncated toward zero. Never overflows."""
        return div_trunc(self._unscaled_value, pow10(self._scale))

    def to_type(self, target: NativeTarget, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> int | float | Decimal:
        """Convert to a native numeric kind.

        Args:
            target: NativeKind, kind name ("uint16"), or int/float/Decimal

        Raises:
            InvalidCastError: If target is not a supported numeric kind
            SizingError: If the integral part does not fit the target
        """
        return convert_unscaled(self._unscaled_value, self._scale, target, config)

    def to_int(self, kind: NativeKind | str = NativeKind.INT64) -> int:
        """Convert to a fixed-width integer kind, truncating toward zero.

        Raises:
            InvalidCastError: If kind is not an integer kind
            SizingError: If the integral part does not fit kind
        """
        kind = resolve_kind(kind)
        if not kind.is_integer:
            raise InvalidCastError(f"to_int requires an integer kind, got {kind.value}")
        result = self.to_type(kind)
        assert isinstance(result, int)
        return result

    def to_float(self, kind: NativeKind | str = NativeKind.FLOAT64) -> float:
        """Convert to float (FLOAT64 or FLOAT32 precision).

        Raises:
            InvalidCastError: If kind is not a float kind
            SizingError: If the value exceeds the float range
        """
        kind = resolve_kind(kind)
        if not kind.is_float:
            raise InvalidCastError(f"to_float requires a float kind, got {kind.value}")
        result = self.to_type(kind)
        assert isinstance(result, float)
        return result

    def to_decimal(self, config: CodecConfig = DEFAULT_CODEC_CONFIG) -> Decimal:
        """Convert to an exact Decimal.

        Raises:
            SizingError: If the integral part exceeds config.native_decimal_max
        """
        result = self.to_type(NativeKind.DECIMAL, config)
        assert isinstance(result, Decimal)
        return result

    def to_unbounded_decimal(self) -> Decimal:
        """Exact Decimal with no range check."""
        return unscaled_to_decimal(self._unscaled_value, self._scale)

    def __int__(self) -> int:
        return self.to_integral()

    def __float__(self) -> float:
        return self.to_float()

    def __bool__(self) -> bool:
        """True if non-zero."""
        return self._unscaled_value != 0


def _coerce(value: object) -> AvroDecimal | None:
    """Return value as an AvroDecimal for ordering, or None if unsupported."""
    if isinstance(value, AvroDecimal):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, Decimal)):
        return AvroDecimal.from_native(value)
    return None


ZERO = AvroDecimal(0, 0)
ONE = AvroDecimal(1, 0)
MINUS_ONE = AvroDecimal(-1, 0)
