"""Two's-complement integer helpers.

Python ints are arbitrary precision, so these helpers only deal with the
byte layout: minimal signed width, endianness, and sign extension. All byte
orders are explicit; nothing depends on the platform's native endianness.
"""

from __future__ import annotations

from typing import Literal

__all__ = [
    "ByteOrder",
    "signed_byte_length",
    "to_signed_bytes",
    "from_signed_bytes",
    "sign_extend",
    "div_trunc",
    "pow10",
]

ByteOrder = Literal["big", "little"]


def signed_byte_length(value: int) -> int:
    """Minimum number of bytes holding value in two's complement.

    The sign bit must fit too, so 127 needs 1 byte but 128 needs 2, and
    -128 needs 1 byte but -129 needs 2. Zero takes one byte.

    Examples:
        signed_byte_length(0) = 1
        signed_byte_length(255) = 2
        signed_byte_length(-1) = 1
    """
    magnitude = value if value >= 0 else ~value
    return magnitude.bit_length() // 8 + 1


def to_signed_bytes(value: int, byteorder: ByteOrder = "big") -> bytes:
    """Encode value as a minimal two's-complement byte sequence."""
    return value.to_bytes(signed_byte_length(value), byteorder=byteorder, signed=True)


def from_signed_bytes(data: bytes | bytearray | memoryview, byteorder: ByteOrder = "big") -> int:
    """Decode a two's-complement byte sequence. Empty input decodes to 0."""
    return int.from_bytes(data, byteorder=byteorder, signed=True)


def sign_extend(data: bytes, size: int, negative: bool) -> bytes:
    """Left-pad a big-endian two's-complement sequence to size bytes.

    Padding goes toward the most significant end using 0xFF for negative
    values and 0x00 otherwise.

    Raises:
        ValueError: If data is already longer than size
    """
    offset = size - len(data)
    if offset < 0:
        raise ValueError(f"Cannot sign-extend {len(data)} bytes into {size} bytes")
    fill = b"\xff" if negative else b"\x00"
    return fill * offset + data


def div_trunc(a: int, b: int) -> int:
    """Integer division with truncation toward zero.

    Python's // operator rounds toward negative infinity; decimal quotients
    truncate toward zero. This matters for negative numbers.

    Raises:
        ZeroDivisionError: If b is zero

    Examples:
        -7 // 3 = -3 (rounds toward -inf)
        div_trunc(-7, 3) = -2 (truncates toward zero)
    """
    if b == 0:
        raise ZeroDivisionError("Division by zero in div_trunc")

    # Same sign: result is non-negative, // gives correct truncation
    if (a >= 0) == (b >= 0):
        return a // b
    return -(abs(a) // abs(b))


def pow10(exponent: int) -> int:
    """10**exponent for a non-negative exponent."""
    if exponent < 0:
        raise ValueError(f"pow10 requires a non-negative exponent, got {exponent}")
    return 10**exponent
