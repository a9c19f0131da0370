"""Integer utilities for the decimal codec.

This package provides the byte-level primitives the codec is built on:
- two's-complement encode/decode with explicit byte order
- sign extension into fixed-width slots
- truncating division
"""

from avro_decimal.math.twos_complement import (
    div_trunc,
    from_signed_bytes,
    pow10,
    sign_extend,
    signed_byte_length,
    to_signed_bytes,
)

__all__ = [
    "div_trunc",
    "from_signed_bytes",
    "pow10",
    "sign_extend",
    "signed_byte_length",
    "to_signed_bytes",
]
