"""Codec configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

# 96-bit magnitude plus sign, the range of common platform decimal types
NATIVE_DECIMAL_MAX = 2**96 - 1

ENV_PREFIX = "AVRO_DECIMAL_"

_TRUE_VALUES = ("true", "1", "yes")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None:
        return default
    return raw.lower() in _TRUE_VALUES


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(ENV_PREFIX + name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as err:
        raise ValueError(f"{ENV_PREFIX + name} must be an integer, got '{raw}'") from err


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for decimal conversion and encoding.

    Attributes:
        reject_on_precision_overflow: If True, encoding a value with more
            digits than the schema precision raises PrecisionExceededError.
            If False, the value is encoded unchanged and a warning is logged.
        exact_float_conversion: If True, floats are converted using their
            exact binary expansion (0.1 -> 55 significant digits). If False,
            the shortest repr that round-trips the float is used (0.1 -> 0.1).
        native_decimal_max: Largest integral magnitude accepted when
            converting to NativeKind.DECIMAL (default: 2^96 - 1).
    """

    reject_on_precision_overflow: bool = False
    exact_float_conversion: bool = False
    native_decimal_max: int = NATIVE_DECIMAL_MAX

    def __post_init__(self) -> None:
        if self.native_decimal_max <= 0:
            raise ValueError(f"native_decimal_max must be positive, got {self.native_decimal_max}")

    @classmethod
    def from_env(cls) -> CodecConfig:
        """Build a configuration from AVRO_DECIMAL_* environment variables.

        Unset variables keep their defaults:
            AVRO_DECIMAL_REJECT_ON_PRECISION_OVERFLOW: true/1/yes
            AVRO_DECIMAL_EXACT_FLOAT_CONVERSION: true/1/yes
            AVRO_DECIMAL_NATIVE_DECIMAL_MAX: integer
        """
        return cls(
            reject_on_precision_overflow=_env_flag("REJECT_ON_PRECISION_OVERFLOW", False),
            exact_float_conversion=_env_flag("EXACT_FLOAT_CONVERSION", False),
            native_decimal_max=_env_int("NATIVE_DECIMAL_MAX", NATIVE_DECIMAL_MAX),
        )


# Default configuration instance
DEFAULT_CODEC_CONFIG = CodecConfig()
