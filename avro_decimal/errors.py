"""Decimal error classes.

Every error raised by this package derives from AvroDecimalError and from the
builtin exception that best describes it, so callers can catch either.
"""

from __future__ import annotations

from typing import Any


class AvroDecimalError(Exception):
    """Base error for decimal value and codec operations."""

    pass


class SchemaConstraintError(AvroDecimalError, ValueError):
    """Schema is not a valid 'decimal' logical schema.

    Raised for a wrong base type, a missing or non-positive precision,
    or a scale outside [0, precision].
    """

    pass


class ScaleMismatchError(AvroDecimalError, ValueError):
    """Value scale does not match the scale declared by the schema.

    Attributes:
        value: The offending decimal value
        expected_scale: Scale declared by the schema
        actual_scale: Scale carried by the value
    """

    def __init__(self, value: Any, expected_scale: int, actual_scale: int) -> None:
        self.value = value
        self.expected_scale = expected_scale
        self.actual_scale = actual_scale
        super().__init__(
            f"The decimal value {value} has a scale of {actual_scale} which cannot be "
            f"encoded against a logical 'decimal' with a scale of {expected_scale}"
        )


class SizingError(AvroDecimalError, OverflowError):
    """Value does not fit the container it is being written to or read from.

    Attributes:
        value: The offending value (decimal, integer, or buffer)
        required: Size or magnitude the value needs, if known
        limit: Size or magnitude the container allows, if known
    """

    def __init__(
        self,
        message: str,
        *,
        value: Any = None,
        required: int | None = None,
        limit: int | None = None,
    ) -> None:
        self.value = value
        self.required = required
        self.limit = limit
        super().__init__(message)


class PrecisionExceededError(SizingError):
    """Unscaled value has more digits than the schema's precision allows."""

    pass


class InvalidCastError(AvroDecimalError, TypeError):
    """Conversion to or from an unsupported representation."""

    pass
