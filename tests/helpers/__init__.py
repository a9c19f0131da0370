"""Test helpers module for shared test utilities.

This module consolidates common test utilities to reduce duplication:
- constants: Known encodings and boundary values
- factories: Schema factory functions
"""

from tests.helpers.constants import KNOWN_ENCODINGS, MAX_38_DIGITS, MAX_96_BIT
from tests.helpers.factories import make_schema, make_schema_dict

__all__ = [
    # Constants
    "KNOWN_ENCODINGS",
    "MAX_38_DIGITS",
    "MAX_96_BIT",
    # Factories
    "make_schema",
    "make_schema_dict",
]
