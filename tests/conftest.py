"""Pytest configuration and fixtures."""

import pytest

from avro_decimal.schema import LogicalSchema
from tests.helpers import make_schema


@pytest.fixture
def bytes_schema() -> LogicalSchema:
    """Decimal(9, 2) on a bytes base."""
    return make_schema(precision=9, scale=2)


@pytest.fixture
def fixed_schema() -> LogicalSchema:
    """Decimal(9, 0) on a fixed(5) base."""
    return make_schema(precision=9, scale=0, size=5)
