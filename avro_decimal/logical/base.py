"""Base class for logical type implementations."""

from abc import ABC, abstractmethod
from typing import Any

from avro_decimal.schema import SchemaDescriptor


class LogicalType(ABC):
    """Abstract base class for logical types.

    A logical type gives a semantic meaning to a base Avro type and converts
    values between the two. Implementations are stateless, so a single
    instance can be shared across schemas and threads.
    """

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        """The logicalType name used in schemas (e.g. "decimal")."""
        return self._name

    @abstractmethod
    def validate_schema(self, schema: SchemaDescriptor) -> Any:
        """Check that schema is a valid schema for this logical type.

        Raises:
            SchemaConstraintError: If the schema is not valid
        """
        ...

    @abstractmethod
    def convert_to_base_value(self, logical_value: Any, schema: SchemaDescriptor) -> Any:
        """Convert a logical value to an instance of the schema's base type."""
        ...

    @abstractmethod
    def convert_to_logical_value(self, base_value: Any, schema: SchemaDescriptor) -> Any:
        """Convert an instance of the schema's base type to a logical value."""
        ...

    @abstractmethod
    def get_native_type_name(self, nullable: bool) -> str:
        """Dotted name of the Python type values of this logical type use."""
        ...

    @abstractmethod
    def is_instance_of_logical_type(self, logical_value: Any) -> bool:
        """True if logical_value is a value of this logical type."""
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"
