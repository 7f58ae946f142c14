"""Flush-state validation of record instances."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, TypeVar
from strict_records.errors import FlushError
from strict_records.generated import generated_fields
from strict_records.schema.model import EntitySchema

T = TypeVar("T")


class _Unset:
    """Marker for a value the storage backend has not assigned yet."""

    _instance: Optional["_Unset"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Unset, ())


UNSET: Any = _Unset()


def get_value(record: Any, name: str) -> Any:
    """Value of an attribute, or UNSET when the record does not have it."""
    if isinstance(record, Mapping):
        return record.get(name, UNSET)
    return getattr(record, name, UNSET)


def is_absent(value: Any) -> bool:
    return value is UNSET


def undefined_fields(record: Any, schema: EntitySchema) -> List[str]:
    """
    Generated fields of a record that have no value yet.

    Only UNSET (or a missing key/attribute) counts as absent; None and empty
    values are populated.
    """
    return [name for name in generated_fields(schema) if is_absent(get_value(record, name))]


def is_flushed(record: Any, schema: EntitySchema) -> bool:
    """True when every backend-generated field of the record has a value."""
    return not undefined_fields(record, schema)


def assert_flushed(record: T, schema: EntitySchema, context: Any = None) -> T:
    """
    Check that a record is flushed and return it unchanged.

    Args:
        record: Mapping or object holding the record's values
        schema: Schema of the record type
        context: Optional message (used verbatim) or any object to attach
            to the error

    Returns:
        The record itself

    Raises:
        FlushError: If any backend-generated field is still unset
    """
    missing = undefined_fields(record, schema)
    if missing:
        raise FlushError(schema.name, missing, context)
    return record


@dataclass(frozen=True)
class Unflushed(Generic[T]):
    """
    A record that may still lack backend-generated values.

    Use ``require_flushed`` to get the underlying record once the backend
    has populated it.
    """

    record: T
    schema: EntitySchema

    def is_flushed(self) -> bool:
        return is_flushed(self.record, self.schema)

    def undefined_fields(self) -> List[str]:
        return undefined_fields(self.record, self.schema)

    def require_flushed(self, context: Any = None) -> T:
        return assert_flushed(self.record, self.schema, context)
