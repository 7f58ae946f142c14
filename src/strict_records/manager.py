"""Forwarding wrapper around a persistence manager."""

from dataclasses import dataclass
from typing import Any, Dict, Generic, List, TypeVar
from strict_records.config.logging import get_logger
from strict_records.flush import Unflushed, get_value, is_absent
from strict_records.schema.model import EntitySchema
from strict_records.schema.registry import SchemaRegistry

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class PartialRecord(Generic[T]):
    """
    A reference-only record: its primary key is known, other attributes may
    not be loaded.
    """

    record: T
    schema: EntitySchema

    def primary_key(self) -> Dict[str, Any]:
        return {
            attr.name: get_value(self.record, attr.name)
            for attr in self.schema.attributes
            if attr.primary_key
        }

    def loaded_fields(self) -> List[str]:
        return [
            name
            for name in self.schema.attribute_names
            if not is_absent(get_value(self.record, name))
        ]

    def is_loaded(self, name: str) -> bool:
        return not is_absent(get_value(self.record, name))


class StrictManager:
    """
    Wraps a persistence manager and tags what it returns.

    The wrapped manager needs ``create``, ``assign`` and ``get_reference``
    methods. Arguments are passed through unchanged and results are only
    wrapped, never altered; errors from the manager propagate as they are.
    """

    def __init__(self, manager: Any, registry: SchemaRegistry):
        self.manager = manager
        self.registry = registry

    def create_strict(self, entity: Any, data: Any, *args: Any, **kwargs: Any) -> Unflushed:
        """Create a record; backend-generated fields may not be set yet."""
        schema = self.registry.resolve(entity)
        record = self.manager.create(entity, data, *args, **kwargs)
        logger.debug(f"create_strict: created unflushed '{schema.name}' record")
        return Unflushed(record=record, schema=schema)

    def assign_strict(self, record: Any, data: Any, *args: Any, **kwargs: Any) -> Unflushed:
        """Assign values onto a record; the result is treated as unflushed."""
        schema = self.registry.schema_for(record)
        result = self.manager.assign(record, data, *args, **kwargs)
        logger.debug(f"assign_strict: assigned onto '{schema.name}' record")
        return Unflushed(record=result, schema=schema)

    def get_reference_strict(
        self, entity: Any, identifier: Any, *args: Any, **kwargs: Any
    ) -> PartialRecord:
        """Get a reference to a record without loading it."""
        schema = self.registry.resolve(entity)
        record = self.manager.get_reference(entity, identifier, *args, **kwargs)
        logger.debug(f"get_reference_strict: reference to '{schema.name}'")
        return PartialRecord(record=record, schema=schema)
