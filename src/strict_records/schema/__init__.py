"""Runtime schema model and registry."""

from .model import AttributeDescriptor, EntitySchema, RelationDescriptor, RelationKind
from .registry import SchemaRegistry

__all__ = [
    "AttributeDescriptor",
    "EntitySchema",
    "RelationDescriptor",
    "RelationKind",
    "SchemaRegistry",
]
