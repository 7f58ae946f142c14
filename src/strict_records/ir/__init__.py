"""Declarative schema documents and their validators."""

from .document import AttributeSpec, EntitySpec, RelationRef, SchemaDocument
from .validators import SchemaIssue, validate_document, validate_entity

__all__ = [
    "AttributeSpec",
    "EntitySpec",
    "RelationRef",
    "SchemaDocument",
    "SchemaIssue",
    "validate_document",
    "validate_entity",
]
