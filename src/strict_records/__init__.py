"""strict_records: flush-state tracking and field-path validation for record schemas."""

__version__ = "0.1.0"

from .errors import FlushError, InvalidFieldPathError, SchemaError, StrictRecordsError
from .flush import UNSET, Unflushed, assert_flushed, is_flushed, undefined_fields
from .generated import generated_fields
from .manager import PartialRecord, StrictManager
from .paths import DEFAULT_MAX_DEPTH, field_paths, fields, is_valid_path
from .schema import (
    AttributeDescriptor,
    EntitySchema,
    RelationDescriptor,
    RelationKind,
    SchemaRegistry,
)

__all__ = [
    "AttributeDescriptor",
    "DEFAULT_MAX_DEPTH",
    "EntitySchema",
    "FlushError",
    "InvalidFieldPathError",
    "PartialRecord",
    "RelationDescriptor",
    "RelationKind",
    "SchemaError",
    "SchemaRegistry",
    "StrictManager",
    "StrictRecordsError",
    "UNSET",
    "Unflushed",
    "assert_flushed",
    "field_paths",
    "fields",
    "generated_fields",
    "is_flushed",
    "is_valid_path",
    "undefined_fields",
]
