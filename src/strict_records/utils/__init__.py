"""Utility functions for common operations."""

from .schema_io import load_registry_from_json, load_schema_document, save_schema_document

__all__ = [
    "load_registry_from_json",
    "load_schema_document",
    "save_schema_document",
]
