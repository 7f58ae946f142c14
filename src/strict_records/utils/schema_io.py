"""Utilities for loading and saving schema documents from/to JSON files."""

from pathlib import Path
from pydantic import TypeAdapter, ValidationError
from strict_records.ir.document import SchemaDocument
from strict_records.schema.registry import SchemaRegistry


def load_schema_document(schema_path: Path) -> SchemaDocument:
    """
    Load a SchemaDocument from a JSON file.

    Args:
        schema_path: Path to the JSON file

    Returns:
        Loaded SchemaDocument instance

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty or not a valid schema document
    """
    schema_path = Path(schema_path)
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema file not found: {schema_path}")

    file_content = schema_path.read_text(encoding="utf-8").strip()
    if not file_content:
        raise ValueError(f"Schema file is empty: {schema_path}")

    try:
        return TypeAdapter(SchemaDocument).validate_json(file_content)
    except ValidationError as e:
        raise ValueError(f"Failed to load schema from {schema_path}: {e}") from e


def save_schema_document(doc: SchemaDocument, schema_path: Path) -> None:
    """
    Save a SchemaDocument to a JSON file.

    Note:
        Creates parent directories if they don't exist.
    """
    schema_path = Path(schema_path)
    schema_path.parent.mkdir(parents=True, exist_ok=True)
    schema_path.write_text(doc.model_dump_json(indent=2), encoding="utf-8")


def load_registry_from_json(schema_path: Path) -> SchemaRegistry:
    """Load a schema document and register all of its entities."""
    registry = SchemaRegistry()
    registry.register_document(load_schema_document(schema_path))
    return registry
