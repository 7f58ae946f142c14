"""Typer CLI application."""

from pathlib import Path
from typing import List, Optional

import typer

from strict_records.config.logging import setup_logging
from strict_records.errors import InvalidFieldPathError, SchemaError
from strict_records.generated import generated_fields
from strict_records.ir.validators import validate_document
from strict_records.paths import field_paths, fields
from strict_records.schema.model import EntitySchema
from strict_records.schema.registry import SchemaRegistry
from strict_records.utils.schema_io import load_schema_document

app = typer.Typer(help="strict-records: flush-state and field-path checks for record schemas")


def _fail(message: str) -> None:
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(1)


def _load_entity(schema_file: Path, entity: str) -> EntitySchema:
    try:
        doc = load_schema_document(schema_file)
        if doc.entity(entity) is None:
            known = ", ".join(spec.name for spec in doc.entities) or "none"
            _fail(f"unknown entity '{entity}' (known: {known})")
        registry = SchemaRegistry()
        registry.register_document(doc)
        return registry.get(entity)
    except (FileNotFoundError, ValueError, SchemaError) as e:
        _fail(str(e))


@app.command()
def check(schema_file: Path):
    """
    Validate a schema document.

    Args:
        schema_file: Path to the schema JSON file
    """
    setup_logging()
    try:
        doc = load_schema_document(schema_file)
    except (FileNotFoundError, ValueError) as e:
        _fail(str(e))

    issues = validate_document(doc)
    if issues:
        for issue in issues:
            typer.echo(f"[{issue.code}] {issue.location}: {issue.message}")
        raise typer.Exit(1)

    typer.echo(f"✓ {len(doc.entities)} entities OK")


@app.command()
def generated(schema_file: Path, entity: str):
    """
    List the backend-generated fields of an entity.

    Args:
        schema_file: Path to the schema JSON file
        entity: Entity name
    """
    setup_logging()
    schema = _load_entity(schema_file, entity)
    for name in generated_fields(schema):
        typer.echo(name)


@app.command()
def paths(
    schema_file: Path,
    entity: str,
    depth: Optional[int] = typer.Option(None, "--depth", "-d", help="Maximum relation hops"),
):
    """
    List every valid field path of an entity.

    Args:
        schema_file: Path to the schema JSON file
        entity: Entity name
    """
    setup_logging()
    schema = _load_entity(schema_file, entity)
    try:
        generated_paths = field_paths(schema, depth)
    except ValueError as e:
        _fail(str(e))
    for path in sorted(generated_paths):
        typer.echo(path)


@app.command("validate-paths")
def validate_paths(
    schema_file: Path,
    entity: str,
    selectors: List[str],
    depth: Optional[int] = typer.Option(None, "--depth", "-d", help="Maximum relation hops"),
):
    """
    Check field paths against an entity.

    Args:
        schema_file: Path to the schema JSON file
        entity: Entity name
        selectors: Field paths to check
    """
    setup_logging()
    schema = _load_entity(schema_file, entity)
    try:
        fields(schema, *selectors, max_depth=depth)
    except InvalidFieldPathError as e:
        for path in e.invalid_paths:
            typer.echo(f"invalid: {path}")
        raise typer.Exit(1)
    except ValueError as e:
        _fail(str(e))

    typer.echo(f"✓ {len(selectors)} paths valid for {schema.name}")


if __name__ == "__main__":
    app()
