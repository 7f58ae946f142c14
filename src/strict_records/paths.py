"""Generation and validation of dotted field-selection paths."""

from typing import FrozenSet, List, Optional, Set
from strict_records.config.settings import get_settings
from strict_records.constants import DEFAULT_MAX_DEPTH, PATH_SEPARATOR, WILDCARD
from strict_records.errors import InvalidFieldPathError
from strict_records.schema.model import EntitySchema

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "field_paths",
    "fields",
    "is_valid_path",
    "resolve_max_depth",
]


def resolve_max_depth(max_depth: Optional[int] = None) -> int:
    """Depth bound to use, falling back to the configured default."""
    if max_depth is None:
        max_depth = get_settings().default_max_depth
    if max_depth < 0:
        raise ValueError(f"max_depth must be >= 0, got {max_depth}")
    return max_depth


def _collect(schema: EntitySchema, depth: int, max_depth: int) -> Set[str]:
    # Cycles terminate on the depth bound alone; schemas are not tracked
    paths = {WILDCARD}
    for attr in schema.attributes:
        paths.add(attr.name)
        if attr.relation is not None and depth < max_depth:
            for sub in _collect(attr.relation.target, depth + 1, max_depth):
                paths.add(f"{attr.name}{PATH_SEPARATOR}{sub}")
    return paths


def field_paths(schema: EntitySchema, max_depth: Optional[int] = None) -> FrozenSet[str]:
    """
    All valid selection paths of a record type.

    Every level offers the wildcard ``*`` and each attribute name. While the
    depth budget lasts, relations also expand into ``<relation>.<path>`` for
    every path of the target type.

    Args:
        schema: Root record type
        max_depth: Maximum relation hops (default from settings, normally 2)

    Returns:
        Frozen set of dotted paths
    """
    return frozenset(_collect(schema, 0, resolve_max_depth(max_depth)))


def is_valid_path(schema: EntitySchema, path: str, max_depth: Optional[int] = None) -> bool:
    """Whether ``path`` belongs to ``field_paths(schema, max_depth)``."""
    max_depth = resolve_max_depth(max_depth)
    segments = path.split(PATH_SEPARATOR)
    if len(segments) - 1 > max_depth:
        return False

    current = schema
    for segment in segments[:-1]:
        attr = current.attribute(segment)
        if attr is None or attr.relation is None:
            return False
        current = attr.relation.target

    last = segments[-1]
    return last == WILDCARD or current.attribute(last) is not None


def fields(schema: EntitySchema, *selectors: str, max_depth: Optional[int] = None) -> List[str]:
    """
    Return the selectors unchanged after checking each is a valid path.

    Raises:
        InvalidFieldPathError: If any selector is not valid; lists all of them
    """
    max_depth = resolve_max_depth(max_depth)
    invalid = [s for s in selectors if not is_valid_path(schema, s, max_depth)]
    if invalid:
        raise InvalidFieldPathError(schema.name, invalid, max_depth)
    return list(selectors)
