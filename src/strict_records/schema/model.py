"""Runtime schema model shared by the flush validator and the path generator."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional, Tuple
from strict_records.constants import PATH_SEPARATOR, WILDCARD
from strict_records.errors import SchemaError


class RelationKind(str, Enum):
    """How many target records a relation points at."""

    SINGLE = "single"
    MULTI = "multi"


@dataclass(frozen=True)
class RelationDescriptor:
    """
    Relation to another record type.

    The target is looked up by name through ``resolver`` each time it is
    accessed, so schemas can reference each other (or themselves) while
    staying immutable. The resolver must return the same EntitySchema object
    for the same name.
    """

    kind: RelationKind
    target_name: str
    resolver: Callable[[str], "EntitySchema"] = field(compare=False, repr=False)

    @property
    def target(self) -> "EntitySchema":
        return self.resolver(self.target_name)

    @classmethod
    def bound(cls, kind: RelationKind, target: "EntitySchema") -> "RelationDescriptor":
        """Relation to an already-built schema, without a registry."""

        def _resolve(name: str) -> "EntitySchema":
            if name != target.name:
                raise SchemaError(f"unknown entity '{name}'", entity_name=name)
            return target

        return cls(kind=RelationKind(kind), target_name=target.name, resolver=_resolve)


@dataclass(frozen=True)
class AttributeDescriptor:
    """A single attribute of a record type."""

    name: str
    primary_key: bool = False
    generated_default: bool = False
    version: bool = False
    relation: Optional[RelationDescriptor] = None

    @property
    def is_generated(self) -> bool:
        """True when the storage backend assigns this attribute's value."""
        return self.primary_key or self.generated_default or self.version

    @property
    def is_relation(self) -> bool:
        return self.relation is not None


@dataclass(frozen=True)
class EntitySchema:
    """Read-only description of a record type."""

    name: str
    attributes: Tuple[AttributeDescriptor, ...] = ()
    _by_name: Dict[str, AttributeDescriptor] = field(
        init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self):
        # Accept any iterable but store a tuple
        attributes = tuple(self.attributes)
        object.__setattr__(self, "attributes", attributes)

        by_name: Dict[str, AttributeDescriptor] = {}
        for attr in attributes:
            if PATH_SEPARATOR in attr.name or attr.name == WILDCARD:
                raise SchemaError(
                    f"{self.name}: attribute name '{attr.name}' cannot be used in a field path",
                    entity_name=self.name,
                )
            if attr.name in by_name:
                raise SchemaError(
                    f"{self.name}: attribute '{attr.name}' is declared more than once",
                    entity_name=self.name,
                )
            by_name[attr.name] = attr
        object.__setattr__(self, "_by_name", by_name)

    def attribute(self, name: str) -> Optional[AttributeDescriptor]:
        return self._by_name.get(name)

    @property
    def attribute_names(self) -> Tuple[str, ...]:
        return tuple(attr.name for attr in self.attributes)

    @property
    def relations(self) -> Tuple[AttributeDescriptor, ...]:
        return tuple(attr for attr in self.attributes if attr.is_relation)

    @property
    def scalars(self) -> Tuple[AttributeDescriptor, ...]:
        return tuple(attr for attr in self.attributes if not attr.is_relation)
