"""Registry that builds and owns the linked schema graph of a process."""

import threading
from typing import Any, Dict, Iterator, List, Optional, Type
from strict_records.config.logging import get_logger
from strict_records.errors import SchemaError
from strict_records.ir.document import EntitySpec, SchemaDocument
from strict_records.ir.validators import validate_document, validate_entity
from .model import AttributeDescriptor, EntitySchema, RelationDescriptor, RelationKind

logger = get_logger(__name__)


class SchemaRegistry:
    """
    Name -> EntitySchema mapping with relation targets resolved by reference.

    Relations point at their target by name and resolve through the registry,
    so entities may be registered in any order and may form cycles. Every
    lookup of a name returns the same EntitySchema object.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._schemas: Dict[str, EntitySchema] = {}
        self._specs: Dict[str, EntitySpec] = {}
        self._types: Dict[type, str] = {}

    def register(self, spec: EntitySpec, record_type: Optional[Type[Any]] = None) -> EntitySchema:
        """
        Build and register the schema for an entity specification.

        Registering an identical spec again returns the existing schema.

        Args:
            spec: Entity specification
            record_type: Optional record class to bind to this schema

        Returns:
            The registered EntitySchema

        Raises:
            SchemaError: If the spec is malformed or conflicts with an
                already registered entity of the same name
        """
        with self._lock:
            existing = self._specs.get(spec.name)
            if existing is not None:
                if existing != spec:
                    raise SchemaError(
                        f"entity '{spec.name}' is already registered with a different definition",
                        entity_name=spec.name,
                    )
                schema = self._schemas[spec.name]
            else:
                issues = validate_entity(spec)
                blocking = [i for i in issues if i.code == "DUPLICATE_ATTRIBUTE"]
                if blocking:
                    raise SchemaError(blocking[0].message, entity_name=spec.name, issues=blocking)
                schema = self._build(spec)
                self._specs[spec.name] = spec.model_copy(deep=True)
                self._schemas[spec.name] = schema
                logger.debug(
                    f"Registered entity '{spec.name}' with {len(schema.attributes)} attributes"
                )
            if record_type is not None:
                self._types[record_type] = spec.name
            return schema

    def register_document(self, doc: SchemaDocument) -> List[EntitySchema]:
        """
        Register every entity of a document.

        Raises:
            SchemaError: If the document has duplicate entities, duplicate
                attributes or relations to entities that do not exist
        """
        issues = [i for i in validate_document(doc) if i.code != "EMPTY_ENTITY"]
        if issues:
            raise SchemaError(
                f"schema document has {len(issues)} issue(s): {issues[0].message}",
                issues=issues,
            )
        with self._lock:
            # Nothing is registered unless every entity can be
            conflicts = [
                spec.name
                for spec in doc.entities
                if spec.name in self._specs and self._specs[spec.name] != spec
            ]
            if conflicts:
                raise SchemaError(
                    f"entities already registered with a different definition: "
                    f"{', '.join(conflicts)}",
                    entity_name=conflicts[0],
                )
            return [self.register(spec) for spec in doc.entities]

    def bind(self, record_type: Type[Any], name: str) -> None:
        """Associate a record class with a registered entity."""
        with self._lock:
            if name not in self._schemas:
                raise SchemaError(f"unknown entity '{name}'", entity_name=name)
            self._types[record_type] = name

    def get(self, name: str) -> EntitySchema:
        try:
            return self._schemas[name]
        except KeyError:
            raise SchemaError(f"unknown entity '{name}'", entity_name=name) from None

    def resolve(self, entity: Any) -> EntitySchema:
        """Schema for an entity given as a schema, a name or a bound record class."""
        if isinstance(entity, EntitySchema):
            return entity
        if isinstance(entity, str):
            return self.get(entity)
        if isinstance(entity, type):
            name = self._types.get(entity, entity.__name__)
            return self.get(name)
        raise SchemaError(f"cannot resolve entity from {entity!r}")

    def schema_for(self, record: Any) -> EntitySchema:
        """
        Schema of a record instance.

        Walks the record's class hierarchy; each class matches when it is
        bound to an entity or shares its name with one.
        """
        record_type = type(record)
        for klass in record_type.__mro__[:-1]:
            name = self._types.get(klass)
            if name is not None:
                return self.get(name)
            if klass.__name__ in self._schemas:
                return self._schemas[klass.__name__]
        raise SchemaError(
            f"no schema registered for record type '{record_type.__name__}'",
            entity_name=record_type.__name__,
        )

    def names(self) -> List[str]:
        return list(self._schemas)

    def __contains__(self, name: object) -> bool:
        return name in self._schemas

    def __iter__(self) -> Iterator[EntitySchema]:
        return iter(list(self._schemas.values()))

    def __len__(self) -> int:
        return len(self._schemas)

    def _build(self, spec: EntitySpec) -> EntitySchema:
        attributes = []
        for attr in spec.attributes:
            relation = None
            if attr.relation is not None:
                relation = RelationDescriptor(
                    kind=RelationKind(attr.relation.kind),
                    target_name=attr.relation.target,
                    resolver=self.get,
                )
            attributes.append(
                AttributeDescriptor(
                    name=attr.name,
                    primary_key=attr.primary_key,
                    generated_default=attr.generated_default,
                    version=attr.version,
                    relation=relation,
                )
            )
        return EntitySchema(name=spec.name, attributes=tuple(attributes))
