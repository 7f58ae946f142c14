"""Declarative schema documents describing record types."""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator, model_validator
from strict_records.constants import PATH_SEPARATOR, WILDCARD


class RelationRef(BaseModel):
    """Relation from one record type to another, by target type name."""

    kind: Literal["single", "multi"] = "single"
    target: str  # e.g. "User"


class AttributeSpec(BaseModel):
    """Specification for a single record attribute."""

    name: str = Field(min_length=1)
    primary_key: bool = False
    default_raw: Optional[str] = None  # backend default expression, e.g. "NOW()"
    generated_default: bool = False
    version: bool = False
    relation: Optional[RelationRef] = None

    @field_validator("name")
    @classmethod
    def _name_is_path_segment(cls, value: str) -> str:
        if PATH_SEPARATOR in value or value == WILDCARD:
            raise ValueError(f"attribute name '{value}' cannot be used in a field path")
        return value

    @model_validator(mode="after")
    def _default_raw_is_generated(self) -> "AttributeSpec":
        if self.default_raw:
            self.generated_default = True
        return self


class EntitySpec(BaseModel):
    """Specification for a record type."""

    name: str = Field(min_length=1)
    attributes: List[AttributeSpec] = Field(default_factory=list)


class SchemaDocument(BaseModel):
    """A set of record types that may reference each other."""

    entities: List[EntitySpec] = Field(default_factory=list)

    def entity(self, name: str) -> Optional[EntitySpec]:
        for spec in self.entities:
            if spec.name == name:
                return spec
        return None
