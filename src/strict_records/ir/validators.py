"""Validators for schema documents."""

from dataclasses import dataclass, field
from typing import Collection, List, Literal, Optional
from .document import EntitySpec, SchemaDocument
from strict_records.config.logging import get_logger

logger = get_logger(__name__)

IssueCode = Literal[
    "DUPLICATE_ENTITY",
    "DUPLICATE_ATTRIBUTE",
    "RELATION_TARGET_MISSING",
    "EMPTY_ENTITY",
]


@dataclass
class SchemaIssue:
    """Problem found while validating a schema document."""

    code: IssueCode
    location: str  # e.g., "User" or "User.profile"
    message: str
    details: dict = field(default_factory=dict)


def validate_entity(
    spec: EntitySpec,
    known_entities: Optional[Collection[str]] = None,
) -> List[SchemaIssue]:
    """
    Validate a single entity specification.

    Args:
        spec: EntitySpec to validate
        known_entities: Names relation targets may point at. When None,
            relation targets are not checked.

    Returns:
        List of SchemaIssue objects (empty if validation passes)
    """
    issues: List[SchemaIssue] = []

    if not spec.attributes:
        issues.append(
            SchemaIssue(
                code="EMPTY_ENTITY",
                location=spec.name,
                message=f"{spec.name}: entity declares no attributes",
                details={"entity": spec.name},
            )
        )

    seen = set()
    for attr in spec.attributes:
        if attr.name in seen:
            issues.append(
                SchemaIssue(
                    code="DUPLICATE_ATTRIBUTE",
                    location=f"{spec.name}.{attr.name}",
                    message=f"{spec.name}: attribute '{attr.name}' is declared more than once",
                    details={"entity": spec.name, "attribute": attr.name},
                )
            )
        seen.add(attr.name)

        if (
            attr.relation is not None
            and known_entities is not None
            and attr.relation.target not in known_entities
        ):
            issues.append(
                SchemaIssue(
                    code="RELATION_TARGET_MISSING",
                    location=f"{spec.name}.{attr.name}",
                    message=f"{spec.name}: relation '{attr.name}' references "
                    f"missing entity '{attr.relation.target}'",
                    details={
                        "entity": spec.name,
                        "attribute": attr.name,
                        "target": attr.relation.target,
                    },
                )
            )

    return issues


def validate_document(doc: SchemaDocument) -> List[SchemaIssue]:
    """
    Validate every entity of a schema document.

    Args:
        doc: SchemaDocument to validate

    Returns:
        List of SchemaIssue objects (empty if validation passes)
    """
    issues: List[SchemaIssue] = []
    names = [spec.name for spec in doc.entities]

    seen = set()
    for name in names:
        if name in seen:
            issues.append(
                SchemaIssue(
                    code="DUPLICATE_ENTITY",
                    location=name,
                    message=f"entity '{name}' is declared more than once",
                    details={"entity": name},
                )
            )
        seen.add(name)

    for spec in doc.entities:
        issues.extend(validate_entity(spec, known_entities=seen))

    if issues:
        logger.warning(f"Schema validation found {len(issues)} issues")
    else:
        logger.info("Schema validation passed")

    return issues
