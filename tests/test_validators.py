"""Tests for schema document validation."""

import pytest
from pydantic import ValidationError
from strict_records.ir.document import AttributeSpec, EntitySpec, RelationRef, SchemaDocument
from strict_records.ir.validators import validate_document, validate_entity


def test_valid_document_has_no_issues():
    doc = SchemaDocument(
        entities=[
            EntitySpec(
                name="Node",
                attributes=[
                    AttributeSpec(name="id", primary_key=True),
                    AttributeSpec(name="next", relation=RelationRef(target="Node")),
                ],
            )
        ]
    )
    assert validate_document(doc) == []


def test_document_issues():
    doc = SchemaDocument(
        entities=[
            EntitySpec(
                name="Post",
                attributes=[
                    AttributeSpec(name="id", primary_key=True),
                    AttributeSpec(name="id"),
                    AttributeSpec(name="author", relation=RelationRef(target="User")),
                ],
            ),
            EntitySpec(name="Tag"),
            EntitySpec(name="Tag", attributes=[AttributeSpec(name="label")]),
        ]
    )
    issues = validate_document(doc)
    codes = [issue.code for issue in issues]
    assert codes == [
        "DUPLICATE_ENTITY",
        "DUPLICATE_ATTRIBUTE",
        "RELATION_TARGET_MISSING",
        "EMPTY_ENTITY",
    ]
    missing = issues[2]
    assert missing.location == "Post.author"
    assert missing.details["target"] == "User"


def test_validate_entity_without_known_entities_skips_targets():
    spec = EntitySpec(
        name="Post",
        attributes=[AttributeSpec(name="author", relation=RelationRef(target="User"))],
    )
    assert validate_entity(spec) == []
    assert [i.code for i in validate_entity(spec, known_entities={"Post"})] == [
        "RELATION_TARGET_MISSING"
    ]


def test_default_raw_implies_generated_default():
    assert AttributeSpec(name="createdAt", default_raw="NOW()").generated_default
    assert not AttributeSpec(name="createdAt").generated_default
    assert not AttributeSpec(name="createdAt", default_raw="").generated_default


def test_spec_models_reject_bad_input():
    with pytest.raises(ValidationError):
        AttributeSpec(name="")
    with pytest.raises(ValidationError):
        RelationRef(kind="many", target="User")
    with pytest.raises(ValidationError):
        EntitySpec(name="")


@pytest.mark.parametrize("name", ["a.b", "*"])
def test_attribute_spec_rejects_path_syntax_in_names(name):
    with pytest.raises(ValidationError, match="cannot be used in a field path"):
        AttributeSpec(name=name)
