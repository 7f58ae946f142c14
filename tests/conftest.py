"""Shared fixtures for strict_records tests."""

import pytest
from strict_records.config.settings import reset_settings
from strict_records.ir.document import AttributeSpec, EntitySpec, RelationRef
from strict_records.schema.registry import SchemaRegistry


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch):
    """Every test starts from default settings."""
    monkeypatch.delenv("STRICT_RECORDS_DEFAULT_MAX_DEPTH", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def blog_registry():
    """User <-> Post <-> Comment graph with a self-referencing User.manager."""
    registry = SchemaRegistry()
    registry.register(
        EntitySpec(
            name="User",
            attributes=[
                AttributeSpec(name="id", primary_key=True, default_raw="gen_random_uuid()"),
                AttributeSpec(name="email"),
                AttributeSpec(name="createdAt", default_raw="NOW()"),
                AttributeSpec(name="posts", relation=RelationRef(kind="multi", target="Post")),
                AttributeSpec(name="manager", relation=RelationRef(kind="single", target="User")),
            ],
        )
    )
    registry.register(
        EntitySpec(
            name="Post",
            attributes=[
                AttributeSpec(name="id", primary_key=True),
                AttributeSpec(name="title"),
                AttributeSpec(name="version", version=True),
                AttributeSpec(name="author", relation=RelationRef(target="User")),
                AttributeSpec(name="comments", relation=RelationRef(kind="multi", target="Comment")),
            ],
        )
    )
    registry.register(
        EntitySpec(
            name="Comment",
            attributes=[
                AttributeSpec(name="id", primary_key=True),
                AttributeSpec(name="body"),
                AttributeSpec(name="post", relation=RelationRef(target="Post")),
            ],
        )
    )
    return registry
