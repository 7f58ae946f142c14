"""Tests for the forwarding persistence-manager wrapper."""

import pytest
from strict_records.errors import FlushError, SchemaError
from strict_records.flush import UNSET, Unflushed
from strict_records.manager import PartialRecord, StrictManager


class User:
    def __init__(self, **values):
        self.id = UNSET
        self.email = UNSET
        self.createdAt = UNSET
        self.__dict__.update(values)


class FakeManager:
    """Records calls and returns canned results."""

    def __init__(self):
        self.calls = []

    def create(self, entity, data, *args, **kwargs):
        self.calls.append(("create", entity, data, args, kwargs))
        return User(**data)

    def assign(self, record, data, *args, **kwargs):
        self.calls.append(("assign", record, data, args, kwargs))
        record.__dict__.update(data)
        return record

    def get_reference(self, entity, identifier, *args, **kwargs):
        self.calls.append(("get_reference", entity, identifier, args, kwargs))
        return User(id=identifier)


@pytest.fixture
def strict(blog_registry):
    return StrictManager(FakeManager(), blog_registry)


def test_create_forwards_and_wraps(strict, blog_registry):
    data = {"email": "a@b.com"}
    result = strict.create_strict("User", data, partial=True)
    assert isinstance(result, Unflushed)
    assert result.schema is blog_registry.get("User")
    assert strict.manager.calls == [("create", "User", data, (), {"partial": True})]
    assert result.record.email == "a@b.com"
    assert result.undefined_fields() == ["id", "createdAt"]
    with pytest.raises(FlushError):
        result.require_flushed()


def test_create_then_flush(strict):
    result = strict.create_strict(User, {"email": "a@b.com"})
    # what the backend would fill in on flush
    result.record.id = "abc"
    result.record.createdAt = None
    assert result.require_flushed() is result.record


def test_assign_forwards_and_wraps(strict, blog_registry):
    user = User(id="1", createdAt="now")
    result = strict.assign_strict(user, {"email": "new@b.com"}, "extra")
    assert result.record is user
    assert result.schema is blog_registry.get("User")
    assert strict.manager.calls[-1] == ("assign", user, {"email": "new@b.com"}, ("extra",), {})
    assert result.is_flushed()


def test_get_reference_returns_partial_record(strict, blog_registry):
    ref = strict.get_reference_strict("User", "abc")
    assert isinstance(ref, PartialRecord)
    assert ref.schema is blog_registry.get("User")
    assert ref.primary_key() == {"id": "abc"}
    assert ref.loaded_fields() == ["id"]
    assert ref.is_loaded("id")
    assert not ref.is_loaded("email")


def test_unknown_entity_is_rejected_before_forwarding(strict):
    with pytest.raises(SchemaError):
        strict.create_strict("Ghost", {})
    assert strict.manager.calls == []


def test_manager_errors_propagate(blog_registry):
    class Broken(FakeManager):
        def create(self, entity, data, *args, **kwargs):
            raise RuntimeError("db down")

    strict = StrictManager(Broken(), blog_registry)
    with pytest.raises(RuntimeError, match="db down"):
        strict.create_strict("User", {})


def test_wrapped_manager_is_not_modified(blog_registry):
    manager = FakeManager()
    StrictManager(manager, blog_registry)
    assert not hasattr(manager, "create_strict")
    assert not hasattr(FakeManager, "create_strict")
