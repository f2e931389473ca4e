import pytest

from gocardless_resources.contracts.metadata import Metadata
from gocardless_resources.contracts.optional import NULL, UNSET, Present
from gocardless_resources.errors import SchemaViolation
from gocardless_resources.resources.events import Event


def test_empty_and_absent_metadata_are_equivalent():
    with_empty = Event.decode({"id": "EV1", "metadata": {}})
    without = Event.decode({"id": "EV1"})

    assert with_empty.metadata == Present(Metadata())
    assert without.metadata is UNSET
    assert Metadata.equivalent(with_empty.metadata, without.metadata)
    assert Metadata.equivalent(NULL, Present(Metadata()))


def test_non_empty_metadata_is_not_equivalent_to_none():
    event = Event.decode({"id": "EV1", "metadata": {"k": "v"}})
    assert not Metadata.equivalent(event.metadata, UNSET)
    assert Metadata.equivalent(event.metadata, {"k": "v"})


def test_non_string_value_is_a_schema_violation_with_path():
    with pytest.raises(SchemaViolation) as excinfo:
        Event.decode({"id": "EV1", "metadata": {"order": 5}})
    assert excinfo.value.path == "metadata.order"


def test_nested_value_is_a_schema_violation():
    with pytest.raises(SchemaViolation) as excinfo:
        Event.decode({"id": "EV1", "metadata": {"order": {"id": "1"}}})
    assert excinfo.value.path == "metadata.order"


def test_metadata_that_is_not_an_object_is_a_schema_violation():
    with pytest.raises(SchemaViolation) as excinfo:
        Event.decode({"id": "EV1", "metadata": "nope"})
    assert excinfo.value.path == "metadata"


def test_metadata_is_immutable():
    md = Metadata({"a": "1"})
    with pytest.raises(TypeError):
        md["b"] = "2"
    with pytest.raises(AttributeError):
        md._entries = {}
    updated = md.with_entry("b", "2")
    assert dict(md) == {"a": "1"}
    assert dict(updated) == {"a": "1", "b": "2"}
    assert dict(updated.without("a")) == {"b": "2"}


def test_encode_emits_exactly_the_entries_present():
    event = Event.decode({"id": "EV1", "metadata": {"a": "1", "b": "2"}})
    assert event.to_wire()["metadata"] == {"a": "1", "b": "2"}
