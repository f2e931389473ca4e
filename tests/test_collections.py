import logging

import pytest

from gocardless_resources.errors import MissingIdentity, SchemaViolation
from gocardless_resources.resources.collections import decode_collection, decode_envelope
from gocardless_resources.resources.events import Event
from gocardless_resources.resources.redirect_flows import RedirectFlow


def test_decode_envelope(completed_flow_payload):
    flow = decode_envelope({"redirect_flows": completed_flow_payload}, RedirectFlow)
    assert flow.id == "RE123"


def test_decode_envelope_error_paths_include_the_envelope_key():
    with pytest.raises(MissingIdentity) as excinfo:
        decode_envelope({"redirect_flows": {"id": ""}}, RedirectFlow)
    assert excinfo.value.path == "redirect_flows.id"


def test_decode_envelope_accepts_an_unwrapped_body(completed_flow_payload):
    assert decode_envelope(completed_flow_payload, RedirectFlow).id == "RE123"


def test_collection_keeps_going_past_bad_items(mandate_event_payload, caplog):
    body = {
        "events": [
            mandate_event_payload,
            {"id": ""},
            {"id": "EV2", "metadata": {"count": 3}},
            {"id": "EV3", "resource_type": "outbound_payments"},
        ],
        "meta": {"cursors": {"before": None, "after": None}, "limit": 50},
    }

    with caplog.at_level(logging.WARNING):
        batch = decode_collection(body, Event)

    assert len(batch) == 4
    assert [e.id for e in batch.records()] == ["EV123", "EV3"]

    failures = batch.failures()
    assert [f.index for f in failures] == [1, 2]
    assert isinstance(failures[0].error, MissingIdentity)
    assert failures[0].error.path == "events[1].id"
    assert isinstance(failures[1].error, SchemaViolation)
    assert failures[1].error.path == "events[2].metadata.count"
    assert "events[2].metadata.count" in caplog.text


def test_raise_first_aborts_on_first_failure():
    batch = decode_collection([{"id": "EV1"}, {"id": None}], Event)
    with pytest.raises(MissingIdentity):
        batch.raise_first()


def test_raise_first_returns_clean_batch():
    batch = decode_collection([{"id": "EV1"}, {"id": "EV2"}], Event)
    assert batch.raise_first() is batch
    assert all(outcome.ok for outcome in batch)


def test_collection_body_with_wrong_shape():
    with pytest.raises(SchemaViolation) as excinfo:
        decode_collection({"events": {"id": "EV1"}}, Event)
    assert excinfo.value.path == "events"
