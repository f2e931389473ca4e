import pytest

from gocardless_resources.contracts.optional import NULL, UNSET, Present, is_present, value_or, wrap
from gocardless_resources.resources.redirect_flows import RedirectFlow, RedirectFlowCreateRequest


def test_three_states_are_preserved_on_decode():
    unset = RedirectFlow.decode({"id": "RE1"})
    null = RedirectFlow.decode({"id": "RE1", "description": None})
    present = RedirectFlow.decode({"id": "RE1", "description": "Wine boxes"})

    assert unset.description is UNSET
    assert null.description is NULL
    assert present.description == Present("Wine boxes")


def test_encode_omits_unset_and_emits_null_explicitly():
    request = RedirectFlowCreateRequest.build(description=None, session_token="SESS_1")
    assert request.to_wire() == {"description": None, "session_token": "SESS_1"}


def test_present_value_never_encodes_to_absent_or_null():
    request = RedirectFlowCreateRequest.build(description="")
    wire = request.to_wire()
    assert "description" in wire
    assert wire["description"] == ""


def test_sentinels_are_falsy_singletons():
    assert not UNSET
    assert not NULL
    assert UNSET is not NULL
    assert type(UNSET)() is UNSET


@pytest.mark.parametrize(
    "value, expected",
    [(UNSET, UNSET), (NULL, NULL), (None, NULL), ("x", Present("x")), (Present(1), Present(1))],
)
def test_wrap(value, expected):
    assert wrap(value) == expected


def test_value_or():
    assert value_or(Present("x")) == "x"
    assert value_or(UNSET, "default") == "default"
    assert value_or(NULL) is None
    assert is_present(Present(None))
