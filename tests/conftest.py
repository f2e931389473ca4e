"""Pytest fixtures: representative API payloads."""

import pytest


@pytest.fixture
def completed_flow_payload():
    return {
        "id": "RE123",
        "description": "Wine boxes",
        "session_token": "SESS_wSs0uGYMISxzqOBq",
        "scheme": "bacs",
        "success_redirect_url": "https://example.com/pay/confirm",
        "redirect_url": "https://pay.gocardless.com/flow/RE123",
        "confirmation_url": "https://pay.gocardless.com/flow/RE123/success",
        "created_at": "2014-10-22T13:10:06.000Z",
        "links": {
            "creditor": "CR123",
            "customer": "CU123",
            "customer_bank_account": "BA123",
            "mandate": "MD123",
        },
    }


@pytest.fixture
def created_flow_payload():
    return {
        "id": "RE123",
        "description": "Wine boxes",
        "session_token": "SESS_wSs0uGYMISxzqOBq",
        "scheme": None,
        "success_redirect_url": "https://example.com/pay/confirm",
        "redirect_url": "https://pay.gocardless.com/flow/RE123",
        "created_at": "2014-10-22T13:10:06.000Z",
        "links": {"creditor": "CR123"},
    }


@pytest.fixture
def mandate_event_payload():
    return {
        "id": "EV123",
        "created_at": "2014-04-08T17:01:06.000Z",
        "resource_type": "mandates",
        "action": "cancelled",
        "customer_notifications": [
            {
                "id": "PCN123",
                "type": "mandate_created",
                "deadline": "2018-11-21T17:01:06.000Z",
                "mandatory": True,
            }
        ],
        "details": {
            "origin": "bank",
            "cause": "bank_account_disabled",
            "description": "Your customer closed their bank account.",
            "scheme": "bacs",
            "reason_code": "ADDACS-B",
        },
        "metadata": {"order_dispatch_date": "2014-05-22"},
        "links": {"mandate": "MD123", "parent_event": "EV122"},
    }
