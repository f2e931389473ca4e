"""
Redirect flows.

A redirect flow sends a customer to the hosted payment pages to set up a
mandate:

1. create a flow and redirect the customer to `redirect_url`
2. the customer fills in their details and is sent back to
   `success_redirect_url`
3. complete the flow, which creates a customer, a customer bank account and
   a mandate

Flows expire 30 minutes after creation and an expired flow cannot be
completed. `links.customer`, `links.customer_bank_account` and
`links.mandate` are only present once the flow has been completed;
`confirmation_url` likewise, and only for 15 minutes after completion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Tuple

from gocardless_resources.contracts.enumeration import EnumValue, WireEnum
from gocardless_resources.contracts.fields import (
    EnumField,
    IdentityField,
    LinkField,
    LinksField,
    StringField,
    TimestampField,
    WireField,
)
from gocardless_resources.contracts.links import Link
from gocardless_resources.contracts.optional import UNSET, OptionalField, is_present
from gocardless_resources.contracts.records import Record, Resource


class RedirectFlowScheme(WireEnum):
    """
    Direct Debit scheme a redirect flow is restricted to.

    Leave unset so the most appropriate scheme is picked from the customer's
    bank account. Has no `sepa_cor1`, unlike EventDetailsScheme.
    """

    ACH = "ach"
    AUTOGIRO = "autogiro"
    BACS = "bacs"
    BECS = "becs"
    BECS_NZ = "becs_nz"
    BETALINGSSERVICE = "betalingsservice"
    PAD = "pad"
    SEPA_CORE = "sepa_core"


@dataclass(frozen=True)
class RedirectFlowLinks(Record):
    creditor: OptionalField[Link] = UNSET
    # Set only after the flow has been completed.
    customer: OptionalField[Link] = UNSET
    customer_bank_account: OptionalField[Link] = UNSET
    mandate: OptionalField[Link] = UNSET

    wire_fields: ClassVar[Tuple[WireField, ...]] = (
        LinkField("creditor", "creditors"),
        LinkField("customer", "customers"),
        LinkField("customer_bank_account", "customer_bank_accounts"),
        LinkField("mandate", "mandates"),
    )


@dataclass(frozen=True)
class RedirectFlow(Resource):
    """Redirect flow as returned by the API. Ids begin with "RE"."""

    id: str
    confirmation_url: OptionalField[str] = UNSET
    created_at: OptionalField[datetime] = UNSET
    description: OptionalField[str] = UNSET
    links: RedirectFlowLinks = field(default_factory=RedirectFlowLinks)
    redirect_url: OptionalField[str] = UNSET
    scheme: OptionalField[EnumValue] = UNSET
    session_token: OptionalField[str] = UNSET
    success_redirect_url: OptionalField[str] = UNSET

    envelope_key: ClassVar[str] = "redirect_flows"
    wire_fields: ClassVar[Tuple[WireField, ...]] = (
        IdentityField(),
        StringField("confirmation_url"),
        TimestampField("created_at"),
        StringField("description"),
        LinksField(RedirectFlowLinks),
        StringField("redirect_url"),
        EnumField("scheme", RedirectFlowScheme),
        StringField("session_token"),
        StringField("success_redirect_url"),
    )

    @property
    def is_completed(self) -> bool:
        """True once the server has recorded the mandate this flow created."""
        return is_present(self.links.mandate)


@dataclass(frozen=True)
class RedirectFlowCreateLinks(Record):
    creditor: OptionalField[Link] = UNSET

    wire_fields: ClassVar[Tuple[WireField, ...]] = (
        LinkField("creditor", "creditors"),
    )


@dataclass(frozen=True)
class RedirectFlowCreateRequest(Record):
    """
    Body of a create-redirect-flow request.

    Has no identity; the server assigns one. Only fields the caller set are
    sent.
    """

    description: OptionalField[str] = UNSET
    links: RedirectFlowCreateLinks = field(default_factory=RedirectFlowCreateLinks)
    scheme: OptionalField[EnumValue] = UNSET
    session_token: OptionalField[str] = UNSET
    success_redirect_url: OptionalField[str] = UNSET

    wire_fields: ClassVar[Tuple[WireField, ...]] = (
        StringField("description"),
        LinksField(RedirectFlowCreateLinks),
        EnumField("scheme", RedirectFlowScheme),
        StringField("session_token"),
        StringField("success_redirect_url"),
    )


@dataclass(frozen=True)
class RedirectFlowCompleteRequest(Record):
    # Must match the token the flow was created with.
    session_token: OptionalField[str] = UNSET

    wire_fields: ClassVar[Tuple[WireField, ...]] = (
        StringField("session_token"),
    )
