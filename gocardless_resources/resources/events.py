"""
Events.

An event is stored for every webhook and records something that happened to
another resource: a payment collected, a mandate transferred, and so on.
Which of the `links` is set depends on `resource_type` and on the action;
check presence before using any of them.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Optional, Tuple

from gocardless_resources.contracts.enumeration import EnumValue, WireEnum
from gocardless_resources.contracts.fields import (
    BooleanField,
    EnumField,
    IdentityField,
    LinkField,
    LinksField,
    MetadataField,
    NestedField,
    NestedListField,
    StringField,
    TimestampField,
    WireField,
)
from gocardless_resources.contracts.links import Link
from gocardless_resources.contracts.metadata import Metadata
from gocardless_resources.contracts.optional import UNSET, OptionalField, Present
from gocardless_resources.contracts.records import Record, Resource


class EventResourceType(WireEnum):
    PAYMENTS = "payments"
    MANDATES = "mandates"
    PAYOUTS = "payouts"
    REFUNDS = "refunds"
    SUBSCRIPTIONS = "subscriptions"


class EventDetailsOrigin(WireEnum):
    """
    Who initiated the event.

    bank        a report from the banks
    api         an API endpoint
    gocardless  performed by GoCardless automatically
    customer    the customer
    """

    BANK = "bank"
    API = "api"
    GOCARDLESS = "gocardless"
    CUSTOMER = "customer"


class EventDetailsScheme(WireEnum):
    """Direct Debit scheme, set when a bank is the origin of the event."""

    ACH = "ach"
    AUTOGIRO = "autogiro"
    BACS = "bacs"
    BECS = "becs"
    BECS_NZ = "becs_nz"
    BETALINGSSERVICE = "betalingsservice"
    PAD = "pad"
    SEPA_CORE = "sepa_core"
    SEPA_COR1 = "sepa_cor1"


class EventCustomerNotificationType(WireEnum):
    PAYMENT_CREATED = "payment_created"
    MANDATE_CREATED = "mandate_created"
    SUBSCRIPTION_CREATED = "subscription_created"


@dataclass(frozen=True)
class EventCustomerNotification(Record):
    """
    A notification the integrator must (or may) send to the customer.

    Present only in webhooks when the integrator is authorised to send its
    own notifications.
    """

    # Time after which the notification is sent by email instead.
    deadline: OptionalField[str] = UNSET
    id: OptionalField[str] = UNSET
    mandatory: OptionalField[bool] = UNSET
    type: OptionalField[EnumValue] = UNSET

    wire_fields: ClassVar[Tuple[WireField, ...]] = (
        StringField("deadline"),
        StringField("id"),
        BooleanField("mandatory"),
        EnumField("type", EventCustomerNotificationType),
    )


@dataclass(frozen=True)
class EventDetails(Record):
    cause: OptionalField[str] = UNSET
    # Changes to descriptions are not considered breaking.
    description: OptionalField[str] = UNSET
    origin: OptionalField[EnumValue] = UNSET
    # Scheme-specific, and can be inconsistent between banks.
    reason_code: OptionalField[str] = UNSET
    scheme: OptionalField[EnumValue] = UNSET

    wire_fields: ClassVar[Tuple[WireField, ...]] = (
        StringField("cause"),
        StringField("description"),
        EnumField("origin", EventDetailsOrigin),
        StringField("reason_code"),
        EnumField("scheme", EventDetailsScheme),
    )


@dataclass(frozen=True)
class EventLinks(Record):
    """
    Resources an event refers to.

    mandate / payment / payout / refund / subscription
        the updated resource, matching `resource_type`; at most one is set
    new_customer_bank_account / previous_customer_bank_account
        mandate transfer events only
    new_mandate
        mandate replaced events only
    organisation
        webhooks delivered to an OAuth app only
    parent_event
        the event that caused this one, if any
    """

    mandate: OptionalField[Link] = UNSET
    new_customer_bank_account: OptionalField[Link] = UNSET
    new_mandate: OptionalField[Link] = UNSET
    organisation: OptionalField[Link] = UNSET
    parent_event: OptionalField[Link] = UNSET
    payment: OptionalField[Link] = UNSET
    payout: OptionalField[Link] = UNSET
    previous_customer_bank_account: OptionalField[Link] = UNSET
    refund: OptionalField[Link] = UNSET
    subscription: OptionalField[Link] = UNSET

    wire_fields: ClassVar[Tuple[WireField, ...]] = (
        LinkField("mandate", "mandates"),
        LinkField("new_customer_bank_account", "customer_bank_accounts"),
        LinkField("new_mandate", "mandates"),
        LinkField("organisation", "organisations"),
        LinkField("parent_event", "events"),
        LinkField("payment", "payments"),
        LinkField("payout", "payouts"),
        LinkField("previous_customer_bank_account", "customer_bank_accounts"),
        LinkField("refund", "refunds"),
        LinkField("subscription", "subscriptions"),
    )


# resource_type -> the links attribute naming the updated resource
_SUBJECT_LINKS = {
    EventResourceType.PAYMENTS: "payment",
    EventResourceType.MANDATES: "mandate",
    EventResourceType.PAYOUTS: "payout",
    EventResourceType.REFUNDS: "refund",
    EventResourceType.SUBSCRIPTIONS: "subscription",
}


@dataclass(frozen=True)
class Event(Resource):
    """Event as returned by the API. Ids begin with "EV"."""

    id: str
    action: OptionalField[str] = UNSET
    created_at: OptionalField[datetime] = UNSET
    customer_notifications: OptionalField[Tuple[EventCustomerNotification, ...]] = UNSET
    details: OptionalField[EventDetails] = UNSET
    links: EventLinks = field(default_factory=EventLinks)
    # Metadata given when the event was triggered through the API; an empty
    # object otherwise. `==` is structural, so an empty object and an absent
    # key differ here; use Metadata.equivalent to treat them as the same.
    metadata: OptionalField[Metadata] = UNSET
    resource_type: OptionalField[EnumValue] = UNSET

    envelope_key: ClassVar[str] = "events"
    wire_fields: ClassVar[Tuple[WireField, ...]] = (
        IdentityField(),
        StringField("action"),
        TimestampField("created_at"),
        NestedListField("customer_notifications", EventCustomerNotification),
        NestedField("details", EventDetails),
        LinksField(EventLinks),
        MetadataField("metadata"),
        EnumField("resource_type", EventResourceType),
    )

    def subject(self) -> OptionalField[Link]:
        """
        The link to the resource this event is about.

        UNSET when `resource_type` is absent or not one this client knows.
        """
        if not isinstance(self.resource_type, Present):
            return UNSET
        attr: Optional[str] = _SUBJECT_LINKS.get(self.resource_type.value)
        if attr is None:
            return UNSET
        return getattr(self.links, attr)
