"""Recipient classes and the per-request recipient token set."""

from dataclasses import dataclass, field
from enum import Enum


class RecipientClass(Enum):
    OWNER = "owner"
    ADMIN = "admin"
    CUSTOMER = "customer"


class TokenRole(Enum):
    ADMIN = "admin"
    OWNER = "owner"


# Notification order for one event
DISPATCH_ORDER = (RecipientClass.OWNER, RecipientClass.ADMIN, RecipientClass.CUSTOMER)


@dataclass
class RecipientTokenSet:
    """Tokens resolved for one order event, grouped by recipient class."""

    order_id: str
    order: dict
    admin_tokens: list[str] = field(default_factory=list)
    owner_tokens: list[str] = field(default_factory=list)
    customer_tokens: list[str] = field(default_factory=list)

    def tokens_for(self, recipient_class: RecipientClass) -> list[str]:
        if recipient_class is RecipientClass.ADMIN:
            return self.admin_tokens
        if recipient_class is RecipientClass.OWNER:
            return self.owner_tokens
        return self.customer_tokens

    def counts(self) -> dict[str, int]:
        return {
            RecipientClass.ADMIN.value: len(self.admin_tokens),
            RecipientClass.OWNER.value: len(self.owner_tokens),
            RecipientClass.CUSTOMER.value: len(self.customer_tokens),
        }
