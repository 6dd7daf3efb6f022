from orderpush.notifications.recipient.recipient import (
    DISPATCH_ORDER,
    RecipientClass,
    RecipientTokenSet,
    TokenRole,
)
from orderpush.notifications.recipient.resolver import RecipientResolver
from orderpush.notifications.recipient.selection import TOKEN_RULES, TokenRule, pick_best_token

__all__ = [
    "DISPATCH_ORDER",
    "RecipientClass",
    "RecipientResolver",
    "RecipientTokenSet",
    "TOKEN_RULES",
    "TokenRole",
    "TokenRule",
    "pick_best_token",
]
