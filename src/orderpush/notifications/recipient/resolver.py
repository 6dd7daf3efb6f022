"""Recipient resolver — loads an order and collects its recipients' tokens."""

import structlog

from orderpush.errors import NotFoundError
from orderpush.notifications.recipient.recipient import RecipientTokenSet, TokenRole
from orderpush.notifications.recipient.selection import pick_best_token
from orderpush.store.port import DocumentStorePort

logger = structlog.get_logger(__name__)


def _select_tokens(entries: list[dict]) -> list[str]:
    tokens = []
    for entry in entries:
        token = pick_best_token(entry)
        if token and token.strip():
            tokens.append(token)
    return tokens


class RecipientResolver:
    """Resolves admin, store owner and customer tokens for an order."""

    def __init__(self, store: DocumentStorePort):
        self._store = store

    def resolve(self, order_id: str) -> RecipientTokenSet:
        order = self._store.get_order(order_id)
        if order is None:
            raise NotFoundError("order not found")

        return self.resolve_for_order(order_id, order)

    def resolve_for_order(self, order_id: str, order: dict) -> RecipientTokenSet:
        """Collect tokens for an already loaded order document."""
        store_id = order.get("storeId")
        customer_uid = order.get("customerUid")

        admin_tokens = _select_tokens(self._store.find_token_entries(TokenRole.ADMIN.value))

        owner_tokens: list[str] = []
        if store_id:
            owner_tokens = _select_tokens(
                self._store.find_token_entries(TokenRole.OWNER.value, owner_store_id=store_id)
            )

        customer_tokens: list[str] = []
        if customer_uid:
            entry = self._store.get_token_entry(customer_uid)
            if entry is not None:
                customer_tokens = _select_tokens([entry])

        token_set = RecipientTokenSet(
            order_id=order_id,
            order=order,
            admin_tokens=admin_tokens,
            owner_tokens=owner_tokens,
            customer_tokens=customer_tokens,
        )
        logger.info("Recipients resolved", order_id=order_id, **token_set.counts())
        return token_set
