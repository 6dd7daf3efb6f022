"""In-memory document store — for tests and local development."""

from copy import deepcopy

from orderpush.store.port import DocumentStorePort


class InMemoryStore(DocumentStorePort):
    """Document store that keeps orders and token entries in dicts."""

    def __init__(self):
        self.orders: dict[str, dict] = {}
        self.token_entries: dict[str, dict] = {}
        self.should_succeed = True
        self.failure_reason = "Document store unavailable"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Document store unavailable"):
        """Configure the fake store behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def add_order(self, order_id: str, document: dict) -> None:
        self.orders[order_id] = deepcopy(document)

    def add_token_entry(self, key: str, document: dict) -> None:
        self.token_entries[key] = deepcopy(document)

    def _check(self) -> None:
        if not self.should_succeed:
            raise RuntimeError(self.failure_reason)

    def get_order(self, order_id: str) -> dict | None:
        self._check()
        order = self.orders.get(order_id)
        return deepcopy(order) if order is not None else None

    def find_token_entries(self, role: str, owner_store_id: str | None = None) -> list[dict]:
        self._check()
        return [
            deepcopy(entry)
            for entry in self.token_entries.values()
            if entry.get("role") == role
            and (owner_store_id is None or entry.get("ownerStoreId") == owner_store_id)
        ]

    def get_token_entry(self, key: str) -> dict | None:
        self._check()
        entry = self.token_entries.get(key)
        return deepcopy(entry) if entry is not None else None

    def reset(self):
        """Clear stored documents (useful between tests)."""
        self.orders.clear()
        self.token_entries.clear()
        self.should_succeed = True
        self.failure_reason = "Document store unavailable"
