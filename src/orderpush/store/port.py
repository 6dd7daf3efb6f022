"""Document store port — abstract interface for order and token lookups."""

from abc import ABC, abstractmethod


class DocumentStorePort(ABC):
    """Read-only access to the ``orders`` and ``pushTokens`` collections."""

    @abstractmethod
    def get_order(self, order_id: str) -> dict | None:
        """Return the order document, or None when it does not exist."""
        ...

    @abstractmethod
    def find_token_entries(self, role: str, owner_store_id: str | None = None) -> list[dict]:
        """Return registry entries with ``role``.

        When ``owner_store_id`` is given, only entries whose ``ownerStoreId``
        equals it are returned.
        """
        ...

    @abstractmethod
    def get_token_entry(self, key: str) -> dict | None:
        """Return the registry entry stored under ``key``, or None."""
        ...
