"""Document store access — orders and the push token registry.

Adapters are constructed once at startup and injected; Firestore in
production, the in-memory store in tests and local development.
"""

from orderpush.store.port import DocumentStorePort

__all__ = ["DocumentStorePort"]
