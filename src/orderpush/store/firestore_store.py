"""Firestore adapter for the document store port."""

from google.cloud.firestore_v1.base_query import FieldFilter

from orderpush.store.port import DocumentStorePort


class FirestoreStore(DocumentStorePort):
    def __init__(self, client, orders_collection: str = "orders", tokens_collection: str = "pushTokens"):
        self._client = client
        self._orders = orders_collection
        self._tokens = tokens_collection

    def get_order(self, order_id: str) -> dict | None:
        snapshot = self._client.collection(self._orders).document(order_id).get()
        if not snapshot.exists:
            return None
        return snapshot.to_dict() or {}

    def find_token_entries(self, role: str, owner_store_id: str | None = None) -> list[dict]:
        query = self._client.collection(self._tokens).where(filter=FieldFilter("role", "==", role))
        if owner_store_id is not None:
            query = query.where(filter=FieldFilter("ownerStoreId", "==", owner_store_id))
        return [snapshot.to_dict() or {} for snapshot in query.stream()]

    def get_token_entry(self, key: str) -> dict | None:
        snapshot = self._client.collection(self._tokens).document(key).get()
        if not snapshot.exists:
            return None
        return snapshot.to_dict() or {}
