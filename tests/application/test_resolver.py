"""Tests for the recipient resolver against the in-memory store."""

import pytest

from orderpush.errors import NotFoundError
from orderpush.notifications.recipient.recipient import RecipientClass
from orderpush.notifications.recipient.resolver import RecipientResolver

ADMIN_TOKEN = "admin-device-token-000001"
OWNER_TOKEN = "owner-device-token-000001"
OTHER_OWNER_TOKEN = "owner-device-token-000002"


@pytest.fixture
def resolver(store):
    return RecipientResolver(store)


def _seed_registry(store):
    store.add_token_entry("admin-1", {"role": "admin", "deviceToken": ADMIN_TOKEN})
    store.add_token_entry("admin-2", {"role": "admin", "expoToken": "ExponentPushToken[admin2]"})
    store.add_token_entry("owner-1", {"role": "owner", "ownerStoreId": "store-1", "fcmToken": OWNER_TOKEN})
    store.add_token_entry("owner-2", {"role": "owner", "ownerStoreId": "store-2", "fcmToken": OTHER_OWNER_TOKEN})
    store.add_token_entry("cust-1", {"role": "customer", "expoToken": "ExponentPushToken[cust1]"})


class TestResolve:
    def test_unknown_order_raises_not_found(self, resolver):
        with pytest.raises(NotFoundError) as exc_info:
            resolver.resolve("missing")
        assert exc_info.value.message == "order not found"
        assert exc_info.value.status_code == 404

    def test_collects_every_bucket(self, resolver, store):
        _seed_registry(store)
        store.add_order("o-1", {"storeId": "store-1", "customerUid": "cust-1"})

        tokens = resolver.resolve("o-1")

        assert sorted(tokens.admin_tokens) == sorted([ADMIN_TOKEN, "ExponentPushToken[admin2]"])
        assert tokens.owner_tokens == [OWNER_TOKEN]
        assert tokens.customer_tokens == ["ExponentPushToken[cust1]"]
        assert tokens.order == {"storeId": "store-1", "customerUid": "cust-1"}
        assert tokens.counts() == {"admin": 2, "owner": 1, "customer": 1}

    def test_owners_skipped_without_store_id(self, resolver, store):
        _seed_registry(store)
        store.add_order("o-2", {"customerUid": "cust-1"})

        tokens = resolver.resolve("o-2")

        assert tokens.owner_tokens == []
        assert tokens.tokens_for(RecipientClass.OWNER) == []

    def test_customer_skipped_without_uid(self, resolver, store):
        _seed_registry(store)
        store.add_order("o-3", {"storeId": "store-1"})

        assert resolver.resolve("o-3").customer_tokens == []

    def test_customer_skipped_when_entry_missing(self, resolver, store):
        store.add_order("o-4", {"customerUid": "ghost"})

        assert resolver.resolve("o-4").customer_tokens == []

    def test_entries_without_usable_token_dropped(self, resolver, store):
        store.add_token_entry("admin-1", {"role": "admin"})
        store.add_token_entry("admin-2", {"role": "admin", "expoToken": ""})
        store.add_token_entry("admin-3", {"role": "admin", "token": "   "})
        store.add_token_entry("admin-4", {"role": "admin", "token": "plain-token"})
        store.add_order("o-5", {})

        assert resolver.resolve("o-5").admin_tokens == ["plain-token"]

    def test_same_token_across_roles_not_deduplicated(self, resolver, store):
        store.add_token_entry("admin-1", {"role": "admin", "deviceToken": ADMIN_TOKEN})
        store.add_token_entry("owner-1", {"role": "owner", "ownerStoreId": "s", "deviceToken": ADMIN_TOKEN})
        store.add_order("o-6", {"storeId": "s"})

        tokens = resolver.resolve("o-6")

        assert tokens.admin_tokens == [ADMIN_TOKEN]
        assert tokens.owner_tokens == [ADMIN_TOKEN]

    def test_store_failure_propagates(self, resolver, store):
        store.configure(should_succeed=False, failure_reason="firestore down")
        with pytest.raises(RuntimeError, match="firestore down"):
            resolver.resolve("o-1")
