"""Shared BDD step definitions for order notifications."""

from pytest_bdd import given, parsers, then, when


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('no order "{order_id}" exists'))
def no_order(store, order_id):
    store.orders.pop(order_id, None)


@given(parsers.cfparse('an order "{order_id}" with no recipients'))
def order_without_recipients(store, order_id):
    store.add_order(order_id, {})


@given(parsers.cfparse('an order "{order_id}" with items total {items_total:d} and delivery fee {delivery_fee:d}'))
def order_with_totals(store, order_id, items_total, delivery_fee):
    store.add_order(order_id, {"itemsTotal": items_total, "deliveryFee": delivery_fee})


@given(parsers.cfparse('an order "{order_id}" for store "{store_id}"'))
def order_for_store(store, order_id, store_id):
    store.add_order(order_id, {"storeId": store_id})


@given(parsers.cfparse('an admin with device token "{token}"'))
def admin_with_device_token(store, token):
    store.add_token_entry(f"admin-{token}", {"role": "admin", "deviceToken": token})


@given(parsers.cfparse('an admin with Expo token "{token}"'))
def admin_with_expo_token(store, token):
    store.add_token_entry(f"admin-{token}", {"role": "admin", "expoToken": token})


@given(parsers.cfparse('an owner of store "{store_id}" with token "{token}"'))
def owner_with_token(store, store_id, token):
    store.add_token_entry(f"owner-{token}", {"role": "owner", "ownerStoreId": store_id, "token": token})


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the store app reports a new order "{order_id}"'), target_fixture="response")
def report_new_order(client, order_id):
    return client.post("/notify/new-order", json={"orderId": order_id})


@when(
    parsers.cfparse('the store app reports status "{status}" for order "{order_id}"'),
    target_fixture="response",
)
def report_status_change(client, order_id, status):
    return client.post("/notify/status-change", json={"orderId": order_id, "status": status})


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse("the response status is {status_code:d}"))
def response_status(response, status_code):
    assert response.status_code == status_code


@then(parsers.cfparse('the response error is "{error}"'))
def response_error(response, error):
    assert response.json() == {"ok": False, "error": error}


@then(parsers.cfparse("the counts are {admin:d} admin, {owner:d} owner and {customer:d} customer"))
def response_counts(response, admin, owner, customer):
    assert response.json() == {"ok": True, "counts": {"admin": admin, "owner": owner, "customer": customer}}


@then(parsers.cfparse('the admin notification body ends with "{suffix}"'))
def admin_body_suffix(fcm, suffix):
    assert fcm.sent_multicasts[-1]["body"].endswith(suffix)


@then("no push network was called")
def no_push(fcm, expo):
    assert fcm.sent_multicasts == []
    assert expo.sent_chunks == []


@then(parsers.cfparse('Expo received a push for "{token}"'))
def expo_received(expo, token):
    assert token in [message["to"] for message in expo.sent_messages]


@then(parsers.cfparse('FCM received a push for "{token}"'))
def fcm_received(fcm, token):
    assert any(token in multicast["tokens"] for multicast in fcm.sent_multicasts)
