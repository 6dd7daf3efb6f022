"""FastAPI routes for order notifications.

Thin adapters: validate the request, hand off to the ``OrderNotifier`` and
shape the response. Errors are turned into the ``{ok, error}`` envelope by
the handlers registered in ``orderpush.app``.
"""

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool

from orderpush.errors import ValidationError
from orderpush.notifications.api.schemas import (
    ErrorResponse,
    NewOrderRequest,
    NotifyResponse,
    RecipientCounts,
    StatusChangeRequest,
)
from orderpush.notifications.notification.notifier import OrderNotifier
from orderpush.ordering.totals import TotalsOverride
from orderpush.utils.logging import add_context

router = APIRouter(
    prefix="/notify",
    tags=["notify"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


def get_notifier(request: Request) -> OrderNotifier:
    return request.app.state.services.notifier


def _as_text(value) -> str:
    """Stringify an id or status, treating falsy values (0, false, "") as missing."""
    if not value:
        return ""
    return str(value)


@router.post("/new-order", response_model=NotifyResponse)
async def notify_new_order(
    body: NewOrderRequest | None = None,
    notifier: OrderNotifier = Depends(get_notifier),
) -> NotifyResponse:
    """Push a new order to the store owners, the admins and the customer."""
    body = body or NewOrderRequest()
    order_id = _as_text(body.orderId)
    if not order_id:
        raise ValidationError("orderId required")
    add_context(order_id=order_id)

    override = TotalsOverride(
        items_total=body.itemsTotal,
        delivery_fee=body.deliveryFee,
        grand_total=body.grandTotal,
    )
    result = await run_in_threadpool(notifier.notify_new_order, order_id, override)
    return NotifyResponse(counts=RecipientCounts(**result.counts))


@router.post("/status-change", response_model=NotifyResponse)
async def notify_status_change(
    body: StatusChangeRequest | None = None,
    notifier: OrderNotifier = Depends(get_notifier),
) -> NotifyResponse:
    """Push an order status change to everyone interested in the order."""
    body = body or StatusChangeRequest()
    order_id = _as_text(body.orderId)
    status = _as_text(body.status) or _as_text(body.newStatus)
    if not order_id or not status:
        raise ValidationError("orderId + status required")
    add_context(order_id=order_id, status=status)

    result = await run_in_threadpool(notifier.notify_status_change, order_id, status)
    return NotifyResponse(counts=RecipientCounts(**result.counts))
