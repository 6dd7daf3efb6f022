"""Order notifier — turns an order event into pushes for every recipient class.

For each event: resolve recipients, render the text for each recipient
class, then dispatch owner → admin → customer, one after the other. Classes
with no tokens are skipped without touching the push networks.
"""

from dataclasses import dataclass, field

import structlog

from orderpush.notifications.notification.dispatch import DispatchResult, PushDispatcher
from orderpush.notifications.notification.types import NotificationType
from orderpush.notifications.recipient.recipient import DISPATCH_ORDER, RecipientClass, RecipientTokenSet
from orderpush.notifications.recipient.resolver import RecipientResolver
from orderpush.notifications.templates import get_template
from orderpush.ordering.totals import DEFAULT_DELIVERY_FEE, OrderTotals, TotalsOverride, compute_order_totals

logger = structlog.get_logger(__name__)


@dataclass
class NotifyResult:
    """Recipient counts plus what happened on each push lane per class."""

    counts: dict[str, int]
    dispatches: dict[str, DispatchResult] = field(default_factory=dict)
    totals: OrderTotals | None = None


class OrderNotifier:
    def __init__(
        self,
        resolver: RecipientResolver,
        dispatcher: PushDispatcher,
        default_delivery_fee: float = DEFAULT_DELIVERY_FEE,
        currency: str = "₪",
    ):
        self._resolver = resolver
        self._dispatcher = dispatcher
        self._default_delivery_fee = default_delivery_fee
        self._currency = currency

    def notify_new_order(self, order_id: str, override: TotalsOverride | None = None) -> NotifyResult:
        """Tell the store owners, the admins and the customer about a new order."""
        recipients = self._resolver.resolve(order_id)
        order = recipients.order
        totals = compute_order_totals(order, override, self._default_delivery_fee)

        customer = order.get("customer") if isinstance(order.get("customer"), dict) else {}
        context = {
            "order_id": order_id,
            "store_id": order.get("storeId"),
            "status": order.get("status"),
            "customer_name": customer.get("fullName"),
            "customer_phone": customer.get("phone"),
            "items_total": totals.items_total,
            "delivery_fee": totals.delivery_fee,
            "grand_total": totals.grand_total,
            "currency": self._currency,
        }
        data = {"type": NotificationType.NEW_ORDER.value, "orderId": order_id}

        dispatches = self._fan_out(recipients, NotificationType.NEW_ORDER.value, context, data)
        return NotifyResult(counts=recipients.counts(), dispatches=dispatches, totals=totals)

    def notify_status_change(self, order_id: str, status: str) -> NotifyResult:
        """Tell every recipient class that an order moved to ``status``."""
        recipients = self._resolver.resolve(order_id)
        context = {"order_id": order_id, "status": status}
        data = {"type": NotificationType.STATUS_CHANGE.value, "orderId": order_id, "status": status}

        dispatches = self._fan_out(recipients, NotificationType.STATUS_CHANGE.value, context, data)
        return NotifyResult(counts=recipients.counts(), dispatches=dispatches)

    def _fan_out(
        self,
        recipients: RecipientTokenSet,
        notification_type: str,
        context: dict,
        data: dict,
    ) -> dict[str, DispatchResult]:
        dispatches: dict[str, DispatchResult] = {}
        for recipient_class in DISPATCH_ORDER:
            tokens = recipients.tokens_for(recipient_class)
            if not tokens:
                continue

            rendered = get_template(notification_type, recipient_class).render(context)
            result = self._dispatcher.dispatch(tokens, rendered["title"], rendered["body"], data)
            dispatches[recipient_class.value] = result
            self._log_result(recipients.order_id, notification_type, recipient_class, result)
        return dispatches

    @staticmethod
    def _log_result(
        order_id: str,
        notification_type: str,
        recipient_class: RecipientClass,
        result: DispatchResult,
    ) -> None:
        log = logger.warning if result.failed else logger.info
        log(
            "Push dispatched",
            order_id=order_id,
            notification_type=notification_type,
            recipient_class=recipient_class.value,
            expo=result.expo.status.value,
            fcm=result.fcm.status.value,
            attempted=result.attempted,
            failed=result.failed,
        )
