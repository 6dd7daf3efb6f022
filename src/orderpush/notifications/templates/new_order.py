"""New order templates — one per recipient class.

Copy is Arabic, matching the store and customer apps.
"""

from orderpush.notifications.notification.types import NotificationType
from orderpush.notifications.recipient.recipient import RecipientClass
from orderpush.notifications.templates.money import format_amount


class NewOrderOwnerTemplate:
    notification_type = NotificationType.NEW_ORDER.value
    recipient_class = RecipientClass.OWNER

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "")
        customer_name = context.get("customer_name") or "زبون"
        customer_phone = context.get("customer_phone") or ""
        return {
            "title": f"🛒 طلب جديد #{order_id}",
            "body": f"طلب جديد من: {customer_name} - {customer_phone}",
        }


class NewOrderAdminTemplate:
    notification_type = NotificationType.NEW_ORDER.value
    recipient_class = RecipientClass.ADMIN

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "")
        store_id = context.get("store_id") or "-"
        currency = context.get("currency", "₪")
        grand_total = format_amount(context.get("grand_total", 0.0), currency)
        return {
            "title": f"🛎️ طلب جديد #{order_id} (لوحة الإدارة)",
            "body": f"محل: {store_id} | الإجمالي: {grand_total}",
        }


class NewOrderCustomerTemplate:
    notification_type = NotificationType.NEW_ORDER.value
    recipient_class = RecipientClass.CUSTOMER

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "")
        currency = context.get("currency", "₪")
        items_total = format_amount(context.get("items_total", 0.0), currency)
        delivery_fee = format_amount(context.get("delivery_fee", 0.0), currency)
        grand_total = format_amount(context.get("grand_total", 0.0), currency)
        status = context.get("status") or "جديد"
        # Single line so Android shows the whole summary collapsed
        return {
            "title": f"✅ تم استلام طلبك #{order_id}",
            "body": (
                f"قيمة المشتريات: {items_total} | "
                f"أجار التوصيل: {delivery_fee} | "
                f"الإجمالي: {grand_total} | "
                f"الحالة: {status}"
            ),
        }
