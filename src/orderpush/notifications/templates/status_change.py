"""Status change template — the same text goes to every recipient class."""

from orderpush.notifications.notification.types import NotificationType


class StatusChangeTemplate:
    notification_type = NotificationType.STATUS_CHANGE.value
    recipient_class = None

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "")
        status = context.get("status", "")
        return {
            "title": "🔄 تحديث حالة الطلب",
            "body": f"رقم الطلب: {order_id} | الحالة الجديدة: {status}",
        }
