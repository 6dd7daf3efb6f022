"""Template registry — maps (notification type, recipient class) to templates.

Templates with ``recipient_class = None`` serve every recipient class.
"""

from orderpush.notifications.notification.types import NotificationType
from orderpush.notifications.recipient.recipient import RecipientClass
from orderpush.notifications.templates.new_order import (
    NewOrderAdminTemplate,
    NewOrderCustomerTemplate,
    NewOrderOwnerTemplate,
)
from orderpush.notifications.templates.status_change import StatusChangeTemplate

TEMPLATE_REGISTRY: dict[tuple[str, RecipientClass | None], type] = {
    (NotificationType.NEW_ORDER.value, RecipientClass.OWNER): NewOrderOwnerTemplate,
    (NotificationType.NEW_ORDER.value, RecipientClass.ADMIN): NewOrderAdminTemplate,
    (NotificationType.NEW_ORDER.value, RecipientClass.CUSTOMER): NewOrderCustomerTemplate,
    (NotificationType.STATUS_CHANGE.value, None): StatusChangeTemplate,
}


def get_template(notification_type: str, recipient_class: RecipientClass):
    """Look up the template for a notification type and recipient class."""
    template_cls = TEMPLATE_REGISTRY.get((notification_type, recipient_class)) or TEMPLATE_REGISTRY.get(
        (notification_type, None)
    )
    if template_cls is None:
        raise ValueError(
            f"No template registered for notification type: {notification_type} ({recipient_class.value})"
        )
    return template_cls
