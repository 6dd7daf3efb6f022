from enum import Enum


class NotificationType(Enum):
    NEW_ORDER = "new_order"
    STATUS_CHANGE = "status_change"
