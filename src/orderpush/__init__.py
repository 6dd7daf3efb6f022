"""Order push fanout — push notifications for store order events.

Resolves the admins, store owners and customer interested in an order and
fans a push notification out to their devices over Expo or FCM, depending
on the token format.
"""

__version__ = "0.1.0"
