"""Push channel adapters — Expo and FCM delivery behind small ports.

Real adapters wrap the provider SDKs; the fake adapters record traffic in
memory so the rest of the service can be exercised without credentials.
"""

from orderpush.notifications.channel.push_port import ExpoPushPort, FcmPushPort

__all__ = ["ExpoPushPort", "FcmPushPort"]
