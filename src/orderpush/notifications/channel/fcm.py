"""FCM push adapter backed by the Firebase Admin SDK."""

import structlog
from firebase_admin import exceptions as firebase_exceptions
from firebase_admin import messaging

from orderpush.errors import ProviderError
from orderpush.notifications.channel.push_port import FcmPushPort

logger = structlog.get_logger(__name__)


class FcmGateway(FcmPushPort):
    def __init__(self, app=None, android_priority: str = "high", android_channel_id: str = "default"):
        self._app = app
        self._android_priority = android_priority
        self._android_channel_id = android_channel_id

    def send_multicast(
        self,
        tokens: list[str],
        title: str,
        body: str,
        data: dict[str, str],
    ) -> dict:
        message = messaging.MulticastMessage(
            tokens=tokens,
            notification=messaging.Notification(title=title, body=body),
            data=data,
            android=messaging.AndroidConfig(
                priority=self._android_priority,
                notification=messaging.AndroidNotification(channel_id=self._android_channel_id),
            ),
        )
        try:
            response = messaging.send_each_for_multicast(message, app=self._app)
        except (firebase_exceptions.FirebaseError, ValueError) as exc:
            raise ProviderError("fcm", str(exc)) from exc

        for token, send_response in zip(tokens, response.responses):
            if not send_response.success:
                logger.warning(
                    "FCM message rejected",
                    token_prefix=token[:12],
                    error=str(send_response.exception),
                )
        return {"sent": response.success_count, "failed": response.failure_count}
