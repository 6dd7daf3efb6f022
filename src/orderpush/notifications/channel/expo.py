"""Expo push adapter backed by ``exponent_server_sdk``."""

import requests
import structlog
from exponent_server_sdk import PushClient, PushMessage, PushServerError

from orderpush.errors import ProviderError
from orderpush.notifications.channel.push_port import ExpoPushPort

logger = structlog.get_logger(__name__)


class ExpoGateway(ExpoPushPort):
    def __init__(self, client: PushClient | None = None):
        self._client = client or PushClient()
        self.max_chunk_size = getattr(self._client, "max_message_count", PushClient.DEFAULT_MAX_MESSAGE_COUNT)

    def is_push_token(self, token: str) -> bool:
        return PushClient.is_exponent_push_token(token)

    def send_chunk(self, messages: list[dict]) -> dict:
        push_messages = [
            PushMessage(
                to=message["to"],
                title=message.get("title"),
                body=message.get("body"),
                data=message.get("data"),
                sound=message.get("sound"),
            )
            for message in messages
        ]
        try:
            tickets = self._client.publish_multiple(push_messages)
        except (PushServerError, requests.exceptions.RequestException) as exc:
            raise ProviderError("expo", str(exc)) from exc

        failed = 0
        for ticket in tickets:
            if not ticket.is_success():
                failed += 1
                logger.warning(
                    "Expo push ticket rejected",
                    token=ticket.push_message.to,
                    message=ticket.message,
                    details=ticket.details,
                )
        return {"sent": len(tickets) - failed, "failed": failed}

    def close(self) -> None:
        session = getattr(self._client, "session", None)
        if session is not None:
            session.close()
