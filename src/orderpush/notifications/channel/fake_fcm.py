"""Fake FCM adapter — records multicast calls for testing."""

from orderpush.errors import ProviderError
from orderpush.notifications.channel.push_port import FcmPushPort


class FakeFcmGateway(FcmPushPort):
    """FCM adapter that records multicasts in memory for test assertions."""

    def __init__(self):
        self.sent_multicasts: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "FCM push delivery failed"
        self.rejected_tokens: set[str] = set()

    def configure(
        self,
        should_succeed: bool = True,
        failure_reason: str = "FCM push delivery failed",
        rejected_tokens: set[str] | None = None,
    ):
        """Configure the fake adapter behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.rejected_tokens = set(rejected_tokens or ())

    def send_multicast(
        self,
        tokens: list[str],
        title: str,
        body: str,
        data: dict[str, str],
    ) -> dict:
        if not self.should_succeed:
            raise ProviderError("fcm", self.failure_reason)

        self.sent_multicasts.append(
            {
                "tokens": list(tokens),
                "title": title,
                "body": body,
                "data": dict(data),
            }
        )
        failed = sum(1 for token in tokens if token in self.rejected_tokens)
        return {"sent": len(tokens) - failed, "failed": failed}

    def reset(self):
        """Clear recorded multicasts (useful between tests)."""
        self.sent_multicasts.clear()
        self.should_succeed = True
        self.failure_reason = "FCM push delivery failed"
        self.rejected_tokens = set()
