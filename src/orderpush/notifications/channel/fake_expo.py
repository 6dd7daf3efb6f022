"""Fake Expo adapter — records sent chunks for testing."""

import re

from orderpush.errors import ProviderError
from orderpush.notifications.channel.push_port import ExpoPushPort

_EXPO_TOKEN = re.compile(r"^Expo(nent)?PushToken\[.+\]$")


class FakeExpoGateway(ExpoPushPort):
    """Expo adapter that records chunks in memory for test assertions."""

    def __init__(self, max_chunk_size: int = 100):
        self.max_chunk_size = max_chunk_size
        self.sent_chunks: list[list[dict]] = []
        self.should_succeed = True
        self.failure_reason = "Expo push delivery failed"
        self.failing_chunks: set[int] = set()
        self.rejected_tokens: set[str] = set()
        self._calls = 0

    def configure(
        self,
        should_succeed: bool = True,
        failure_reason: str = "Expo push delivery failed",
        failing_chunks: set[int] | None = None,
        rejected_tokens: set[str] | None = None,
    ):
        """Configure the fake adapter behavior for testing.

        ``failing_chunks`` holds zero-based call indexes that raise;
        ``rejected_tokens`` come back as failed tickets.
        """
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason
        self.failing_chunks = set(failing_chunks or ())
        self.rejected_tokens = set(rejected_tokens or ())

    @property
    def sent_messages(self) -> list[dict]:
        return [message for chunk in self.sent_chunks for message in chunk]

    def is_push_token(self, token: str) -> bool:
        return isinstance(token, str) and bool(_EXPO_TOKEN.match(token))

    def send_chunk(self, messages: list[dict]) -> dict:
        call = self._calls
        self._calls += 1
        if not self.should_succeed or call in self.failing_chunks:
            raise ProviderError("expo", self.failure_reason)

        self.sent_chunks.append(list(messages))
        failed = sum(1 for message in messages if message["to"] in self.rejected_tokens)
        return {"sent": len(messages) - failed, "failed": failed}

    def reset(self):
        """Clear sent chunks (useful between tests)."""
        self.sent_chunks.clear()
        self.should_succeed = True
        self.failure_reason = "Expo push delivery failed"
        self.failing_chunks = set()
        self.rejected_tokens = set()
        self._calls = 0
