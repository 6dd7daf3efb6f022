"""Push dispatcher — fans one notification out over the Expo and FCM lanes.

Tokens are split by format: Expo tokens carry a fixed literal prefix, every
other token is treated as an FCM registration token. The two lanes are sent
one after the other and do not affect each other.

Provider failures never propagate. Each lane reports a ``LaneResult`` so
callers can tell "delivered" from "attempted but failed" without catching
anything.
"""

import json
from dataclasses import dataclass
from enum import Enum

import structlog

from orderpush.notifications.channel.push_port import ExpoPushPort, FcmPushPort

logger = structlog.get_logger(__name__)

EXPO_TOKEN_PREFIX = "ExponentPushToken["


class LaneStatus(Enum):
    SKIPPED = "skipped"
    SUCCEEDED = "succeeded"
    PARTIAL = "partial"
    FAILED = "failed"


@dataclass(frozen=True)
class LaneResult:
    """Outcome of one lane of a dispatch."""

    status: LaneStatus
    attempted: int = 0
    failed: int = 0
    dropped: int = 0
    error: str | None = None

    @classmethod
    def skipped(cls, dropped: int = 0) -> "LaneResult":
        return cls(status=LaneStatus.SKIPPED, dropped=dropped)

    @classmethod
    def from_counts(cls, attempted: int, failed: int, dropped: int = 0, error: str | None = None) -> "LaneResult":
        if failed == 0:
            status = LaneStatus.SUCCEEDED
        elif failed >= attempted:
            status = LaneStatus.FAILED
        else:
            status = LaneStatus.PARTIAL
        return cls(status=status, attempted=attempted, failed=failed, dropped=dropped, error=error)


@dataclass(frozen=True)
class DispatchResult:
    expo: LaneResult
    fcm: LaneResult

    @property
    def attempted(self) -> int:
        return self.expo.attempted + self.fcm.attempted

    @property
    def failed(self) -> int:
        return self.expo.failed + self.fcm.failed


def is_expo_token(token) -> bool:
    return isinstance(token, str) and token.startswith(EXPO_TOKEN_PREFIX)


def partition_tokens(tokens) -> tuple[list[str], list[str]]:
    """Split tokens into (expo, fcm) lanes, dropping null and blank ones."""
    expo_tokens: list[str] = []
    fcm_tokens: list[str] = []
    for token in tokens or []:
        if not isinstance(token, str) or not token.strip():
            continue
        if is_expo_token(token):
            expo_tokens.append(token)
        else:
            fcm_tokens.append(token)
    return expo_tokens, fcm_tokens


def stringify_data(data: dict | None) -> dict[str, str]:
    """FCM data payloads only carry strings; serialise everything else as JSON."""
    return {
        str(key): value if isinstance(value, str) else json.dumps(value, ensure_ascii=False, default=str)
        for key, value in (data or {}).items()
    }


class PushDispatcher:
    """Sends a notification to a flat list of tokens over both push networks."""

    def __init__(self, expo: ExpoPushPort, fcm: FcmPushPort, sound: str = "default"):
        self._expo = expo
        self._fcm = fcm
        self._sound = sound

    def dispatch(self, tokens, title: str, body: str, data: dict | None = None) -> DispatchResult:
        expo_tokens, fcm_tokens = partition_tokens(tokens)
        data = dict(data or {})

        expo_result = self._send_expo(expo_tokens, title, body, data)
        fcm_result = self._send_fcm(fcm_tokens, title, body, data)
        return DispatchResult(expo=expo_result, fcm=fcm_result)

    def _send_expo(self, tokens: list[str], title: str, body: str, data: dict) -> LaneResult:
        messages = []
        dropped = 0
        for token in tokens:
            if not self._expo.is_push_token(token):
                dropped += 1
                logger.debug("Dropping malformed Expo token", token=token)
                continue
            messages.append({"to": token, "sound": self._sound, "title": title, "body": body, "data": data})

        if not messages:
            return LaneResult.skipped(dropped=dropped)

        chunk_size = max(1, self._expo.max_chunk_size)
        failed = 0
        error = None
        for index, start in enumerate(range(0, len(messages), chunk_size)):
            chunk = messages[start : start + chunk_size]
            try:
                result = self._expo.send_chunk(chunk)
                failed += result.get("failed", 0)
            except Exception as e:
                failed += len(chunk)
                error = str(e)
                logger.error("Expo push send error", chunk=index, size=len(chunk), error=error)

        return LaneResult.from_counts(attempted=len(messages), failed=failed, dropped=dropped, error=error)

    def _send_fcm(self, tokens: list[str], title: str, body: str, data: dict) -> LaneResult:
        if not tokens:
            return LaneResult.skipped()

        try:
            result = self._fcm.send_multicast(tokens, title, body, stringify_data(data))
        except Exception as e:
            logger.error("FCM push send error", size=len(tokens), error=str(e))
            return LaneResult.from_counts(attempted=len(tokens), failed=len(tokens), error=str(e))

        return LaneResult.from_counts(attempted=len(tokens), failed=result.get("failed", 0))
