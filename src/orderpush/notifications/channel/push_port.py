"""Push network ports — abstract interfaces for the Expo and FCM lanes."""

from abc import ABC, abstractmethod


class ExpoPushPort(ABC):
    """Abstract interface for Expo push delivery."""

    max_chunk_size: int = 100

    @abstractmethod
    def is_push_token(self, token: str) -> bool:
        """Return True when the provider accepts ``token`` as an Expo push token."""
        ...

    @abstractmethod
    def send_chunk(self, messages: list[dict]) -> dict:
        """Send up to ``max_chunk_size`` messages in one request.

        Each message has keys: to, title, body, data, sound.

        Returns:
            dict with keys: sent, failed (per-message ticket counts)

        Raises:
            ProviderError: the request as a whole failed
        """
        ...


class FcmPushPort(ABC):
    """Abstract interface for Firebase Cloud Messaging delivery."""

    @abstractmethod
    def send_multicast(
        self,
        tokens: list[str],
        title: str,
        body: str,
        data: dict[str, str],
    ) -> dict:
        """Send one notification to many registration tokens.

        Returns:
            dict with keys: sent, failed

        Raises:
            ProviderError: the multicast call failed
        """
        ...
