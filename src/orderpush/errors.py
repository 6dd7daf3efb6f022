"""Error taxonomy for the order push service.

Each error carries the message returned to HTTP clients in the
``{"ok": false, "error": ...}`` envelope. ``status_code`` is the HTTP status
the API layer maps the error to.
"""


class OrderPushError(Exception):
    """Base class for all service errors."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(OrderPushError):
    """Service credentials are missing or malformed. Fatal at startup."""


class ValidationError(OrderPushError):
    """A required request field is missing."""

    status_code = 400


class NotFoundError(OrderPushError):
    """The requested order does not exist."""

    status_code = 404


class ProviderError(OrderPushError):
    """A push network call failed.

    Raised by gateways and always caught by the dispatcher; it never reaches
    an HTTP client.
    """

    def __init__(self, provider: str, message: str):
        super().__init__(f"{provider}: {message}")
        self.provider = provider
