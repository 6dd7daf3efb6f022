"""Application configuration using Pydantic Settings."""

import json
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

from orderpush.errors import ConfigurationError


class Settings(BaseSettings):
    """Service configuration loaded from environment variables (and ``.env``)."""

    host: str = "0.0.0.0"
    port: int = 3000

    environment: Literal["development", "test", "staging", "production"] = "development"
    log_level: str | None = None
    log_dir: str | None = None

    firebase_service_account_json: str | None = None
    firebase_service_account_path: str = "./serviceAccountKey.json"

    orders_collection: str = "orders"
    tokens_collection: str = "pushTokens"

    default_delivery_fee: float = 20.0
    currency_symbol: str = "₪"

    expo_sound: str = "default"
    fcm_android_priority: Literal["high", "normal"] = "high"
    fcm_android_channel_id: str = "default"

    model_config = {"case_sensitive": False, "env_file": ".env", "extra": "ignore"}

    def load_service_account(self) -> dict:
        """Return the Firebase service account as a dict.

        Inline JSON wins over the file path. The path is resolved against the
        current working directory.
        """
        if self.firebase_service_account_json:
            try:
                return json.loads(self.firebase_service_account_json)
            except json.JSONDecodeError as exc:
                raise ConfigurationError("FIREBASE_SERVICE_ACCOUNT_JSON is not valid JSON") from exc

        path = Path.cwd() / self.firebase_service_account_path
        if not path.exists():
            raise ConfigurationError(
                f"Service account file not found: {path.resolve()}. "
                "Place serviceAccountKey.json in the working directory or set FIREBASE_SERVICE_ACCOUNT_JSON."
            )
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise ConfigurationError(f"Failed to read/parse service account file {path.name} (invalid JSON).") from exc


__all__ = ["Settings"]
