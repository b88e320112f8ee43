"""hotel-gate configuration via pydantic-settings."""

import warnings
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

_INSECURE_SECRET_KEY = "insecure-dev-key-change-me"


class HotelGateSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="HOTELGATE_")

    environment: str = "development"
    secret_key: str = _INSECURE_SECRET_KEY

    # Bearer tokens
    token_max_age: int = 86400  # seconds

    # Database
    db_url: str = "sqlite+aiosqlite:///./data/hotelgate.db"

    # API
    api_title: str = "hotel-gate"
    api_version: str = "0.1.0"
    host: str = "0.0.0.0"
    port: int = 8080
    api_prefix: str = ""
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Logging
    log_level: str = "INFO"

    def validate_for_production(self) -> None:
        """Raise if the insecure default secret is used outside development."""
        if self.secret_key != _INSECURE_SECRET_KEY:
            return

        if self.environment != "development":
            raise RuntimeError(
                f"Insecure default secret key detected in '{self.environment}' environment. "
                "Set HOTELGATE_SECRET_KEY to a secure value. "
                "Generate one with: python -c \"import secrets; print(secrets.token_urlsafe(48))\""
            )

        warnings.warn(
            "Using insecure default secret key; set HOTELGATE_SECRET_KEY for production",
            UserWarning,
            stacklevel=2,
        )


@lru_cache
def get_settings() -> HotelGateSettings:
    settings = HotelGateSettings()
    settings.validate_for_production()
    return settings
