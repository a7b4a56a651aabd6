"""Client configuration using pydantic-settings."""

from typing import Optional

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.eversend.co/v1"
DEFAULT_TIMEOUT = 30.0


class EversendSettings(BaseSettings):
    """Client settings loaded from ``EVERSEND_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="EVERSEND_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    CLIENT_ID: str
    CLIENT_SECRET: SecretStr
    BASE_URL: str = DEFAULT_BASE_URL
    TIMEOUT: float = DEFAULT_TIMEOUT

    # Connection-level retries performed by the httpx transport
    MAX_RETRIES: int = 0

    # Pre-issued token, skips the first credential exchange
    API_TOKEN: Optional[SecretStr] = None
