"""
Configuration management using Pydantic Settings.

Ambient credentials are read from the environment ONCE, here, and then
handed to adapters as explicit objects. Adapters never call os.getenv.

Usage:
    from secretport.core.config import get_settings

    settings = get_settings()
    credentials = settings.cloudflare_credentials()
"""

from dataclasses import dataclass
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from secretport.core.constants import (
    CLOUDFLARE_API_BASE_URL,
    CLOUDFLARE_WORKERS_SECRETS_PROVIDER,
    PROVIDER_TIMEOUT_DEFAULT,
)
from secretport.core.enums import Environment

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True, slots=True, kw_only=True)
class CloudflareCredentials:
    """Credentials for the Cloudflare API.

    Attributes:
        api_key: Global API key (CLOUDFLARE_API_KEY).
        api_email: Email of the account owner (CLOUDFLARE_API_EMAIL).
        account_id: Account identifier (CLOUDFLARE_ACCOUNT_ID).
        base_url: API root, overridable for tests.
        timeout: Outbound request timeout in seconds.
    """

    api_key: str
    api_email: str
    account_id: str
    base_url: str = CLOUDFLARE_API_BASE_URL
    timeout: float = PROVIDER_TIMEOUT_DEFAULT

    def __repr__(self) -> str:
        return (
            f"CloudflareCredentials(api_email={self.api_email!r}, "
            f"account_id={self.account_id!r}, base_url={self.base_url!r})"
        )


class Settings(BaseSettings):
    """
    Application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values (only for non-sensitive config)
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Provider selection
    secrets_provider: str = Field(
        default=CLOUDFLARE_WORKERS_SECRETS_PROVIDER,
        description="Slug of the secrets provider to wire by default",
    )
    provider_timeout: float = Field(
        default=PROVIDER_TIMEOUT_DEFAULT,
        description="Timeout for outbound secrets backend calls in seconds",
    )

    # Cloudflare
    cloudflare_api_key: str = Field(
        default="",
        description="Cloudflare global API key",
    )
    cloudflare_api_email: str = Field(
        default="",
        description="Email address of the Cloudflare account owner",
    )
    cloudflare_account_id: str = Field(
        default="",
        description="Cloudflare account identifier owning the Workers",
    )
    cloudflare_api_base_url: str = Field(
        default=CLOUDFLARE_API_BASE_URL,
        description="Cloudflare API root URL",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("provider_timeout")
    @classmethod
    def validate_provider_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("provider_timeout must be positive")
        return v

    @field_validator("cloudflare_api_base_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Remove trailing slashes from URLs."""
        return v.rstrip("/")

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    def cloudflare_credentials(self) -> CloudflareCredentials:
        """Build the explicit credentials object for the Cloudflare adapter."""
        return CloudflareCredentials(
            api_key=self.cloudflare_api_key,
            api_email=self.cloudflare_api_email,
            account_id=self.cloudflare_account_id,
            base_url=self.cloudflare_api_base_url,
            timeout=self.provider_timeout,
        )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
