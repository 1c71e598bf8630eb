"""Configuration management using pydantic-settings."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

DEFAULT_BASE_URL = "https://inference.prodia.com/v2"


class Settings(BaseSettings):
    """Client settings loaded from PRODIA_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PRODIA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    token: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL

    # Retry budgets
    max_errors: int = 1  # non-429 failures tolerated
    max_retries: Optional[int] = None  # 429 responses tolerated, None = unbounded

    # Transport timeout in seconds
    timeout: float = 60.0


class ClientConfig(BaseModel):
    """Immutable configuration shared by every job submitted through a client."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(..., min_length=1, repr=False, description="Bearer token")
    base_url: str = Field(DEFAULT_BASE_URL, description="Service root, without /job")
    max_errors: int = Field(1, ge=0, description="Non-429 failures tolerated")
    max_retries: Optional[int] = Field(None, ge=0, description="429 responses tolerated")

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_settings(
        cls,
        settings: Optional[Settings] = None,
        **overrides: Any,
    ) -> "ClientConfig":
        """
        Build a config from environment settings.

        Keyword overrides that are not None take precedence over the
        environment.

        Raises:
            ConfigurationError: If no token is configured
        """
        settings = settings or Settings()

        values = {
            "token": settings.token,
            "base_url": settings.base_url,
            "max_errors": settings.max_errors,
            "max_retries": settings.max_retries,
        }
        values.update({key: value for key, value in overrides.items() if value is not None})

        if not values["token"]:
            raise ConfigurationError(
                "A Prodia API token is required. "
                "Pass token=... or set the PRODIA_TOKEN environment variable."
            )

        return cls(**values)
