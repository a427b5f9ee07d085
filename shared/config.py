"""
Shared configuration management for the Alpha Monitor services.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


BINANCE_ALPHA_API = (
    "https://www.binance.com/bapi/defi/v1/public/wallet-direct/buw/wallet/cex/alpha/all/token/list"
)


class BaseConfig(BaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Environment
    env: str = Field(default="local", validation_alias="ALPHA_ENV")
    log_level: str = Field(default="info", validation_alias="ALPHA_LOG_LEVEL")

    # Upstream
    upstream_url: str = Field(
        default=BINANCE_ALPHA_API,
        validation_alias="ALPHA_UPSTREAM_URL",
    )
    upstream_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        validation_alias="ALPHA_UPSTREAM_TIMEOUT_SECONDS",
    )

    # Cache
    cache_ttl_seconds: float = Field(
        default=30.0,
        gt=0,
        validation_alias="ALPHA_CACHE_TTL_SECONDS",
    )

    # Static page; services pick their own default when unset
    static_dir: Optional[str] = Field(
        default=None,
        validation_alias="ALPHA_STATIC_DIR",
    )


class ServiceConfig(BaseConfig):
    """Service-specific configuration."""

    service_name: str
    port: int = Field(default=3000, validation_alias="PORT")
    host: str = Field(default="0.0.0.0", validation_alias="ALPHA_HOST")


def get_config(service_name: str, **overrides) -> ServiceConfig:
    """Get configuration for a specific service.

    The port comes from the ``PORT`` environment variable unless passed
    explicitly in ``overrides``.
    """
    return ServiceConfig(service_name=service_name, **overrides)
