# ABOUTME: Application configuration using Pydantic Settings for environment variables
# ABOUTME: Provides type-safe access to the listing URL, fetch strategy, dataset path and logging config

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# The listing site refuses more than four simultaneous connections per client.
UPSTREAM_CONCURRENCY_CEILING = 4


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="NEWSMIRROR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore unknown environment variables
    )

    # Listing source
    base_url: str = Field(
        default="https://news.ycombinator.com/news", description="Listing resource, paginated with ?p=<page>"
    )
    user_agent: str = Field(default="newsmirror/0.1", description="User-Agent header for outbound requests")
    request_timeout: float = Field(default=30.0, gt=0, description="Per-request timeout in seconds")

    # Orchestration
    strategy: Literal["sequential", "parallel"] = Field(
        default="sequential", description="Follow load-more links one page at a time, or fetch a fixed batch"
    )
    parallel_pages: int = Field(default=4, ge=1, description="Number of pages fetched by the parallel strategy")
    max_concurrency: int = Field(
        default=UPSTREAM_CONCURRENCY_CEILING,
        ge=1,
        le=UPSTREAM_CONCURRENCY_CEILING,
        description="Simultaneous requests allowed against the listing site",
    )
    max_pages: int = Field(default=50, ge=1, description="Upper bound on pages walked by the sequential strategy")

    # Dataset
    dataset_path: Path = Field(default=Path("data.json"), description="JSON dataset written by each run")

    # Logging Configuration
    log_mode: Literal["interactive", "production"] = Field(default="interactive", description="Logging output mode")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging verbosity level"
    )

    log_file: Path | None = Field(default=None, description="Custom log file path (overrides default)")


# Global config instance - lazy loaded when first accessed
_config_instance: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance.

    Creates the config on first access, subsequent calls return the same instance.

    Returns:
        Config: The application configuration instance
    """
    global _config_instance
    if _config_instance is None:
        _config_instance = Config()
    return _config_instance


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when environment variables change at runtime.

    Returns:
        Config: A fresh configuration instance
    """
    global _config_instance
    _config_instance = Config()
    return _config_instance
