"""
Configuration module for the feed finder.

Uses Pydantic Settings for type-safe configuration with environment variable support.
"""

from typing import Literal
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_USER_AGENT = "Googlebot"


class FinderConfig(BaseSettings):
    """Main feed finder configuration."""
    
    model_config = SettingsConfigDict(env_prefix="FEEDFINDER_")
    
    # Discovery defaults
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent used for robots.txt matching and page fetching",
    )
    obey_robots: bool = Field(default=True, description="Respect robots.txt rules")
    
    # HTTP settings
    request_timeout: float = Field(default=10.0, description="Request timeout in seconds")
    max_retries: int = Field(default=1, ge=0, description="Retries on transient failures")
    retry_backoff: float = Field(default=0.5, ge=0, description="Seconds to wait before a retry")
    
    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )


# Global config instance (can be overridden)
config = FinderConfig()
