"""Client configuration using pydantic-settings.

Settings are opt-in: ``FogswapClient`` only reads them when passed
``settings=FogswapSettings()`` (or ``get_settings()``). No file is read.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fogswap import __version__

DEFAULT_BASE_URL = "https://api.fogswap.io/v1"
DEFAULT_USER_AGENT = f"fogswap-python/{__version__}"


class FogswapSettings(BaseSettings):
    """Client settings loaded from FOGSWAP_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="FOGSWAP_",
        extra="ignore",
    )

    base_url: str = Field(default=DEFAULT_BASE_URL, description="Fogswap API base URL")
    timeout: Optional[float] = Field(
        default=None,
        description="Request timeout in seconds (None = wait indefinitely)",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header sent with every request",
    )

    @property
    def api_root(self) -> str:
        """Base URL without a trailing slash, ready for endpoint concatenation."""
        return self.base_url.rstrip("/")


@lru_cache
def get_settings() -> FogswapSettings:
    """Get cached settings instance."""
    return FogswapSettings()
