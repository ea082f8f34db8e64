"""
Configuration Management

Uses Pydantic Settings for environment-based configuration.
Loads from .env file automatically.

The settings object is frozen: it is built once at startup and handed to
the components that need it (orchestrator, DataForSEO client, API).
"""

from typing import Optional
from functools import lru_cache
from pydantic_settings import BaseSettings


# DataForSEO locale used for every SERP task
SERP_LOCATION_CODE = 2840  # United States
SERP_LANGUAGE_CODE = "en"
SERP_DEVICE = "desktop"


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # DataForSEO (Optional - missing credentials disable the real data path)
    DATAFORSEO_LOGIN: Optional[str] = None
    DATAFORSEO_PASSWORD: Optional[str] = None
    DATAFORSEO_BASE_URL: str = "https://api.dataforseo.com/v3"

    # Seconds to wait between task_post and task_get
    SERP_TASK_WAIT_SECONDS: float = 5.0

    # Limits
    MAX_KEYWORDS: int = 5
    MAX_REAL_ANALYSES: int = 3  # Cost control: live SERP lookups per request

    # Timeouts
    API_TIMEOUT: float = 60.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # Ignore extra fields in .env file
        case_sensitive = False  # Allow both UPPERCASE and lowercase
        frozen = True

    @property
    def has_dataforseo_credentials(self) -> bool:
        """Both halves of the DataForSEO credential pair are present."""
        return bool(self.DATAFORSEO_LOGIN and self.DATAFORSEO_PASSWORD)


@lru_cache
def get_settings() -> Settings:
    """Get or create cached settings instance."""
    return Settings()
