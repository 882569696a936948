"""translated_routes configuration settings - main aggregator."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from translated_routes.configuration.routes import TranslatedRoutesSettings


class Settings(BaseSettings):
    """Application settings.

    Aggregates the feature settings into a single configuration object.

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking
        AWS_REGION: Region used by the dynamodb cache backend

    Example:
        ```python
        from translated_routes.configuration import get_settings

        settings = get_settings()
        if settings.routes.CACHE_ENABLED:
            ttl = settings.routes.CACHE_TTL
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"
    AWS_REGION: Optional[str] = Field(default=None, alias="AWS_REGION")

    routes: TranslatedRoutesSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        if "routes" not in kwargs:
            kwargs["routes"] = TranslatedRoutesSettings()
        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings singleton.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()
