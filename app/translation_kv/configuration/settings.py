"""Configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from translation_kv.configuration.i18n import I18nSettings
from translation_kv.configuration.store import StoreSettings


class Settings(BaseSettings):
    """Main settings aggregator.

    Aggregates the domain-specific settings into a single configuration
    object:

    - **store**: Key-value store selection and connection details
    - **i18n**: Separator, escaping and deprecation warning behaviour

    Environment Variables:
        PREFIX: Environment prefix for non-production deployments
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)
        GIT_SHA: Git commit SHA for deployment tracking

    Example:
        ```python
        from translation_kv.configuration import settings

        if settings.store.TRANSLATION_STORE_BACKEND == "redis":
            # Connect to Redis...

        if settings.is_production:
            # Production-specific logic...
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"
    GIT_SHA: str = "Unknown"

    store: StoreSettings
    i18n: I18nSettings

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
        settings_map = {
            "store": StoreSettings,
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


# Create the singleton settings instance
settings = Settings()
