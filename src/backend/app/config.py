"""AppSettings -- Rack Estimator application configuration.

All environment variables are read via pydantic-settings. Every setting has a
default, so the service starts with an empty environment.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Rack Estimator settings, loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    APP_TITLE: str = "Rack Estimator"

    # Root log level applied at startup
    LOG_LEVEL: str = "INFO"

    # CORS headers attached to every response
    CORS_ALLOW_ORIGIN: str = "*"
    CORS_ALLOW_METHODS: str = "POST,OPTIONS"
    CORS_ALLOW_HEADERS: str = "Content-Type"
    CORS_MAX_AGE_SECONDS: int = 86400


settings = AppSettings()
