"""
Configuration of the complexity estimator service.

Uses `pydantic-settings` to read the configuration from environment variables
and/or a `.env` file. Every attribute of `Settings` can be overridden by an
environment variable with the same name.

Example `.env`:
    APP_NAME=complexity_estimator
    ENV=prod
    PORT=8004
    LOG_LEVEL=warning
    CORS_ORIGINS=http://localhost:3000,http://localhost:5173
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Central configuration of the service.

    Attributes:
        APP_NAME: Service name (shown in the FastAPI docs and /health).
        ENV: Runtime environment: "dev", "prod", "test", ...
        HOST: Bind address used when run directly.
        PORT: Bind port used when run directly.
        LOG_LEVEL: Root logging level name.
        CORS_ORIGINS: Comma separated list of allowed origins, "*" for any.
    """

    APP_NAME: str = "complexity_estimator"
    ENV: str = "dev"

    HOST: str = "0.0.0.0"
    PORT: int = 8004
    LOG_LEVEL: str = "info"

    CORS_ORIGINS: str = "*"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        extra="ignore",
    )

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


# Single configuration instance used by the rest of the app
settings = Settings()
