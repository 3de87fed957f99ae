"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables
    or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "vbank-credit"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # Config backend
    config_backend_protocol: str = "http"
    config_backend_host: str = "localhost"
    config_backend_port: int = 8085
    config_backend_api_version: str = "v1"
    config_backend_max_retries: int = 2
    config_backend_timeout: float = 5.0
    config_backend_backoff_seconds: float = 0.1

    # Bank identity
    bank_id: str = "00000000-0000-0000-0000-000000000000"
    bank_name: str = "vbank"

    # Metrics
    metrics_enabled: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def config_backend_url(self) -> str:
        """Base URL of the config backend including the API version."""
        return (
            f"{self.config_backend_protocol}://{self.config_backend_host}"
            f":{self.config_backend_port}/{self.config_backend_api_version}/"
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
