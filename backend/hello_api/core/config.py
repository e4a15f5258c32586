"""Module: config."""

from importlib.metadata import PackageNotFoundError, version
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


# Version of the installed distribution; a plain source checkout reports 0.0.0.
def package_version() -> str:
    try:
        return version("hello-deployment-api")
    except PackageNotFoundError:
        return "0.0.0"


# Centralized runtime configuration loaded from environment variables.
# None of these values change what the greeting route returns.
class Settings(BaseSettings):
    # Title and version shown in the generated OpenAPI document.
    app_name: str = "Hello Deployment API"
    app_version: str = package_version()
    # Root log level applied when the application is created.
    log_level: LogLevel = "INFO"
    # Bind address used by the `hello-api` console entry point.
    host: str = "0.0.0.0"
    port: int = 8000

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value

    # Configure pydantic-settings to also load values from local .env file.
    class Config:
        env_file = ".env"


# Global settings instance imported by app modules at runtime.
settings = Settings()
