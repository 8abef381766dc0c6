"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic import SecretStr
from pydantic_settings import BaseSettings

from loriapi.constants import DEFAULT_BASE_URL, DEFAULT_USER_AGENT


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


class ClientConfig(BaseSettings):
    """Configuration for the Loritta API client."""

    # Credentials
    api_key: SecretStr | None = None

    # HTTP settings
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float | None = None
    user_agent: str = DEFAULT_USER_AGENT

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = {
        "env_prefix": "LORIAPI_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }
