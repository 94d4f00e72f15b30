"""
Formhelper configuration using pydantic-settings.

All settings can be set via environment variables with FORMHELPER_ prefix,
or via Docker secrets in /run/secrets directory.
"""

from anystore.settings import BaseSettings
from pydantic import Field
from pydantic_settings import SettingsConfigDict


class Settings(BaseSettings):
    """
    Formhelper configuration using pydantic-settings.

    Settings are loaded from (in order of priority, highest first):
    1. Environment variables with FORMHELPER_ prefix
    2. .env file
    3. Docker secrets in /run/secrets directory
    """

    model_config = SettingsConfigDict(
        env_prefix="formhelper_",
        env_nested_delimiter="__",
        env_file=".env",
        secrets_dir="/run/secrets",
        extra="ignore",
    )

    debug: bool = Field(default=False)

    # Method override
    default_method: str = Field(default="POST")
    browser_methods: list[str] = Field(
        default_factory=lambda: ["GET", "POST"],
        description="HTTP methods a browser can submit a form with",
    )
    method_param: str = Field(default="_method")
    """Name of the hidden field carrying an overridden HTTP method"""

    # Field rendering
    accept_separator: str = Field(default=",")
