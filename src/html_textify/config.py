"""
Application configuration management.

This module handles configuration from environment variables using Pydantic Settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Converter configuration from environment variables.

    All settings can be overridden via environment variables with the same name.
    """

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Parsing
    html_parser: str = "html5lib"  # "html5lib" | "html.parser" | "lxml"
    default_encoding: str = "utf-8"

    # Processing limits
    max_input_size_mb: int = 25

    # Rendering
    quote_wrap_width: int = Field(default=74, gt=0)
    uppercase_table_headers: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


# Global settings instance
settings = Settings()
