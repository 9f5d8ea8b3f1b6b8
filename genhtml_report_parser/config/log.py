"""Logging configuration for the command line entry point."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from genhtml_report_parser.config._loader import load_section


def _get_config() -> dict:
    return load_section("logging")


class LoggingConfig(BaseSettings):
    """Logging configuration settings."""
    model_config = SettingsConfigDict(
        env_prefix='LOGGING_',
        case_sensitive=False
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default_factory=lambda: _get_config().get('level', "INFO")
    )
    format: str = Field(
        default_factory=lambda: _get_config().get(
            'format', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
    )
