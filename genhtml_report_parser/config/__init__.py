"""
genhtml report parser settings.

Each section is a pydantic-settings model whose field defaults come from
the matching mapping in configs/config.yaml (or the file named by
GENHTML_REPORT_CONFIG). Environment variables with the section prefix
(PARSER_, DIFF_, LOGGING_) take precedence.

Usage:
    from genhtml_report_parser.config import settings

    # Name of the per-directory report document
    index_name = settings.parser.index_file_name

    # Fail fast on malformed numbers
    strict = settings.parser.strict_numbers
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from genhtml_report_parser.config._loader import CONFIG_ENV_VAR, clear_config_cache, config_path
from genhtml_report_parser.config.parser import ReportParserConfig
from genhtml_report_parser.config.diff import DiffConfig
from genhtml_report_parser.config.log import LoggingConfig


class Settings(BaseSettings):
    """
    Main settings class that combines all configuration sections.

    Usage:
        from genhtml_report_parser.config import settings

        settings.parser.listing_header_rows
        settings.diff.json_indent
        settings.logging.level
    """
    model_config = SettingsConfigDict(
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )

    parser: ReportParserConfig = Field(default_factory=ReportParserConfig)
    diff: DiffConfig = Field(default_factory=DiffConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# ===========================
# Global Settings Instance
# ===========================

settings = Settings()


# ===========================
# Public API
# ===========================

__all__ = [
    "settings",
    "Settings",
    "ReportParserConfig",
    "DiffConfig",
    "LoggingConfig",
    "clear_config_cache",
    "config_path",
    "CONFIG_ENV_VAR",
]
