"""genhtml report parsing configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from genhtml_report_parser.config._loader import load_section


def _get_config() -> dict:
    return load_section("parser")


class ReportParserConfig(BaseSettings):
    """Report parsing configuration settings."""
    model_config = SettingsConfigDict(
        env_prefix='PARSER_',
        case_sensitive=False
    )

    index_file_name: str = Field(
        default_factory=lambda: _get_config().get('index_file_name', "index.html")
    )
    # Rows at the top of the listing table that never hold entries
    listing_header_rows: int = Field(
        default_factory=lambda: _get_config().get('listing_header_rows', 2),
        ge=0,
    )
    strict_numbers: bool = Field(
        default_factory=lambda: _get_config().get('strict_numbers', False)
    )
