"""Report diff configuration."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from genhtml_report_parser.config._loader import load_section


def _get_config() -> dict:
    return load_section("diff")


class DiffConfig(BaseSettings):
    """Diff computation and output settings."""
    model_config = SettingsConfigDict(
        env_prefix='DIFF_',
        case_sensitive=False
    )

    include_category_deltas: bool = Field(
        default_factory=lambda: _get_config().get('include_category_deltas', True)
    )
    json_indent: int = Field(
        default_factory=lambda: _get_config().get('json_indent', 2),
        ge=0,
    )
