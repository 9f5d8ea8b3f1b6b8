"""
YAML defaults for the settings sections.

configs/config.yaml holds one top-level mapping per settings section
(parser, diff, logging). The file is read once and cached; set
GENHTML_REPORT_CONFIG to read another file instead.

Usage:
    from genhtml_report_parser.config._loader import load_section

    parser_defaults = load_section("parser")
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

CONFIG_ENV_VAR = "GENHTML_REPORT_CONFIG"

_DEFAULT_CONFIG = Path(__file__).parent.parent.parent / "configs" / "config.yaml"


def config_path() -> Path:
    """Config file in effect: GENHTML_REPORT_CONFIG or configs/config.yaml."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else _DEFAULT_CONFIG


@lru_cache(maxsize=4)
def _read_config(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must hold a mapping of sections: {path}")
    return data


def load_section(section: str) -> dict[str, Any]:
    """
    Defaults of one settings section.

    Returns:
        A copy of the section mapping; empty when the file or the section
        is missing, so field defaults apply
    """
    return dict(_read_config(config_path()).get(section) or {})


def clear_config_cache() -> None:
    """Forget cached file contents. Useful for testing."""
    _read_config.cache_clear()
