"""
Shared pytest fixtures for the genhtml report parser test suite.

This module provides common fixtures used across test modules:
- Project paths
- Configuration cache isolation

Usage:
    Fixtures are automatically discovered by pytest.
    Import them directly in test files - no explicit import needed.
"""

import pytest
from pathlib import Path
import sys

# Ensure the package is importable without installation
sys.path.insert(0, str(Path(__file__).parent.parent))

from genhtml_report_parser.config import clear_config_cache


# ===========================
# Path Fixtures
# ===========================

@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture(scope="session")
def configs_dir(project_root: Path) -> Path:
    """Return the directory holding config.yaml."""
    return project_root / "configs"


# ===========================
# Configuration Fixtures
# ===========================

@pytest.fixture
def fresh_config():
    """
    Clear the YAML cache before and after a test.

    Use in tests that construct config objects after changing the
    environment, so defaults are re-read.
    """
    clear_config_cache()
    yield
    clear_config_cache()
