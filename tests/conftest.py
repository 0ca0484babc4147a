"""
Pytest fixtures for GICS code tests.

Provides reusable test fixtures for definition tables, registries, and
environment handling.
"""

import json
import os
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

from gics_codes.config import BUNDLED_DEFINITIONS_PATH, reset_config
from gics_codes.core.gics import GICS
from gics_codes.core.registry import DefinitionRegistry, reset_registry


# --- Sample Data ---

LATEST_VERSION = "20230318"
PREVIOUS_VERSION = "20180929"

# Insertion order is deliberate: tests rely on table order being preserved.
SAMPLE_DEFINITIONS = {
    # Energy sector
    "10": {"name": "Energy"},
    "1010": {"name": "Energy"},
    "101010": {"name": "Energy Equipment & Services"},
    "10101010": {
        "name": "Oil & Gas Drilling",
        "description": "Drilling contractors or owners of drilling rigs.",
    },
    "10101020": {
        "name": "Oil & Gas Equipment & Services",
        "description": "Manufacturers of equipment and providers of oil & gas services.",
    },
    "101020": {"name": "Oil, Gas & Consumable Fuels"},
    "10102010": {
        "name": "Integrated Oil & Gas",
        "description": "Integrated oil companies engaged in exploration and refining.",
    },
    # Financials sector
    "40": {"name": "Financials"},
    "4010": {"name": "Banks"},
    "401010": {"name": "Banks"},
    "40101010": {"name": "Diversified Banks", "description": "Large, geographically diverse banks."},
    "40101015": {"name": "Regional Banks", "description": "Commercial banks with regional focus."},
    # Information Technology sector
    "45": {"name": "Information Technology"},
    "4510": {"name": "Software & Services"},
    "451030": {"name": "Software"},
    "45103010": {"name": "Application Software", "description": "Software for business use."},
}

PREVIOUS_DEFINITIONS = {
    "10": {"name": "Energy"},
    "1010": {"name": "Energy"},
    "50": {"name": "Telecommunication Services"},
    "5010": {"name": "Telecommunication Services"},
}

SECTOR_CODES = ["10", "40", "45"]


# --- Fixtures ---


@pytest.fixture(autouse=True)
def reset_singletons() -> Generator[None, None, None]:
    """Ensure cached configuration and registry never leak between tests."""
    reset_config()
    reset_registry()
    yield
    reset_config()
    reset_registry()


@pytest.fixture
def sample_registry() -> DefinitionRegistry:
    """Provide a registry with two small in-memory versions."""
    return DefinitionRegistry(
        {
            PREVIOUS_VERSION: PREVIOUS_DEFINITIONS,
            LATEST_VERSION: SAMPLE_DEFINITIONS,
        }
    )


@pytest.fixture
def make_gics(sample_registry: DefinitionRegistry) -> Callable[..., GICS]:
    """Provide a factory building GICS objects against the sample registry."""

    def _make(code=None, version=None) -> GICS:
        return GICS(code, version, registry=sample_registry)

    return _make


@pytest.fixture(scope="session")
def bundled_registry() -> DefinitionRegistry:
    """Provide a registry loaded from the tables shipped with the package."""
    return DefinitionRegistry.from_directory(BUNDLED_DEFINITIONS_PATH)


@pytest.fixture
def definitions_dir(tmp_path: Path) -> Path:
    """Provide a directory with both sample versions written as JSON tables."""
    (tmp_path / f"{LATEST_VERSION}.json").write_text(json.dumps(SAMPLE_DEFINITIONS))
    (tmp_path / f"{PREVIOUS_VERSION}.json").write_text(json.dumps(PREVIOUS_DEFINITIONS))
    (tmp_path / "README.txt").write_text("not a table")
    return tmp_path


# --- Environment Fixtures ---


@pytest.fixture
def clean_env() -> Generator[None, None, None]:
    """Ensure clean environment variables for testing."""
    original_env = {}
    env_vars = [
        "GICS_DEFINITIONS_PATH",
        "GICS_DEFAULT_VERSION",
        "GICS_LOG_LEVEL",
        "GICS_LOG_FORMAT",
        "GICS_LOG_FILE",
        "GICS_SERVICE_NAME",
        "GICS_ENVIRONMENT",
    ]

    for var in env_vars:
        original_env[var] = os.environ.get(var)
        if var in os.environ:
            del os.environ[var]

    yield

    for var, value in original_env.items():
        if value is not None:
            os.environ[var] = value
        elif var in os.environ:
            del os.environ[var]
