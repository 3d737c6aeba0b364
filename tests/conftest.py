"""
Pytest configuration and common fixtures for OneMax testing.

This file contains shared fixtures and configuration that can be used
across all test modules.
"""

import pytest
import tempfile
import shutil
import json
from pathlib import Path

import numpy as np

# Add the project root to Python path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from onemax.core import Config, SimulationConfig, setup_logging
from onemax.core.logging import get_logger
from onemax.genetic import Population


def pytest_configure(config):
    for marker in ("unit", "integration", "core", "genetic", "config", "logging", "exceptions"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


@pytest.fixture(scope="session")
def test_logger():
    """Set up logging for tests."""
    setup_logging(level="DEBUG", enable_file=False, enable_console=True)
    return get_logger("test")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_dir = Path(tempfile.mkdtemp())
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep ONEMAX_* variables from the developer's shell out of the tests."""
    for name in ("ONEMAX_SEED", "ONEMAX_MAX_GENERATIONS", "ONEMAX_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def no_env_file():
    """Path to a .env file that does not exist, so no real .env is loaded."""
    return Path("nonexistent.env")


@pytest.fixture
def rng():
    """Seeded random generator."""
    return np.random.default_rng(12345)


@pytest.fixture
def small_config():
    """Small, valid simulation parameters."""
    return SimulationConfig(
        genome_length=8,
        population_size=10,
        bottleneck_size=6,
        max_generations=5,
        seed=7
    )


@pytest.fixture
def sorted_population():
    """Eight organisms of length 4, already sorted by descending fitness."""
    return Population.from_strings([
        "1111", "1110", "1101", "1100",
        "1000", "0100", "0001", "0000",
    ])


@pytest.fixture
def sample_config_data():
    """Sample configuration data for testing."""
    return {
        "simulation": {
            "genome_length": 12,
            "population_size": 30,
            "bottleneck_size": 10,
            "max_generations": 25,
            "seed": 99
        },
        "logging": {
            "level": "DEBUG",
            "enable_file": False
        }
    }


@pytest.fixture
def config_file(temp_dir, sample_config_data):
    """Create a temporary config file for testing."""
    config_path = temp_dir / "test_config.json"
    with open(config_path, 'w') as f:
        json.dump(sample_config_data, f, indent=2)
    return config_path


@pytest.fixture
def config_from_file(config_file, no_env_file):
    """Config instance loaded from the temporary config file."""
    return Config(config_file=config_file, env_file=no_env_file)
