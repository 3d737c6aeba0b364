"""
Core functionality for the OneMax genetic algorithm.

This module contains configuration management, logging setup, and custom exceptions.
"""

from .config import Config, SimulationConfig, LoggingConfig, get_config, set_config
from .exceptions import OneMaxException, ConfigurationError
from .logging import setup_logging, get_logger

__all__ = [
    "Config",
    "SimulationConfig",
    "LoggingConfig",
    "get_config",
    "set_config",
    "OneMaxException",
    "ConfigurationError",
    "setup_logging",
    "get_logger"
]
