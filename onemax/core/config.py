"""
Configuration management for the OneMax genetic algorithm.

Simulation parameters come from dataclass defaults, optionally overridden by a
JSON configuration file and then by environment variables (a ``.env`` file is
honoured through python-dotenv).
"""

import os
import logging
import json
from pathlib import Path
from typing import Any, Dict, List, Optional
from dataclasses import dataclass, asdict
from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .logging import get_logger


INTEGER_FIELDS = ("genome_length", "population_size", "bottleneck_size", "max_generations")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class SimulationConfig:
    """Parameters of a single simulation run."""
    genome_length: int = 16
    population_size: int = 40
    bottleneck_size: int = 20
    max_generations: int = 10
    seed: Optional[int] = None

    def collect_errors(self) -> List[str]:
        """Return every problem with these parameters, empty when valid."""
        errors = []

        for name in INTEGER_FIELDS:
            value = getattr(self, name)
            if not _is_int(value):
                errors.append(f"{name} must be an integer, got {value!r}")
        if self.seed is not None and not _is_int(self.seed):
            errors.append(f"seed must be an integer or null, got {self.seed!r}")
        if errors:
            # Range checks below assume integers
            return errors

        if self.genome_length <= 0:
            errors.append("Genome length must be positive and greater than 0")

        if self.population_size <= 0:
            errors.append("Population size must be positive and greater than 0")
        elif self.population_size % 2:
            errors.append(f"Population size must be even, got {self.population_size}")

        if self.bottleneck_size < 0:
            errors.append("Bottleneck size cannot be negative")
        elif self.bottleneck_size % 2:
            errors.append(f"Bottleneck size must be even, got {self.bottleneck_size}")

        if self.bottleneck_size > self.population_size:
            errors.append(
                f"Bottleneck size ({self.bottleneck_size}) cannot exceed "
                f"population size ({self.population_size})"
            )

        if self.max_generations < 0:
            errors.append("Max generations cannot be negative")

        return errors

    def validate(self) -> None:
        """Raise ConfigurationError if the parameters cannot drive a run."""
        errors = self.collect_errors()
        if errors:
            raise ConfigurationError("Simulation configuration is invalid", details=errors)


@dataclass
class LoggingConfig:
    """Configuration for log output."""
    level: str = "INFO"
    log_file: str = "logs/onemax.log"
    enable_console: bool = True
    enable_file: bool = False


# Environment variable -> (section, attribute, converter)
ENV_OVERRIDES = {
    "ONEMAX_SEED": ("simulation", "seed", int),
    "ONEMAX_MAX_GENERATIONS": ("simulation", "max_generations", int),
    "ONEMAX_LOG_LEVEL": ("logging", "level", str),
}


class Config:
    """
    Main configuration class for the OneMax simulation.

    Sections are plain dataclasses; values are layered as defaults, then the
    JSON file, then environment variables.
    """

    def __init__(self, config_file: Optional[Path] = None, env_file: Optional[Path] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to JSON configuration file
            env_file: Path to .env file with environment overrides
        """
        self.logger = get_logger(__name__)

        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()

        self.simulation = SimulationConfig()
        self.logging = LoggingConfig()

        if config_file and Path(config_file).exists():
            self._load_from_file(Path(config_file))

        self._load_env_overrides()

        self._validate()

        self.logger.debug("Configuration loaded successfully")

    def _load_from_file(self, config_file: Path):
        """Load configuration from JSON file."""
        try:
            with open(config_file, 'r') as f:
                config_data = json.load(f)

            if not isinstance(config_data, dict):
                raise ValueError("top level must be a JSON object")

            for section_name, section_data in config_data.items():
                if section_name not in ("simulation", "logging"):
                    self.logger.warning(f"Ignoring unknown config section '{section_name}'")
                    continue
                if not isinstance(section_data, dict):
                    raise ValueError(f"section '{section_name}' must be a JSON object")
                section = getattr(self, section_name)
                for key, value in section_data.items():
                    if hasattr(section, key):
                        setattr(section, key, value)
                    else:
                        self.logger.warning(f"Ignoring unknown config key '{section_name}.{key}'")
        except Exception as e:
            raise ConfigurationError(f"Failed to load config file {config_file}: {str(e)}")

        self.logger.info(f"Loaded configuration from {config_file}")

    def _load_env_overrides(self):
        """Apply overrides from environment variables."""
        for env_name, (section_name, key, convert) in ENV_OVERRIDES.items():
            raw = os.getenv(env_name)
            if raw is None or raw == "":
                continue
            try:
                value = convert(raw)
            except ValueError:
                raise ConfigurationError(
                    f"Invalid value for {env_name}", details=raw
                )
            setattr(getattr(self, section_name), key, value)
            self.logger.debug(f"{section_name}.{key} overridden by {env_name}")

    def _validate(self):
        """Validate configuration settings."""
        errors = self.simulation.collect_errors()

        if not isinstance(logging.getLevelName(str(self.logging.level).upper()), int):
            errors.append(f"Unknown log level: {self.logging.level}")

        if errors:
            raise ConfigurationError("Configuration validation failed", details=errors)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "simulation": asdict(self.simulation),
            "logging": asdict(self.logging),
        }

    def save(self, config_file: Path):
        """Save configuration to JSON file."""
        try:
            config_file.parent.mkdir(parents=True, exist_ok=True)
            with open(config_file, 'w') as f:
                json.dump(self.to_dict(), f, indent=2)
            self.logger.info(f"Configuration saved to {config_file}")
        except OSError as e:
            raise ConfigurationError(f"Failed to save config file {config_file}: {str(e)}")

    def __repr__(self) -> str:
        sim = self.simulation
        return (
            f"Config(genome_length={sim.genome_length}, population_size={sim.population_size}, "
            f"bottleneck_size={sim.bottleneck_size}, max_generations={sim.max_generations}, "
            f"seed={sim.seed})"
        )


# Read by get_config(); a missing file means defaults
DEFAULT_CONFIG_FILE = Path("config") / "onemax.json"

# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """
    Get the global configuration instance, loading DEFAULT_CONFIG_FILE on
    first use.

    Returns:
        Global configuration instance
    """
    global _config
    if _config is None:
        _config = Config(config_file=DEFAULT_CONFIG_FILE)
    return _config


def set_config(config: Config):
    """
    Set the global configuration instance.

    Args:
        config: Configuration instance to set
    """
    global _config
    _config = config
