"""
OneMax - a minimal generational genetic algorithm

Evolves fixed-length bit strings toward all ones using truncation selection,
random pairing and single-point crossover.
"""

__version__ = "0.1.0"

from .core.config import Config, SimulationConfig
from .core.exceptions import ConfigurationError
from .core.logging import setup_logging
from .genetic import Organism, Population, Simulation, SimulationResult, run_simulation
from .reporting import render_report

__all__ = [
    "Config",
    "SimulationConfig",
    "ConfigurationError",
    "setup_logging",
    "Organism",
    "Population",
    "Simulation",
    "SimulationResult",
    "run_simulation",
    "render_report"
]
