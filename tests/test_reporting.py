"""
Tests for text reporting of populations and runs.
"""

import pytest

from onemax.genetic.organism import Organism
from onemax.genetic.population import Population
from onemax.genetic.simulation import SimulationResult
from onemax.reporting import (
    format_organism,
    format_population,
    format_summary,
    render_report
)

pytestmark = [
    pytest.mark.unit
]


@pytest.fixture
def finished_result():
    """Result of a short, already finished run."""
    return SimulationResult(
        population=Population.from_strings(["1111", "1010", "0001", "0000"]),
        generations=3,
        best_fitness_history=[0.5, 0.75]
    )


class TestFormatting:
    """Test line formatting."""

    def test_format_organism(self):
        """Test bits followed by fitness with four decimals."""
        assert format_organism(Organism.from_string("1010")) == "1010 f=0.5000"
        assert format_organism(Organism.from_string("100")) == "100 f=0.3333"

    def test_format_population(self, finished_result):
        """Test one line per organism in slot order."""
        lines = format_population(finished_result.population).splitlines()

        assert lines == [
            "1111 f=1.0000",
            "1010 f=0.5000",
            "0001 f=0.2500",
            "0000 f=0.0000",
        ]

    def test_format_summary(self, finished_result):
        """Test per-generation best fitness and generation count."""
        assert format_summary(finished_result).splitlines() == [
            "Best fitness: 0.5000",
            "Best fitness: 0.7500",
            "Generations: 3",
        ]


class TestRenderReport:
    """Test the full report layout."""

    def test_layout(self, finished_result):
        """Test progress lines, then population, then generation count."""
        lines = render_report(finished_result).splitlines()

        assert lines[:2] == ["Best fitness: 0.5000", "Best fitness: 0.7500"]
        assert lines[2:6] == [
            "1111 f=1.0000",
            "1010 f=0.5000",
            "0001 f=0.2500",
            "0000 f=0.0000",
        ]
        assert lines[-1] == "Generations: 3"

    def test_immediate_termination(self):
        """Test a run that never advanced."""
        result = SimulationResult(
            population=Population.from_strings(["11", "00"]),
            generations=1
        )

        assert render_report(result).splitlines() == ["11 f=1.0000", "00 f=0.0000", "Generations: 1"]

    def test_result_properties(self, finished_result):
        """Test derived result values."""
        assert finished_result.final_best_fitness == 1.0
        assert finished_result.converged

    def test_summary_wraps_population(self, finished_result):
        """Test that the report is the summary with the population before the count."""
        report = render_report(finished_result).splitlines()
        summary = format_summary(finished_result).splitlines()

        assert report[:len(summary) - 1] == summary[:-1]
        assert report[-1] == summary[-1]
        assert report[len(summary) - 1:-1] == format_population(finished_result.population).splitlines()
