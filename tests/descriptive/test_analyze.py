"""
Tests for analyze() and AnalysisSolution.
"""

import numpy as np
import pytest

from pyfreqstats import (
    AnalysisSolution,
    analyze,
    compute_frequency_table,
    compute_summary,
    parse,
)
from pyfreqstats.core.exceptions import ValidationError


class TestAnalyze:

    def test_returns_solution(self, reference_text):
        solution = analyze(parse(reference_text))
        assert isinstance(solution, AnalysisSolution)
        assert solution.summary.n == 10
        assert len(solution.frequency_table) == 7

    def test_matches_individual_functions(self, random_integers):
        solution = analyze(random_integers, population=False)
        assert solution.summary == compute_summary(random_integers, population=False)
        assert solution.frequency_table == compute_frequency_table(random_integers)

    def test_accepts_plain_list(self, reference_values):
        solution = analyze(reference_values)
        assert solution.summary.sum == 99

    def test_rejects_empty(self):
        with pytest.raises(ValidationError, match="at least 1"):
            analyze([])

    def test_fresh_result_each_call(self, reference_values):
        a = analyze(reference_values)
        b = analyze(reference_values)
        assert a.summary == b.summary
        assert a.summary is not b.summary

    def test_sample_kept(self, reference_text):
        sample = parse(reference_text)
        assert analyze(sample).sample is sample


# ═══════════════════════════════════════════════════════════════════════
# Metadata
# ═══════════════════════════════════════════════════════════════════════


class TestMetadata:

    def test_population_info(self, reference_values):
        solution = analyze(reference_values)
        assert solution.population
        assert solution.info['method'] == 'population'
        assert solution.info['divisor'] == 10
        assert solution.info['n_distinct'] == 7
        assert solution.backend_name == 'cpu_frequency'
        assert solution.warnings == ()

    def test_sample_info(self, reference_values):
        solution = analyze(reference_values, population=False)
        assert not solution.population
        assert solution.info['method'] == 'sample'
        assert solution.info['divisor'] == 9

    def test_timing_sections(self, reference_values):
        timing = analyze(reference_values).timing
        for key in ('total_seconds', 'tabulate', 'moments', 'median', 'frequency_table'):
            assert key in timing

    def test_single_observation_sample_variance_warns(self):
        solution = analyze([3], population=False)
        assert solution.summary.variance == 0.0
        assert any("n == 1" in w for w in solution.warnings)

    def test_single_observation_population_no_warning(self):
        assert analyze([3]).warnings == ()


# ═══════════════════════════════════════════════════════════════════════
# Report
# ═══════════════════════════════════════════════════════════════════════


class TestReport:

    def test_reference_report(self, reference_text):
        text = analyze(parse(reference_text)).report()
        lines = text.splitlines()
        assert lines[0] == "Descriptive Statistics:"
        assert any(line.split() == ["Mean", "9.90"] for line in lines)
        assert any(line.split() == ["Median", "10.5"] for line in lines)
        assert any(line.split() == ["Mode", "11"] for line in lines)
        assert any(line.split() == ["Variance", "7.2900"] for line in lines)
        assert any(line.split() == ["Std.", "dev.", "2.7000"] for line in lines)
        assert "Frequency Table:" in lines
        assert any(
            line.split() == ["11", "3", "0.3000", "8", "0.8000", "30.00"]
            for line in lines
        )

    def test_integral_median_has_no_decimal(self):
        text = analyze([1, 2, 3]).report()
        assert any(line.split() == ["Median", "2"] for line in text.splitlines())

    def test_no_mode_label(self):
        text = analyze([1, 2, 3]).report()
        assert any(line.split() == ["Mode", "No", "mode"] for line in text.splitlines())

    def test_repr(self, reference_values):
        r = repr(analyze(reference_values))
        assert "n=10" in r
        assert "'population'" in r
