"""
Tests for synthetic trend and placeholder generation.
"""

import random
from datetime import date

import pytest

from forge_analytics.analytics.synthetic import (
    MONTH_LABELS,
    PlaceholderMetrics,
    TrendSynthesizer,
    generate_date_labels,
)


class TestTrendSynthesizer:
    """Test trend series synthesis"""

    @pytest.mark.parametrize("baseline,points,variance", [
        (50000, 12, 0.3),
        (200, 30, 0.3),
        (3.2, 30, 0.5),
        (0, 5, 0.3),
        (100, 1, 0.3),
        (10, 20, 5.0),  # Noise large enough to go negative before clamping
    ])
    def test_length_and_non_negative(self, baseline, points, variance):
        """Series has exactly `points` values, none negative"""
        series = TrendSynthesizer(random.Random(3)).synthesize(baseline, points, variance)

        assert len(series) == points
        assert all(value >= 0 for value in series)

    def test_envelope_ramps_from_70_to_130_percent(self):
        """Noise-free trend ramps linearly across the series"""
        envelope = TrendSynthesizer.envelope(100, 4)

        assert envelope == pytest.approx([70.0, 85.0, 100.0, 115.0])

    def test_envelope_is_deterministic(self):
        assert TrendSynthesizer.envelope(1234.5, 12) == TrendSynthesizer.envelope(1234.5, 12)

    def test_noise_is_bounded_by_variance(self):
        """Each point stays within half the variance band around the trend"""
        baseline, points, variance = 100.0, 50, 0.3
        series = TrendSynthesizer(random.Random(11)).synthesize(baseline, points, variance)
        envelope = TrendSynthesizer.envelope(baseline, points)

        for value, trend in zip(series, envelope):
            assert abs(value - trend) <= variance * baseline / 2

    def test_zero_variance_matches_envelope(self):
        series = TrendSynthesizer(random.Random(5)).synthesize(80, 10, variance=0)

        assert series == pytest.approx(TrendSynthesizer.envelope(80, 10))

    def test_seeded_generators_repeat(self):
        """Same seed gives the same series"""
        first = TrendSynthesizer(random.Random(42)).synthesize(1000, 12)
        second = TrendSynthesizer(random.Random(42)).synthesize(1000, 12)

        assert first == second

    def test_fresh_noise_each_call(self):
        trends = TrendSynthesizer(random.Random(42))

        assert trends.synthesize(1000, 12) != trends.synthesize(1000, 12)

    def test_zero_points_rejected(self):
        with pytest.raises(ValueError):
            TrendSynthesizer().synthesize(100, 0)


class TestPlaceholderMetrics:
    """Test bounded placeholder values"""

    def test_values_stay_in_range(self):
        placeholders = PlaceholderMetrics(random.Random(9))

        for _ in range(500):
            assert 20 <= placeholders.budget_utilization() < 90
            assert 60 <= placeholders.engagement() < 100
            assert 70 <= placeholders.retention() < 100
            assert 50 <= placeholders.growth() < 100
            assert 50 <= placeholders.polar_engagement() < 100
            assert placeholders.active_today() in {1, 2, 3, 4, 5}

    def test_seeded_values_repeat(self):
        first = PlaceholderMetrics(random.Random(8))
        second = PlaceholderMetrics(random.Random(8))

        assert first.budget_utilization() == second.budget_utilization()
        assert first.active_today() == second.active_today()


class TestDateLabels:
    """Test daily axis labels"""

    def test_thirty_days_ending_today(self):
        labels = generate_date_labels(30, today=date(2026, 10, 18))

        assert len(labels) == 30
        assert labels[0] == "Sep 19"
        assert labels[-1] == "Oct 18"

    def test_labels_cross_year_boundary(self):
        labels = generate_date_labels(3, today=date(2026, 1, 1))

        assert labels == ["Dec 30", "Dec 31", "Jan 1"]

    def test_month_labels(self):
        assert len(MONTH_LABELS) == 12
        assert MONTH_LABELS[0] == "Jan"
        assert MONTH_LABELS[-1] == "Dec"
