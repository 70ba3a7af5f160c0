"""
Tests for the chart calculators and the chart spec builder.
"""

import random

import pytest
from pydantic import ValidationError

from forge_analytics.analytics.calculators import (
    CHART_ORDER,
    ChartSpecBuilder,
    DailyTrendCalculator,
    GoalsCalculator,
    GrowthCalculator,
    MetricsCalculator,
    PerformanceCalculator,
)
from forge_analytics.analytics.models import ChartType, ScaleType
from forge_analytics.analytics.synthetic import TrendSynthesizer


class TestPerformanceCalculator:
    """Test dual-axis performance overview"""

    def test_dual_axis_layout(self, sample_record, rng):
        chart = PerformanceCalculator.calculate(sample_record, TrendSynthesizer(rng))

        assert chart.chart_type == ChartType.COMBO
        assert chart.dual_axis is True
        assert chart.labels[0] == "Jan"
        assert len(chart.labels) == 12

        revenue = chart.get_series("Revenue")
        users = chart.get_series("Users")
        assert revenue.type == "line"
        assert revenue.axis_id == "y"
        assert users.type == "bar"
        assert users.axis_id == "y1"
        assert len(revenue.data) == 12
        assert len(users.data) == 12

        left = chart.get_axis("y")
        right = chart.get_axis("y1")
        assert left.scale_type == ScaleType.LINEAR
        assert left.position == "left"
        assert right.scale_type == ScaleType.LINEAR
        assert right.position == "right"
        assert right.draw_on_chart_area is False
        assert chart.get_axis("x").scale_type == ScaleType.CATEGORY

    def test_series_follow_their_baselines(self, sample_record):
        """Without noise the series equal the trend envelopes"""
        trends = TrendSynthesizer(random.Random(1))
        trends.synthesize = lambda baseline, points, variance=0.3: TrendSynthesizer.envelope(
            baseline, points
        )

        chart = PerformanceCalculator.calculate(sample_record, trends)

        assert chart.get_series("Revenue").data[0] == pytest.approx(35000.0)
        assert chart.get_series("Users").data[0] == pytest.approx(140.0)


class TestGrowthCalculator:
    """Test revenue progress doughnut"""

    def test_half_way(self, sample_record):
        chart = GrowthCalculator.calculate(sample_record)

        assert chart.chart_type == ChartType.DOUGHNUT
        assert chart.labels == ["Achieved", "Remaining"]
        assert chart.series[0].data == [50.0, 50.0]

    def test_zero_target(self, zero_target_record):
        chart = GrowthCalculator.calculate(zero_target_record)

        assert chart.series[0].data == [0.0, 100.0]

    def test_overflow_clamped_into_achieved(self, record_factory):
        chart = GrowthCalculator.calculate(record_factory(current_revenue=250000))

        assert chart.series[0].data == [100.0, 0.0]

    @pytest.mark.parametrize("current,target", [
        (1, 3),
        (12345.67, 98765.43),
        (99999, 100000),
        (0, 100),
        (7, 0),
        (300, 100),
    ])
    def test_slices_sum_to_100(self, record_factory, current, target):
        chart = GrowthCalculator.calculate(
            record_factory(current_revenue=current, target_revenue=target)
        )

        achieved, remaining = chart.series[0].data
        assert achieved + remaining == 100.0
        assert 0 <= achieved <= 100
        assert 0 <= remaining <= 100

    def test_proportional_scale(self, sample_record):
        chart = GrowthCalculator.calculate(sample_record)

        assert chart.axes[0].scale_type == ScaleType.PROPORTIONAL


class TestGoalsCalculator:
    """Test goals radar"""

    def test_axes_and_series(self, sample_record, fixed_placeholders):
        chart = GoalsCalculator.calculate(sample_record, fixed_placeholders)

        assert chart.chart_type == ChartType.RADAR
        assert chart.labels == [
            "Revenue", "Users", "Conversion", "Engagement", "Retention", "Growth"
        ]
        assert chart.get_series("Target").data == [100, 100, 100, 90, 85, 80]
        assert chart.get_series("Current").data == pytest.approx(
            [50.0, 40.0, 64.0, 75.0, 80.0, 60.0]
        )
        assert chart.axes[0].scale_type == ScaleType.RADIAL
        assert chart.axes[0].max == 100

    def test_zero_targets_score_zero(self, zero_target_record, fixed_placeholders):
        chart = GoalsCalculator.calculate(zero_target_record, fixed_placeholders)

        assert chart.get_series("Current").data[:3] == [0.0, 0.0, 0.0]

    def test_scores_capped_at_100(self, record_factory, fixed_placeholders):
        record = record_factory(
            current_revenue=300000,
            current_users=5000,
            current_conversion=12.0
        )

        chart = GoalsCalculator.calculate(record, fixed_placeholders)

        assert chart.get_series("Current").data[:3] == [100.0, 100.0, 100.0]

    def test_random_axes_in_range(self, sample_record, rng):
        from forge_analytics.analytics.synthetic import PlaceholderMetrics

        data = GoalsCalculator.calculate(sample_record, PlaceholderMetrics(rng)).series[0].data

        assert 60 <= data[3] < 100
        assert 70 <= data[4] < 100
        assert 50 <= data[5] < 100


class TestMetricsCalculator:
    """Test metrics polar area"""

    def test_scaled_values(self, sample_record, fixed_placeholders):
        chart = MetricsCalculator.calculate(sample_record, fixed_placeholders)

        assert chart.chart_type == ChartType.POLAR_AREA
        assert chart.labels == ["Revenue", "Users", "Conversion", "Engagement"]
        assert chart.series[0].data == pytest.approx([50.0, 2.0, 32.0, 70.0])
        assert len(chart.series[0].background_color) == 4


class TestDailyTrendCalculator:
    """Test 30-day multi-line chart"""

    def test_series_and_labels(self, sample_record, rng, today):
        chart = DailyTrendCalculator.calculate(sample_record, TrendSynthesizer(rng), today)

        assert chart.chart_type == ChartType.MULTI_LINE
        assert len(chart.labels) == 30
        assert chart.labels[-1] == "Oct 18"
        assert [series.name for series in chart.series] == [
            "Daily Revenue", "Daily Users", "Conversion Rate"
        ]
        for series in chart.series:
            assert len(series.data) == 30
            assert all(value >= 0 for value in series.data)

    def test_daily_baselines(self, sample_record, today):
        """Revenue and users are spread over 30 days, conversion is not"""
        trends = TrendSynthesizer(random.Random(1))
        calls = []

        def record_call(baseline, points, variance=0.3):
            calls.append((baseline, points, variance))
            return TrendSynthesizer.envelope(baseline, points)

        trends.synthesize = record_call

        DailyTrendCalculator.calculate(sample_record, trends, today)

        assert calls[0][:2] == (pytest.approx(50000 / 30), 30)
        assert calls[1][:2] == (pytest.approx(200 / 30), 30)
        assert calls[2] == (3.2, 30, 0.5)


class TestChartSpecBuilder:
    """Test the full chart set"""

    def test_builds_five_charts_in_order(self, sample_record, rng, today):
        charts = ChartSpecBuilder.from_rng(rng, today=today).build(sample_record)

        assert [chart.key for chart in charts] == CHART_ORDER
        assert [chart.key for chart in charts] == [
            "performance", "growth", "goals", "metrics", "timeseries"
        ]

    def test_shape_is_stable_across_builds(self, sample_record, today):
        """Two builds differ in values but not in structure"""
        first = ChartSpecBuilder.from_rng(random.Random(1), today=today).build(sample_record)
        second = ChartSpecBuilder.from_rng(random.Random(2), today=today).build(sample_record)

        for a, b in zip(first, second):
            assert a.chart_type == b.chart_type
            assert a.labels == b.labels
            assert a.axes == b.axes
            assert a.dual_axis == b.dual_axis
            assert [s.name for s in a.series] == [s.name for s in b.series]
            assert [len(s.data) for s in a.series] == [len(s.data) for s in b.series]

        assert first[0].series[0].data != second[0].series[0].data

    def test_same_seed_same_values(self, sample_record, today):
        first = ChartSpecBuilder.from_rng(random.Random(5), today=today).build(sample_record)
        second = ChartSpecBuilder.from_rng(random.Random(5), today=today).build(sample_record)

        assert [c.model_dump() for c in first] == [c.model_dump() for c in second]

    def test_record_is_immutable(self, sample_record, rng):
        before = sample_record.model_dump()

        ChartSpecBuilder.from_rng(rng).build(sample_record)

        assert sample_record.model_dump() == before
        with pytest.raises(ValidationError):
            sample_record.current_revenue = 1
