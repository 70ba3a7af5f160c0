# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""
Daily trend calculator.

Thirty days of synthesized daily revenue, daily users and conversion rate,
ending today.
"""

from datetime import date
from typing import Optional

from forge_analytics.analytics.models import (
    ChartAxis, ChartSeries, ChartSpec, ChartType, MetricRecord, ScaleType
)
from forge_analytics.analytics.synthetic import TrendSynthesizer, generate_date_labels
from forge_analytics.analytics.calculators import palette


class DailyTrendCalculator:
    """Calculates the multi-series daily time series chart"""

    KEY = "timeseries"
    DAYS = 30
    CONVERSION_VARIANCE = 0.5

    @staticmethod
    def calculate(
        record: MetricRecord,
        trends: TrendSynthesizer,
        today: Optional[date] = None
    ) -> ChartSpec:
        """
        Calculate daily trend chart.

        Args:
            record: Project metrics
            trends: Synthesizer for the daily series
            today: Last day on the axis (defaults to date.today())

        Returns:
            ChartSpec with Daily Revenue, Daily Users and Conversion Rate lines
        """
        days = DailyTrendCalculator.DAYS
        line_hints = {"tension": palette.LINE_TENSION, "fill": True}

        series = [
            ChartSeries(
                name="Daily Revenue",
                type="line",
                data=trends.synthesize(record.current_revenue / days, days),
                color=palette.CYAN,
                background_color=palette.CYAN_FILL,
                metadata=dict(line_hints)
            ),
            ChartSeries(
                name="Daily Users",
                type="line",
                data=trends.synthesize(record.current_users / days, days),
                color=palette.VIOLET,
                background_color=palette.VIOLET_FILL,
                metadata=dict(line_hints)
            ),
            ChartSeries(
                name="Conversion Rate",
                type="line",
                data=trends.synthesize(
                    record.current_conversion,
                    days,
                    variance=DailyTrendCalculator.CONVERSION_VARIANCE
                ),
                color=palette.PINK,
                background_color=palette.PINK_FILL,
                metadata=dict(line_hints)
            ),
        ]

        return ChartSpec(
            key=DailyTrendCalculator.KEY,
            chart_type=ChartType.MULTI_LINE,
            title="Daily Trend",
            labels=generate_date_labels(days, today),
            series=series,
            axes=[
                ChartAxis(id="x", scale_type=ScaleType.CATEGORY, position="bottom"),
                ChartAxis(id="y", scale_type=ScaleType.LINEAR, position="left"),
            ],
            options={
                "interaction": {"mode": "index", "intersect": False},
                "legend_position": "top",
                "animation_ms": palette.ANIMATION_MS,
            }
        )
