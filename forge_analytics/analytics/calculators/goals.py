"""
Goals calculator.

Radar of six goal dimensions, current against target. Revenue, users and
conversion come from the project; engagement, retention and growth are not
recorded and are drawn from the placeholder source.
"""

from typing import List

from forge_analytics.analytics.models import (
    ChartAxis, ChartSeries, ChartSpec, ChartType, MetricRecord, ScaleType
)
from forge_analytics.analytics.synthetic import PlaceholderMetrics
from forge_analytics.analytics.calculators import palette
from forge_analytics.analytics.calculators.kpi import progress_percentage


class GoalsCalculator:
    """Calculates the goals radar chart"""

    KEY = "goals"
    LABELS = ["Revenue", "Users", "Conversion", "Engagement", "Retention", "Growth"]
    TARGETS = [100.0, 100.0, 100.0, 90.0, 85.0, 80.0]

    @staticmethod
    def current_values(record: MetricRecord, placeholders: PlaceholderMetrics) -> List[float]:
        """Current score per axis, each capped at 100"""
        measured = [
            progress_percentage(record.current_revenue, record.target_revenue),
            progress_percentage(record.current_users, record.target_users),
            progress_percentage(record.current_conversion, record.target_conversion),
        ]
        return [min(value, 100.0) for value in measured] + [
            placeholders.engagement(),
            placeholders.retention(),
            placeholders.growth(),
        ]

    @staticmethod
    def calculate(record: MetricRecord, placeholders: PlaceholderMetrics) -> ChartSpec:
        """
        Calculate goals chart.

        Returns:
            ChartSpec with "Current" and "Target" series over six axes
        """
        current_series = ChartSeries(
            name="Current",
            data=GoalsCalculator.current_values(record, placeholders),
            color=palette.CYAN,
            background_color=palette.CYAN_AREA,
            metadata={"point_color": palette.CYAN, "synthetic_points": [3, 4, 5]}
        )

        target_series = ChartSeries(
            name="Target",
            data=list(GoalsCalculator.TARGETS),
            color=palette.VIOLET,
            background_color=palette.VIOLET_FILL,
            metadata={"point_color": palette.VIOLET}
        )

        return ChartSpec(
            key=GoalsCalculator.KEY,
            chart_type=ChartType.RADAR,
            title="Goals",
            labels=list(GoalsCalculator.LABELS),
            series=[current_series, target_series],
            axes=[ChartAxis(id="r", scale_type=ScaleType.RADIAL, min=0, max=100)],
            options={
                "legend_position": "top",
                "animation_ms": palette.ANIMATION_MS,
            }
        )
