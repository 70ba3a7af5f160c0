"""
Performance overview calculator.

Twelve months of synthesized revenue (line) and users (bar) sharing a month
axis. Revenue and user counts differ by orders of magnitude, so each series
gets its own linear value axis.
"""

from forge_analytics.analytics.models import (
    ChartAxis, ChartSeries, ChartSpec, ChartType, MetricRecord, ScaleType
)
from forge_analytics.analytics.synthetic import MONTH_LABELS, TrendSynthesizer
from forge_analytics.analytics.calculators import palette


class PerformanceCalculator:
    """Calculates the dual-axis performance overview chart"""

    KEY = "performance"
    REVENUE_AXIS = "y"
    USERS_AXIS = "y1"

    @staticmethod
    def calculate(record: MetricRecord, trends: TrendSynthesizer) -> ChartSpec:
        """
        Calculate performance overview chart.

        Args:
            record: Project metrics
            trends: Synthesizer for the monthly series

        Returns:
            ChartSpec with a Revenue line on the left axis and a Users bar
            series on the right axis
        """
        points = len(MONTH_LABELS)

        revenue_series = ChartSeries(
            name="Revenue",
            type="line",
            axis_id=PerformanceCalculator.REVENUE_AXIS,
            data=trends.synthesize(record.current_revenue, points),
            color=palette.CYAN,
            background_color=palette.CYAN_FILL,
            metadata={"tension": palette.LINE_TENSION, "fill": True}
        )

        users_series = ChartSeries(
            name="Users",
            type="bar",
            axis_id=PerformanceCalculator.USERS_AXIS,
            data=trends.synthesize(record.current_users, points),
            color=palette.VIOLET,
            background_color=palette.VIOLET_BAR,
            metadata={"border_width": 2}
        )

        return ChartSpec(
            key=PerformanceCalculator.KEY,
            chart_type=ChartType.COMBO,
            title="Performance Overview",
            labels=list(MONTH_LABELS),
            series=[revenue_series, users_series],
            axes=[
                ChartAxis(id="x", scale_type=ScaleType.CATEGORY, position="bottom"),
                ChartAxis(
                    id=PerformanceCalculator.REVENUE_AXIS,
                    scale_type=ScaleType.LINEAR,
                    position="left"
                ),
                # Gridlines follow the left axis only
                ChartAxis(
                    id=PerformanceCalculator.USERS_AXIS,
                    scale_type=ScaleType.LINEAR,
                    position="right",
                    draw_on_chart_area=False
                ),
            ],
            dual_axis=True,
            options={
                "interaction": {"mode": "index", "intersect": False},
                "legend_position": "top",
                "animation_ms": palette.ANIMATION_MS,
            }
        )
