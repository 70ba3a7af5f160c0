"""
Growth calculator.

Doughnut of revenue achieved against the revenue target.
"""

from typing import List

from forge_analytics.analytics.models import (
    ChartAxis, ChartSeries, ChartSpec, ChartType, MetricRecord, ScaleType
)
from forge_analytics.analytics.calculators import palette
from forge_analytics.analytics.calculators.kpi import progress_percentage


class GrowthCalculator:
    """Calculates the revenue progress doughnut"""

    KEY = "growth"
    LABELS = ["Achieved", "Remaining"]

    @staticmethod
    def slices(progress: float) -> List[float]:
        """
        Split 100% into achieved and remaining slices.

        Progress beyond 100 is clamped into the Achieved slice, so the two
        slices always sum to 100.
        """
        achieved = min(max(progress, 0.0), 100.0)
        return [achieved, 100.0 - achieved]

    @staticmethod
    def calculate(record: MetricRecord) -> ChartSpec:
        """
        Calculate growth chart.

        Args:
            record: Project metrics

        Returns:
            ChartSpec with one two-slice series
        """
        progress = progress_percentage(record.current_revenue, record.target_revenue)

        return ChartSpec(
            key=GrowthCalculator.KEY,
            chart_type=ChartType.DOUGHNUT,
            title="Growth",
            labels=list(GrowthCalculator.LABELS),
            series=[
                ChartSeries(
                    name="Revenue Progress",
                    data=GrowthCalculator.slices(progress),
                    background_color=[palette.CYAN, palette.TRACK],
                    metadata={"border_width": 0}
                )
            ],
            axes=[ChartAxis(id="share", scale_type=ScaleType.PROPORTIONAL, min=0, max=100)],
            options={
                "cutout": "75%",
                "legend_position": "bottom",
                "animation_ms": palette.ANIMATION_MS,
                "progress": round(progress, 1),
            }
        )
