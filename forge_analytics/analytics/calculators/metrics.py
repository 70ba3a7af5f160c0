"""
Metrics calculator.

Polar area comparing revenue, users, conversion and engagement after scaling
each to a comparable magnitude.
"""

from forge_analytics.analytics.models import (
    ChartAxis, ChartSeries, ChartSpec, ChartType, MetricRecord, ScaleType
)
from forge_analytics.analytics.synthetic import PlaceholderMetrics
from forge_analytics.analytics.calculators import palette


class MetricsCalculator:
    """Calculates the metrics polar area chart"""

    KEY = "metrics"
    LABELS = ["Revenue", "Users", "Conversion", "Engagement"]

    # Divisors/multipliers that bring each metric near the 0-100 range
    REVENUE_DIVISOR = 1000
    USERS_DIVISOR = 100
    CONVERSION_MULTIPLIER = 10

    @staticmethod
    def calculate(record: MetricRecord, placeholders: PlaceholderMetrics) -> ChartSpec:
        data = [
            record.current_revenue / MetricsCalculator.REVENUE_DIVISOR,
            record.current_users / MetricsCalculator.USERS_DIVISOR,
            record.current_conversion * MetricsCalculator.CONVERSION_MULTIPLIER,
            placeholders.polar_engagement(),
        ]

        return ChartSpec(
            key=MetricsCalculator.KEY,
            chart_type=ChartType.POLAR_AREA,
            title="Metrics",
            labels=list(MetricsCalculator.LABELS),
            series=[
                ChartSeries(
                    name="Metrics",
                    data=data,
                    color=palette.WHITE,
                    background_color=list(palette.POLAR_SLICES),
                    metadata={
                        "border_width": 2,
                        "scaling": {
                            "Revenue": f"/{MetricsCalculator.REVENUE_DIVISOR}",
                            "Users": f"/{MetricsCalculator.USERS_DIVISOR}",
                            "Conversion": f"x{MetricsCalculator.CONVERSION_MULTIPLIER}",
                        },
                    }
                )
            ],
            axes=[ChartAxis(id="r", scale_type=ScaleType.RADIAL, min=0)],
            options={
                "legend_position": "bottom",
                "animation_ms": palette.ANIMATION_MS,
            }
        )
