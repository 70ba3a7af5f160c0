"""
Chart spec builder.

Runs every chart calculator for one project and returns the specs in display
order.
"""

import random
from datetime import date
from typing import List, Optional

from forge_analytics.analytics.models import ChartSpec, MetricRecord
from forge_analytics.analytics.synthetic import PlaceholderMetrics, TrendSynthesizer
from forge_analytics.analytics.calculators.performance import PerformanceCalculator
from forge_analytics.analytics.calculators.growth import GrowthCalculator
from forge_analytics.analytics.calculators.goals import GoalsCalculator
from forge_analytics.analytics.calculators.metrics import MetricsCalculator
from forge_analytics.analytics.calculators.daily_trend import DailyTrendCalculator


CHART_ORDER = [
    PerformanceCalculator.KEY,
    GrowthCalculator.KEY,
    GoalsCalculator.KEY,
    MetricsCalculator.KEY,
    DailyTrendCalculator.KEY,
]


class ChartSpecBuilder:
    """Builds the full chart set for the analytics view"""

    def __init__(
        self,
        trends: Optional[TrendSynthesizer] = None,
        placeholders: Optional[PlaceholderMetrics] = None,
        today: Optional[date] = None
    ):
        self.trends = trends or TrendSynthesizer()
        self.placeholders = placeholders or PlaceholderMetrics()
        self.today = today

    @classmethod
    def from_rng(cls, rng: random.Random, today: Optional[date] = None) -> "ChartSpecBuilder":
        """Build with both synthetic sources drawing from one generator"""
        return cls(
            trends=TrendSynthesizer(rng),
            placeholders=PlaceholderMetrics(rng),
            today=today
        )

    def build(self, record: MetricRecord) -> List[ChartSpec]:
        """
        Build all chart specs for a project.

        Returns:
            Performance, growth, goals, metrics and daily trend specs, in
            that order
        """
        return [
            PerformanceCalculator.calculate(record, self.trends),
            GrowthCalculator.calculate(record),
            GoalsCalculator.calculate(record, self.placeholders),
            MetricsCalculator.calculate(record, self.placeholders),
            DailyTrendCalculator.calculate(record, self.trends, self.today),
        ]
