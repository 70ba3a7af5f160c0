"""
Calculators for KPIs and each analytics chart.

Each calculator implements the logic for a specific chart type,
transforming a project's metrics into chart-ready format.
"""

from forge_analytics.analytics.calculators.kpi import KPICalculator, progress_percentage
from forge_analytics.analytics.calculators.performance import PerformanceCalculator
from forge_analytics.analytics.calculators.growth import GrowthCalculator
from forge_analytics.analytics.calculators.goals import GoalsCalculator
from forge_analytics.analytics.calculators.metrics import MetricsCalculator
from forge_analytics.analytics.calculators.daily_trend import DailyTrendCalculator
from forge_analytics.analytics.calculators.builder import CHART_ORDER, ChartSpecBuilder

__all__ = [
    'KPICalculator',
    'progress_percentage',
    'PerformanceCalculator',
    'GrowthCalculator',
    'GoalsCalculator',
    'MetricsCalculator',
    'DailyTrendCalculator',
    'CHART_ORDER',
    'ChartSpecBuilder',
]
