"""
Analytics derivation for dashboard projects.

Computes KPIs from a project's target/current metrics, synthesizes trend
series where no history exists, and assembles declarative chart specs that a
frontend chart library can render directly.
"""

from forge_analytics.analytics.models import (
    AnalyticsBundle,
    ChartAxis,
    ChartSeries,
    ChartSpec,
    ChartType,
    KPIEntry,
    KPISignal,
    KPISummary,
    MetricRecord,
    ProjectStatus,
    ScaleType,
)
from forge_analytics.analytics.store import ProjectStore, get_project_store
from forge_analytics.analytics.synthetic import PlaceholderMetrics, TrendSynthesizer
from forge_analytics.analytics.service import AnalyticsService

__all__ = [
    'AnalyticsBundle',
    'ChartAxis',
    'ChartSeries',
    'ChartSpec',
    'ChartType',
    'KPIEntry',
    'KPISignal',
    'KPISummary',
    'MetricRecord',
    'ProjectStatus',
    'ScaleType',
    'ProjectStore',
    'get_project_store',
    'PlaceholderMetrics',
    'TrendSynthesizer',
    'AnalyticsService',
]
