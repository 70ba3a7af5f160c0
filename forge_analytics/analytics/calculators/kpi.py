"""
KPI calculator.

Derives the five KPI cards shown at the top of the analytics view from a
project's target/current metric pairs.
"""

from typing import Optional

from forge_analytics.analytics.models import (
    KPIEntry, KPISignal, KPISummary, MetricRecord
)
from forge_analytics.analytics.synthetic import PlaceholderMetrics
from forge_analytics.utils.formatting import (
    format_currency, format_number, format_percent
)


def progress_percentage(current: float, target: float) -> float:
    """Percent of target reached; a zero target counts as 0% rather than dividing by zero"""
    if target <= 0:
        return 0.0
    return float(current) / float(target) * 100


def _signal(favorable: bool) -> KPISignal:
    return KPISignal.FAVORABLE if favorable else KPISignal.UNFAVORABLE


class KPICalculator:
    """Calculates the KPI summary for one project"""

    BUDGET_ALERT_THRESHOLD = 80.0  # Utilization at or above this is unfavorable

    @staticmethod
    def calculate(
        record: MetricRecord,
        placeholders: Optional[PlaceholderMetrics] = None
    ) -> KPISummary:
        """
        Calculate KPI entries in display order.

        Args:
            record: Project metrics
            placeholders: Source for the budget utilization and active-today
                values, which projects do not record

        Returns:
            KPISummary with revenue, users, conversion, budget and team entries
        """
        placeholders = placeholders or PlaceholderMetrics()

        return KPISummary(entries=[
            KPICalculator._revenue(record),
            KPICalculator._users(record),
            KPICalculator._conversion(record),
            KPICalculator._budget(record, placeholders),
            KPICalculator._team(record, placeholders),
        ])

    @staticmethod
    def _revenue(record: MetricRecord) -> KPIEntry:
        progress = progress_percentage(record.current_revenue, record.target_revenue)
        return KPIEntry(
            key="revenue",
            label="Current Revenue",
            value=record.current_revenue,
            display_value=format_currency(record.current_revenue),
            change_text=f"{format_percent(progress)} of target",
            signal=_signal(progress >= 100),
            progress=round(progress, 1),
        )

    @staticmethod
    def _users(record: MetricRecord) -> KPIEntry:
        progress = progress_percentage(record.current_users, record.target_users)
        return KPIEntry(
            key="users",
            label="Active Users",
            value=record.current_users,
            display_value=format_number(record.current_users),
            change_text=f"{format_percent(progress)} of target",
            signal=_signal(progress >= 100),
            progress=round(progress, 1),
        )

    @staticmethod
    def _conversion(record: MetricRecord) -> KPIEntry:
        delta = record.current_conversion - record.target_conversion
        return KPIEntry(
            key="conversion",
            label="Conversion Rate",
            value=record.current_conversion,
            display_value=f"{format_number(record.current_conversion)}%",
            change_text=f"{format_percent(delta, signed=True)} vs target",
            signal=_signal(delta >= 0),
            delta=round(delta, 1),
        )

    @staticmethod
    def _budget(record: MetricRecord, placeholders: PlaceholderMetrics) -> KPIEntry:
        utilization = placeholders.budget_utilization() if record.budget > 0 else 0.0
        spent = record.budget * utilization / 100
        return KPIEntry(
            key="budget",
            label="Budget Used",
            value=utilization,
            display_value=format_percent(utilization),
            change_text=f"{format_currency(round(spent, 2))} spent",
            signal=_signal(utilization < KPICalculator.BUDGET_ALERT_THRESHOLD),
            progress=round(utilization, 1),
            metadata={"spent": round(spent, 2), "budget": record.budget, "synthetic": True},
        )

    @staticmethod
    def _team(record: MetricRecord, placeholders: PlaceholderMetrics) -> KPIEntry:
        active_today = placeholders.active_today()
        return KPIEntry(
            key="team",
            label="Team Members",
            value=record.team_size,
            display_value=str(record.team_size),
            change_text=f"{active_today} active today",
            signal=KPISignal.FAVORABLE,
            metadata={"active_today": active_today, "synthetic": True},
        )
