"""Analytics service - main entry point for the expanded analytics view."""

import logging
import random
from datetime import date
from typing import Callable, Optional

from forge_analytics.analytics.models import AnalyticsBundle, MetricRecord
from forge_analytics.analytics.store import ProjectStore
from forge_analytics.analytics.calculators.kpi import KPICalculator
from forge_analytics.analytics.calculators.builder import ChartSpecBuilder
from forge_analytics.errors import ProjectNotFoundError
from forge_analytics.utils.logger import log_call

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Builds KPI and chart bundles for projects in the store."""

    def __init__(
        self,
        store: ProjectStore,
        seed: Optional[int] = None,
        today: Optional[Callable[[], date]] = None
    ):
        """
        Initialize analytics service.

        Args:
            store: Current project collection (read only)
            seed: Seed for synthetic values; every bundle is reproducible when set
            today: Clock for the daily trend axis (defaults to date.today)
        """
        self.store = store
        self.seed = seed
        self._today = today or date.today

    def _new_rng(self) -> random.Random:
        return random.Random(self.seed)

    @log_call
    def open(self, project_id: str, rng: Optional[random.Random] = None) -> AnalyticsBundle:
        """
        Build the analytics bundle for one project.

        Args:
            project_id: Project identifier
            rng: Random source for synthetic values (a fresh one per call by default)

        Returns:
            AnalyticsBundle with KPIs and the five chart specs

        Raises:
            ProjectNotFoundError: project_id is not in the current collection
        """
        record = self.store.get(project_id)
        if record is None:
            logger.info(f"Analytics requested for unknown project {project_id}")
            raise ProjectNotFoundError(project_id)

        return self.build_bundle(record, rng or self._new_rng())

    def build_bundle(self, record: MetricRecord, rng: random.Random) -> AnalyticsBundle:
        """Derive KPIs and charts for a record with all randomness drawn from rng"""
        builder = ChartSpecBuilder.from_rng(rng, today=self._today())

        kpis = KPICalculator.calculate(record, builder.placeholders)
        charts = builder.build(record)

        logger.debug(
            f"Built analytics for project {record.id}: "
            f"{len(kpis)} KPIs, {len(charts)} charts"
        )

        return AnalyticsBundle(
            project_id=record.id,
            project_name=record.project_name,
            kpis=kpis,
            charts=charts,
        )
