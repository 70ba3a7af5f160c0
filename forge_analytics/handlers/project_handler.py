# Forge Analytics Project Handler
"""
Project handler: the CRUD boundary between the API and the persistence adapter.

Raw form input is parsed into MetricRecords here, before anything reaches the
analytics core. The project store is kept current through the adapter's
change notifications rather than by the handler itself.
"""

import logging
from typing import Any, Mapping, Optional
from uuid import uuid4

from forge_analytics.adapters.base import BaseProjectAdapter, OperationResult
from forge_analytics.analytics.calculators.kpi import progress_percentage
from forge_analytics.analytics.models import MetricRecord
from forge_analytics.analytics.store import ProjectStore
from forge_analytics.errors import (
    ProjectLimitReachedError,
    ProjectNotFoundError,
    ProjectOperationError,
)
from forge_analytics.handlers.parsing import parse_metric_record
from forge_analytics.models.responses import ProjectCardResponse
from forge_analytics.utils.formatting import format_currency, format_number
from forge_analytics.utils.logger import log_call

logger = logging.getLogger(__name__)

DEFAULT_MAX_PROJECTS = 999


def generate_project_id() -> str:
    return uuid4().hex


class ProjectHandler:
    """
    Handles project listing, creation and deletion.

    Used by the API routers; the analytics service reads the same store.
    """

    def __init__(
        self,
        adapter: BaseProjectAdapter,
        store: ProjectStore,
        max_projects: int = DEFAULT_MAX_PROJECTS
    ):
        """
        Initialize Project Handler.

        Args:
            adapter: Persistence collaborator
            store: Project collection cache, replaced on every adapter notification
            max_projects: Creation is refused once the store holds this many projects
        """
        self.adapter = adapter
        self.store = store
        self.max_projects = max_projects

    async def init(self) -> OperationResult:
        """Subscribe the store to adapter change notifications."""
        result = await self.adapter.init(self.store.on_data_changed)
        if not result.is_ok:
            logger.error(f"Failed to initialize project adapter: {result.error}")
        return result

    # ==================== Queries ====================

    def list_projects(self) -> list[MetricRecord]:
        return list(self.store.list())

    def get_project(self, project_id: str) -> MetricRecord:
        record = self.store.get(project_id)
        if record is None:
            raise ProjectNotFoundError(project_id)
        return record

    def list_project_cards(self) -> list[ProjectCardResponse]:
        return [self.to_card(record) for record in self.store.list()]

    @staticmethod
    def to_card(record: MetricRecord) -> ProjectCardResponse:
        """Summarize a project for the listing grid."""
        return ProjectCardResponse(
            id=record.id,
            project_name=record.project_name,
            analytics_type=record.analytics_type,
            status=record.status.value,
            created_at=record.created_at,
            revenue_display=format_currency(record.current_revenue),
            users_display=format_number(record.current_users),
            conversion_display=f"{format_number(record.current_conversion)}%",
            budget_display=format_currency(record.budget),
            revenue_progress=round(
                progress_percentage(record.current_revenue, record.target_revenue), 1
            ),
            user_progress=round(
                progress_percentage(record.current_users, record.target_users), 1
            ),
        )

    # ==================== Mutations ====================

    @log_call
    async def create_project(
        self,
        raw: Mapping[str, Any],
        project_id: Optional[str] = None
    ) -> MetricRecord:
        """
        Parse raw form fields and store a new project.

        Raises:
            ProjectLimitReachedError: the store already holds max_projects projects
            ProjectOperationError: the adapter reported a failure
        """
        if len(self.store) >= self.max_projects:
            raise ProjectLimitReachedError(self.max_projects)

        record = parse_metric_record(raw, record_id=project_id or generate_project_id())
        result = await self.adapter.create(record)
        if not result.is_ok:
            raise ProjectOperationError("create", result.error or "")

        logger.info(f"Created project {record.id} ({record.project_name})")
        return record

    @log_call
    async def delete_project(self, project_id: str) -> MetricRecord:
        """
        Delete a project by id.

        Raises:
            ProjectNotFoundError: project_id is not in the current collection
            ProjectOperationError: the adapter reported a failure
        """
        record = self.get_project(project_id)

        result = await self.adapter.delete(record)
        if not result.is_ok:
            raise ProjectOperationError("delete", result.error or "")

        logger.info(f"Deleted project {record.id}")
        return record
