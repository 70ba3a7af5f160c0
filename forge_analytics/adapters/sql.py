# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""SQLAlchemy-backed project adapter."""

import logging
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from forge_analytics.adapters.base import BaseProjectAdapter, OperationResult
from forge_analytics.analytics.models import MetricRecord
from forge_analytics.database.models import AnalyticsProject

logger = logging.getLogger(__name__)


class SqlProjectAdapter(BaseProjectAdapter):
    """Stores projects in the analytics_projects table."""

    def __init__(self, session_factory: sessionmaker):
        super().__init__()
        self.session_factory = session_factory

    async def list_records(self) -> List[MetricRecord]:
        with self.session_factory() as db:
            rows = (
                db.query(AnalyticsProject)
                .order_by(AnalyticsProject.created_at, AnalyticsProject.id)
                .all()
            )
            return [MetricRecord(**row.to_dict()) for row in rows]

    async def create(self, record: MetricRecord) -> OperationResult:
        row = record.model_dump()
        row["status"] = record.status.value

        try:
            with self.session_factory() as db:
                db.add(AnalyticsProject(**row))
                db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to store project {record.id}: {e}")
            return OperationResult.err(str(e))

        return await self._notify_changed(record)

    async def delete(self, record: MetricRecord) -> OperationResult:
        try:
            with self.session_factory() as db:
                deleted = (
                    db.query(AnalyticsProject)
                    .filter(AnalyticsProject.id == record.id)
                    .delete()
                )
                db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete project {record.id}: {e}")
            return OperationResult.err(str(e))

        if not deleted:
            return OperationResult.err(f"Project {record.id} is not stored")

        return await self._notify_changed(record)

    async def _notify_changed(self, record: MetricRecord) -> OperationResult:
        """Push the committed collection; a failed reload is reported like a failed write"""
        try:
            await self._notify()
        except SQLAlchemyError as e:
            logger.error(f"Project {record.id} committed but reloading projects failed: {e}")
            return OperationResult.err(str(e))
        return OperationResult.ok()
