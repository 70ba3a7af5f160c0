# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""In-memory project adapter, used when no database is configured."""

import logging
from typing import Iterable, List

from forge_analytics.adapters.base import BaseProjectAdapter, OperationResult
from forge_analytics.analytics.models import MetricRecord

logger = logging.getLogger(__name__)


class InMemoryProjectAdapter(BaseProjectAdapter):
    """Keeps projects in a list for the lifetime of the process."""

    def __init__(self, records: Iterable[MetricRecord] = ()):
        super().__init__()
        self._records: List[MetricRecord] = list(records)

    async def list_records(self) -> List[MetricRecord]:
        return list(self._records)

    async def create(self, record: MetricRecord) -> OperationResult:
        if any(existing.id == record.id for existing in self._records):
            return OperationResult.err(f"Project {record.id} already exists")

        self._records.append(record)
        logger.info(f"Stored project {record.id} ({record.project_name})")
        await self._notify()
        return OperationResult.ok()

    async def delete(self, record: MetricRecord) -> OperationResult:
        remaining = [existing for existing in self._records if existing.id != record.id]
        if len(remaining) == len(self._records):
            return OperationResult.err(f"Project {record.id} is not stored")

        self._records = remaining
        logger.info(f"Deleted project {record.id}")
        await self._notify()
        return OperationResult.ok()
