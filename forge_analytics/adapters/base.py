# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""
Base Project Adapter

Defines the interface for the persistence collaborator that stores
analytics projects.
"""

from abc import ABC, abstractmethod
from typing import Callable, List, Optional

from pydantic import BaseModel

from forge_analytics.analytics.models import MetricRecord

ChangeHandler = Callable[[List[MetricRecord]], None]


class OperationResult(BaseModel):
    """Outcome of a persistence operation; failures are reported, not raised."""
    is_ok: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "OperationResult":
        return cls(is_ok=True)

    @classmethod
    def err(cls, error: str) -> "OperationResult":
        return cls(is_ok=False, error=error)


class BaseProjectAdapter(ABC):
    """
    Abstract base class for project persistence adapters.

    Adapters own storage of MetricRecords and push the full collection to the
    subscribed change handler after init and after every successful change.
    """

    def __init__(self):
        self._on_change: Optional[ChangeHandler] = None

    async def init(self, on_change: ChangeHandler) -> OperationResult:
        """
        Subscribe to collection changes.

        The handler is called immediately with the current collection.
        """
        self._on_change = on_change
        try:
            records = await self.list_records()
        except Exception as e:
            return OperationResult.err(str(e))
        on_change(records)
        return OperationResult.ok()

    async def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(await self.list_records())

    @abstractmethod
    async def list_records(self) -> List[MetricRecord]:
        """
        Fetch all stored projects.

        Returns:
            Records in display order
        """
        pass

    @abstractmethod
    async def create(self, record: MetricRecord) -> OperationResult:
        """Store a new project."""
        pass

    @abstractmethod
    async def delete(self, record: MetricRecord) -> OperationResult:
        """Remove a stored project."""
        pass
