"""
Process-scoped cache of the last-known project collection.

The persistence adapter pushes the full collection on every change; the
store swaps it in wholesale. Readers get an immutable snapshot.
"""

import logging
from functools import lru_cache
from typing import Iterable, Optional, Tuple

from forge_analytics.analytics.models import MetricRecord

logger = logging.getLogger(__name__)


class ProjectStore:
    """Holds the current project collection in display order"""

    def __init__(self, records: Iterable[MetricRecord] = ()):
        self._records: Tuple[MetricRecord, ...] = tuple(records)

    def replace(self, records: Iterable[MetricRecord]) -> None:
        """Replace the whole collection (change notification handler)"""
        self._records = tuple(records)
        logger.debug(f"Project collection replaced ({len(self._records)} records)")

    # Adapters call this on every change
    on_data_changed = replace

    def list(self) -> Tuple[MetricRecord, ...]:
        return self._records

    def get(self, project_id: str) -> Optional[MetricRecord]:
        for record in self._records:
            if record.id == project_id:
                return record
        return None

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, project_id: object) -> bool:
        return any(record.id == project_id for record in self._records)


@lru_cache()
def get_project_store() -> ProjectStore:
    """Get the process-wide project store."""
    return ProjectStore()
