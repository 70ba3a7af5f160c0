# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""
Parse-and-default step for raw project form input.

Form values arrive as loosely typed strings or numbers. Numbers are read
from their leading numeric prefix ("12.5k" -> 12.5), and anything missing,
unparseable, non-finite, negative or above MAX_METRIC_VALUE falls back to
the field default, so the resulting MetricRecord is always valid.
"""

import math
import re
from datetime import datetime
from typing import Any, Mapping, Optional

from forge_analytics.analytics.models import MAX_METRIC_VALUE, MetricRecord, ProjectStatus

_FLOAT_PREFIX = re.compile(r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*([-+]?\d+)")

TEXT_FIELDS = ("project_name", "analytics_type", "data_source", "time_range", "metrics")
FLOAT_FIELDS = (
    "target_revenue", "current_revenue",
    "target_conversion", "current_conversion",
    "budget",
)
INT_FIELDS = ("target_users", "current_users")


def parse_float(value: Any, default: float = 0.0) -> float:
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, (int, float)):
        text = value
    else:
        match = _FLOAT_PREFIX.match(str(value))
        if not match:
            return default
        text = match.group(1)

    try:
        number = float(text)
    except OverflowError:
        return default

    if not math.isfinite(number) or not 0 <= number <= MAX_METRIC_VALUE:
        return default
    return number


def parse_int(value: Any, default: int = 0, minimum: int = 0) -> int:
    """Integer prefix of value; a decimal input is truncated ("12.7" -> 12)"""
    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        if not math.isfinite(value):
            return default
        number = math.trunc(value)
    else:
        match = _INT_PREFIX.match(str(value))
        if not match:
            return default
        try:
            number = int(match.group(1))
        except ValueError:
            # Digit strings past the interpreter's conversion limit
            return default

    if not minimum <= number <= MAX_METRIC_VALUE:
        return default
    return number


def parse_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def parse_metric_record(
    raw: Mapping[str, Any],
    record_id: str,
    created_at: Optional[datetime] = None
) -> MetricRecord:
    """
    Build a validated MetricRecord from raw form fields.

    Args:
        raw: Field name -> raw value; unknown keys are ignored
        record_id: Identifier for the new record
        created_at: Creation timestamp (defaults to now)

    Returns:
        MetricRecord with every numeric field defaulted and non-negative
    """
    fields: dict[str, Any] = {name: parse_text(raw.get(name)) for name in TEXT_FIELDS}
    fields.update({name: parse_float(raw.get(name)) for name in FLOAT_FIELDS})
    fields.update({name: parse_int(raw.get(name)) for name in INT_FIELDS})
    fields["team_size"] = parse_int(raw.get("team_size"), default=1, minimum=1)

    return MetricRecord(
        id=record_id,
        created_at=created_at or datetime.now(),
        status=ProjectStatus.ACTIVE,
        **fields
    )
