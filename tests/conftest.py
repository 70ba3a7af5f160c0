# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""
Pytest configuration and fixtures for all tests.

This file ensures the project root is in the Python path
so that imports work correctly for all test modules.
"""

import random
import sys
from datetime import date, datetime
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest

from forge_analytics.analytics.models import MetricRecord
from forge_analytics.analytics.synthetic import PlaceholderMetrics


TODAY = date(2026, 10, 18)


class FixedPlaceholders(PlaceholderMetrics):
    """Placeholder source returning fixed values"""

    def __init__(
        self,
        budget_utilization=45.0,
        active_today=3,
        engagement=75.0,
        retention=80.0,
        growth=60.0,
        polar_engagement=70.0
    ):
        super().__init__(random.Random(0))
        self._values = {
            "budget_utilization": budget_utilization,
            "active_today": active_today,
            "engagement": engagement,
            "retention": retention,
            "growth": growth,
            "polar_engagement": polar_engagement,
        }

    def budget_utilization(self):
        return self._values["budget_utilization"]

    def active_today(self):
        return self._values["active_today"]

    def engagement(self):
        return self._values["engagement"]

    def retention(self):
        return self._values["retention"]

    def growth(self):
        return self._values["growth"]

    def polar_engagement(self):
        return self._values["polar_engagement"]


def make_record(**overrides) -> MetricRecord:
    fields = {
        "id": "proj-1",
        "project_name": "Checkout Revamp",
        "analytics_type": "E-commerce",
        "data_source": "Web Analytics",
        "time_range": "Last 30 days",
        "metrics": "Revenue, conversion",
        "target_revenue": 100000,
        "current_revenue": 50000,
        "target_users": 500,
        "current_users": 200,
        "target_conversion": 5.0,
        "current_conversion": 3.2,
        "budget": 10000,
        "team_size": 4,
        "created_at": datetime(2026, 10, 1, 9, 30),
    }
    fields.update(overrides)
    return MetricRecord(**fields)


@pytest.fixture
def project_root_path():
    """Return the project root path."""
    return project_root


@pytest.fixture
def sample_record():
    """Half-way-to-target project"""
    return make_record()


@pytest.fixture
def zero_target_record():
    """Project with no targets set"""
    return make_record(
        id="proj-zero",
        target_revenue=0,
        target_users=0,
        target_conversion=0,
    )


@pytest.fixture
def fixed_placeholders():
    return FixedPlaceholders()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def record_factory():
    """Build a MetricRecord from the sample fields plus overrides"""
    return make_record


@pytest.fixture
def placeholders_factory():
    """Build a FixedPlaceholders with chosen values"""
    return FixedPlaceholders
