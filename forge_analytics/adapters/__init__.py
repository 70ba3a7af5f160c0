# Copyright (c) 2025 Bytedance Ltd. and/or its affiliates
# SPDX-License-Identifier: MIT

"""
Persistence adapters for analytics projects.
"""

from forge_analytics.adapters.base import BaseProjectAdapter, ChangeHandler, OperationResult
from forge_analytics.adapters.memory import InMemoryProjectAdapter
from forge_analytics.adapters.sql import SqlProjectAdapter

__all__ = [
    'BaseProjectAdapter',
    'ChangeHandler',
    'OperationResult',
    'InMemoryProjectAdapter',
    'SqlProjectAdapter',
]
