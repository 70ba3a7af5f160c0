# Forge Analytics - Analytics dashboard backend
"""
Forge Analytics stores user-entered analytics projects and expands any one of
them into a derived analytics view: KPI summaries plus five chart specs.

This service is consumed by:
- The dashboard widget (project list, create/delete, analytics overlay)
- Any chart-rendering frontend that reads the chart specs
"""

__version__ = "1.0.0"
