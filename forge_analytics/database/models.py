# Forge Analytics Database Models
"""
SQLAlchemy models for stored analytics projects.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import Column, DateTime, Float, Integer, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class AnalyticsProject(Base):
    """One stored analytics project row."""

    __tablename__ = "analytics_projects"

    id = Column(String(64), primary_key=True)
    project_name = Column(String(255), nullable=False, default="")
    analytics_type = Column(String(100), nullable=False, default="")
    data_source = Column(String(100), nullable=False, default="")
    time_range = Column(String(100), nullable=False, default="")
    metrics = Column(Text, nullable=False, default="")
    target_revenue = Column(Float, nullable=False, default=0.0)
    current_revenue = Column(Float, nullable=False, default=0.0)
    target_users = Column(Integer, nullable=False, default=0)
    current_users = Column(Integer, nullable=False, default=0)
    target_conversion = Column(Float, nullable=False, default=0.0)
    current_conversion = Column(Float, nullable=False, default=0.0)
    budget = Column(Float, nullable=False, default=0.0)
    team_size = Column(Integer, nullable=False, default=1)
    status = Column(String(20), nullable=False, default="active")
    created_at = Column(DateTime, nullable=False, default=datetime.now)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary of MetricRecord fields."""
        return {
            "id": self.id,
            "project_name": self.project_name,
            "analytics_type": self.analytics_type,
            "data_source": self.data_source,
            "time_range": self.time_range,
            "metrics": self.metrics,
            "target_revenue": self.target_revenue,
            "current_revenue": self.current_revenue,
            "target_users": self.target_users,
            "current_users": self.current_users,
            "target_conversion": self.target_conversion,
            "current_conversion": self.current_conversion,
            "budget": self.budget,
            "team_size": self.team_size,
            "status": self.status,
            "created_at": self.created_at,
        }
