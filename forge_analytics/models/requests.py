# Forge Analytics Request Models
"""
Pydantic models for API request validation.
"""

from typing import Optional, Union

from pydantic import BaseModel

# Form inputs arrive as typed numbers or as the raw text of an input field
RawNumber = Optional[Union[float, str]]


class CreateProjectRequest(BaseModel):
    """Request for creating an analytics project from dashboard form fields."""
    project_name: str = ""
    analytics_type: str = ""
    data_source: str = ""
    time_range: str = ""
    metrics: str = ""
    target_revenue: RawNumber = None
    current_revenue: RawNumber = None
    target_users: RawNumber = None
    current_users: RawNumber = None
    target_conversion: RawNumber = None
    current_conversion: RawNumber = None
    budget: RawNumber = None
    team_size: RawNumber = None
