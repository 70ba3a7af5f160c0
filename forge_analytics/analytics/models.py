"""
Data models for analytics projects, KPIs and chart specifications.

These models provide a consistent structure for chart data that can be
easily serialized to JSON and consumed by a chart-rendering frontend.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional, Dict, Any, Union

from pydantic import BaseModel, ConfigDict, Field


# Largest metric value kept exactly by a float (and by a 64-bit SQL integer)
MAX_METRIC_VALUE = 2 ** 53


class ProjectStatus(str, Enum):
    """Lifecycle status of an analytics project"""
    ACTIVE = "active"


class MetricRecord(BaseModel):
    """One analytics project: descriptive metadata plus target/current metrics"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Opaque identifier assigned on creation")
    project_name: str = Field("", description="Project display name")
    analytics_type: str = Field("", description="Analytics category")
    data_source: str = Field("", description="Data source label")
    time_range: str = Field("", description="Time range label")
    metrics: str = Field("", description="Metrics of interest (free text)")

    target_revenue: float = Field(0.0, ge=0, le=MAX_METRIC_VALUE, description="Revenue target")
    current_revenue: float = Field(0.0, ge=0, le=MAX_METRIC_VALUE, description="Current revenue")
    target_users: int = Field(0, ge=0, le=MAX_METRIC_VALUE, description="User count target")
    current_users: int = Field(0, ge=0, le=MAX_METRIC_VALUE, description="Current user count")
    target_conversion: float = Field(0.0, ge=0, le=MAX_METRIC_VALUE, description="Conversion target (percent)")
    current_conversion: float = Field(0.0, ge=0, le=MAX_METRIC_VALUE, description="Current conversion (percent)")
    budget: float = Field(0.0, ge=0, le=MAX_METRIC_VALUE, description="Project budget")
    team_size: int = Field(1, ge=1, le=MAX_METRIC_VALUE, description="Number of team members")

    created_at: datetime = Field(default_factory=datetime.now, description="Creation timestamp")
    status: ProjectStatus = Field(ProjectStatus.ACTIVE, description="Project status")


# KPI models

class KPISignal(str, Enum):
    """Direction of a KPI relative to its goal"""
    FAVORABLE = "favorable"
    UNFAVORABLE = "unfavorable"


class KPIEntry(BaseModel):
    """A single named key-performance indicator"""
    key: str = Field(..., description="Stable machine key")
    label: str = Field(..., description="Display label")
    value: float = Field(..., description="Numeric value")
    display_value: str = Field(..., description="Formatted value for display")
    change_text: str = Field("", description="Formatted comparison against the goal")
    signal: KPISignal = Field(..., description="Favorable or unfavorable")
    progress: Optional[float] = Field(None, description="Percent of target reached")
    delta: Optional[float] = Field(None, description="Signed difference from target")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Additional values")


class KPISummary(BaseModel):
    """Ordered KPI entries for one project"""
    entries: List[KPIEntry] = Field(default_factory=list)

    def get(self, key: str) -> Optional[KPIEntry]:
        for entry in self.entries:
            if entry.key == key:
                return entry
        return None

    def __len__(self) -> int:
        return len(self.entries)


# Chart specification models

class ChartType(str, Enum):
    """Supported chart types"""
    COMBO = "combo"  # Line + bar sharing a category axis
    DOUGHNUT = "doughnut"
    RADAR = "radar"
    POLAR_AREA = "polar_area"
    MULTI_LINE = "multi_line"


class ScaleType(str, Enum):
    """Axis scale encodings"""
    CATEGORY = "category"
    LINEAR = "linear"
    RADIAL = "radial"
    PROPORTIONAL = "proportional"


class ChartAxis(BaseModel):
    """An axis or scale of a chart"""
    id: str = Field(..., description="Axis identifier referenced by series")
    scale_type: ScaleType = Field(..., description="Scale encoding")
    position: Optional[str] = Field(None, description="left, right, bottom, or None for radial")
    min: Optional[float] = Field(None, description="Fixed lower bound")
    max: Optional[float] = Field(None, description="Fixed upper bound")
    draw_on_chart_area: bool = Field(True, description="Whether gridlines cross the plot")


class ChartSeries(BaseModel):
    """A data series in a chart (e.g., 'Revenue' line in performance overview)"""
    name: str = Field(..., description="Series name")
    data: List[float] = Field(default_factory=list, description="Values aligned to the chart labels")
    type: Optional[str] = Field(None, description="Series type for mixed charts (line, bar)")
    axis_id: Optional[str] = Field(None, description="Value axis this series is plotted against")
    color: Optional[str] = Field(None, description="Border/line colour")
    background_color: Optional[Union[str, List[str]]] = Field(None, description="Fill colour(s)")
    metadata: Dict[str, Any] = Field(default_factory=dict, description="Renderer hints")


class ChartSpec(BaseModel):
    """Declarative, renderer-agnostic description of one chart"""
    key: str = Field(..., description="Display slot of the chart")
    chart_type: ChartType = Field(..., description="Type of chart")
    title: str = Field(..., description="Chart title")
    labels: List[str] = Field(default_factory=list, description="Shared category labels")
    series: List[ChartSeries] = Field(default_factory=list, description="Data series")
    axes: List[ChartAxis] = Field(default_factory=list, description="Axes and scales")
    dual_axis: bool = Field(False, description="Series are scaled on independent value axes")
    options: Dict[str, Any] = Field(default_factory=dict, description="Renderer hints")

    def get_series(self, name: str) -> Optional[ChartSeries]:
        for series in self.series:
            if series.name == name:
                return series
        return None

    def get_axis(self, axis_id: str) -> Optional[ChartAxis]:
        for axis in self.axes:
            if axis.id == axis_id:
                return axis
        return None


class AnalyticsBundle(BaseModel):
    """Everything the expanded analytics view renders for one project"""
    project_id: str = Field(..., description="Project identifier")
    project_name: str = Field(..., description="Project display name")
    kpis: KPISummary = Field(..., description="KPI summary")
    charts: List[ChartSpec] = Field(default_factory=list, description="Chart specifications in display order")
    generated_at: datetime = Field(default_factory=datetime.now, description="When this bundle was generated")

    def get_chart(self, key: str) -> Optional[ChartSpec]:
        for chart in self.charts:
            if chart.key == key:
                return chart
        return None
