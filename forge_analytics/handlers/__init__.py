# Forge Analytics Handlers
from .parsing import parse_metric_record
from .project_handler import ProjectHandler, generate_project_id

__all__ = ["ProjectHandler", "generate_project_id", "parse_metric_record"]
