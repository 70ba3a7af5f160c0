"""Exceptions raised by the analytics core and the project handler."""


class ForgeAnalyticsError(Exception):
    """Base class for Forge Analytics errors"""


class ProjectNotFoundError(ForgeAnalyticsError, LookupError):
    """The requested project id is not in the current collection"""

    def __init__(self, project_id: str):
        self.project_id = project_id
        super().__init__(f"Project {project_id} not found")


class ProjectLimitReachedError(ForgeAnalyticsError):
    """Creating another project would exceed the configured maximum"""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(
            f"Maximum limit of {limit} projects reached. Please delete some projects first."
        )


class ProjectOperationError(ForgeAnalyticsError):
    """The persistence collaborator reported a failed create or delete"""

    def __init__(self, operation: str, detail: str = ""):
        self.operation = operation
        self.detail = detail
        message = f"Failed to {operation} project"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
