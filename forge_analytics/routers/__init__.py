# Forge Analytics Routers
from .projects import router as projects_router
from .analytics import router as analytics_router
from .dashboard import router as dashboard_router
