# Forge Analytics Database
from .models import Base, AnalyticsProject
from .connection import (
    check_db_connection,
    create_db_engine,
    create_session_factory,
    init_db,
)

__all__ = [
    "Base",
    "AnalyticsProject",
    "check_db_connection",
    "create_db_engine",
    "create_session_factory",
    "init_db",
]
