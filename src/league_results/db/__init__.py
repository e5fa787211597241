from league_results.db.base import Base
from league_results.db.engine import (
    DatabaseConfig,
    create_db_engine,
    create_session_factory,
    session_scope,
)

__all__ = [
    "Base",
    "DatabaseConfig",
    "create_db_engine",
    "create_session_factory",
    "session_scope",
]
