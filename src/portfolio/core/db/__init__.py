"""Database utilities - engine, session, migrations."""

from src.portfolio.core.db.engine import (
    dispose_engine,
    enable_sqlite_foreign_keys,
    get_engine,
)
from src.portfolio.core.db.migrations import run_migrations_async, run_migrations_sync
from src.portfolio.core.db.session import get_session

__all__ = [
    # Engine
    "dispose_engine",
    "enable_sqlite_foreign_keys",
    "get_engine",
    # Session
    "get_session",
    # Migrations
    "run_migrations_async",
    "run_migrations_sync",
]
