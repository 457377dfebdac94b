"""Engine lifecycle for the snapshot store.

The store is read through one pooled SQLAlchemy engine per process. It is
created on first use from ``DatabaseSettings`` and can be disposed so the
next request reconnects with fresh settings.
"""

from threading import Lock
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DatabaseSettings

_snapshot_engine: Optional[Engine] = None
_engine_lock = Lock()


def _create_engine(settings: DatabaseSettings) -> Engine:
    """Create the pooled engine described by the settings.

    Args:
        settings: Connection settings of the snapshot store.

    Returns:
        Engine: Engine with a bounded QueuePool and pre-ping health checks.
    """
    return create_engine(
        settings.url,
        poolclass=QueuePool,
        pool_size=settings.pool_size,
        max_overflow=settings.max_overflow,
        pool_pre_ping=True,
        future=True,
    )


def get_snapshot_engine() -> Engine:
    """Return the process-wide snapshot store engine, creating it once.

    Returns:
        Engine: Shared engine connected to the snapshot store.

    Raises:
        RuntimeError: If the store URL is not configured.
    """
    global _snapshot_engine
    with _engine_lock:
        if _snapshot_engine is None:
            settings = DatabaseSettings.from_env()
            _snapshot_engine = _create_engine(settings)
            get_app_logger().info(
                f"Snapshot store engine created "
                f"(pool_size={settings.pool_size}, "
                f"max_overflow={settings.max_overflow})"
            )
        return _snapshot_engine


def dispose_snapshot_engine() -> None:
    """Close pooled connections and forget the shared engine."""
    global _snapshot_engine
    with _engine_lock:
        if _snapshot_engine is not None:
            _snapshot_engine.dispose()
            _snapshot_engine = None


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort backed by the shared SQLAlchemy engine."""

    def get_snapshot_engine(self) -> Engine:
        return get_snapshot_engine()


__all__ = [
    "get_snapshot_engine",
    "dispose_snapshot_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
