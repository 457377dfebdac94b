"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DashboardSettings
from src.infrastructure.snapshot_repository import (
    SqlAlchemySnapshotRepository,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_snapshot_repository(
    db_port: DatabaseEnginePort | None = None,
) -> SnapshotRepositoryPort:
    """Return the snapshot store repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemySnapshotRepository(resolved_db, logger=get_app_logger())


def build_settings() -> DashboardSettings:
    """Return dashboard settings sourced from the environment."""
    return DashboardSettings.from_env()


__all__ = [
    "build_database_adapter",
    "build_snapshot_repository",
    "build_settings",
]
