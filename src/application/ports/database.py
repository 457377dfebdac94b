"""Database ports for the wealth dashboard.

This module defines the application-layer protocol for accessing the engine
of the snapshot store. Infrastructure implementations are expected to provide
concrete adapters that satisfy this port.
"""

from typing import Protocol

from sqlalchemy.engine import Engine


class DatabaseEnginePort(Protocol):
    """Port exposing the database engine backing the snapshot store.

    Repositories depend on this protocol instead of concrete database drivers
    or configuration details.
    """

    def get_snapshot_engine(self) -> Engine:
        """Get the engine for the snapshot store database.

        Returns:
            Engine: SQLAlchemy engine connected to the snapshot store.
        """


__all__ = ["DatabaseEnginePort"]
