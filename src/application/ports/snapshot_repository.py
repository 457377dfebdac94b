"""Application port for snapshot store reads."""

from datetime import date
from typing import Protocol

from src.domain.models import MonthRef, Snapshot


class SnapshotRepositoryPort(Protocol):
    """Port exposing read access to client statement snapshots.

    Implementations raise UpstreamFetchError when the store is unreachable or
    returns a payload that cannot be read.
    """

    def fetch_range(
        self,
        client_id: int,
        start_date: date,
        end_date: date,
        custodian: str | None = None,
        account: str | None = None,
    ) -> list[Snapshot]:
        """Return snapshots dated inside the inclusive range."""

    def fetch_month(
        self,
        client_id: int,
        year: int,
        month: int,
    ) -> list[Snapshot]:
        """Return snapshots for exactly one calendar month."""

    def fetch_recent_months(
        self,
        client_id: int,
        limit: int | None = None,
    ) -> list[MonthRef]:
        """Return distinct months holding snapshots, most recent first."""


__all__ = ["SnapshotRepositoryPort"]
