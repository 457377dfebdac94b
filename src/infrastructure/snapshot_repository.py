"""SQLAlchemy repository reading client snapshots from the store."""

from collections.abc import Mapping
from datetime import date
import json

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.errors import UpstreamFetchError
from src.application.ports.database import DatabaseEnginePort
from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.domain.models import MonthRef, Snapshot
from src.domain.services.snapshots import parse_snapshot
from src.infrastructure.logging.logger import get_app_logger

# Missing configuration surfaces as RuntimeError, a missing driver as ImportError.
_STORE_ERRORS = (SQLAlchemyError, RuntimeError, ImportError)

_RANGE_QUERY = text(
    """
    SELECT public.get_overview_range_aggregated(
        :client_id, :start_date, :end_date, :custodian, :account
    )::jsonb AS data
    """
)

_MONTH_QUERY = text(
    """
    SELECT public.get_month_overview_aggregated(
        :client_id, :year, :month
    )::jsonb AS data
    """
)

_MONTHS_QUERY = text(
    """
    WITH mon AS (
        SELECT date_trunc('month', as_of_date)::date AS mon
        FROM document
        WHERE client_id = :client_id AND as_of_date IS NOT NULL
        GROUP BY 1
    )
    SELECT extract(year FROM mon)::int AS y,
           extract(month FROM mon)::int AS m
    FROM mon
    ORDER BY y DESC, m DESC
    """
)

_LIMITED_MONTHS_QUERY = text(
    """
    WITH mon AS (
        SELECT date_trunc('month', as_of_date)::date AS mon
        FROM document
        WHERE client_id = :client_id AND as_of_date IS NOT NULL
        GROUP BY 1
        ORDER BY mon DESC
        LIMIT :limit
    )
    SELECT extract(year FROM mon)::int AS y,
           extract(month FROM mon)::int AS m
    FROM mon
    ORDER BY y DESC, m DESC
    """
)


class SqlAlchemySnapshotRepository(SnapshotRepositoryPort):
    """Snapshot store backed by PostgreSQL aggregation functions."""

    def __init__(self, db_port: DatabaseEnginePort, logger=None) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the snapshot store engine.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()

    def fetch_range(
        self,
        client_id: int,
        start_date: date,
        end_date: date,
        custodian: str | None = None,
        account: str | None = None,
    ) -> list[Snapshot]:
        params = {
            "client_id": client_id,
            "start_date": start_date.isoformat(),
            "end_date": end_date.isoformat(),
            "custodian": custodian,
            "account": account,
        }
        payload = self._fetch_payload(_RANGE_QUERY, params, "range")
        return self._parse_payload(payload, client_id)

    def fetch_month(
        self,
        client_id: int,
        year: int,
        month: int,
    ) -> list[Snapshot]:
        params = {"client_id": client_id, "year": year, "month": month}
        payload = self._fetch_payload(_MONTH_QUERY, params, "month")
        return self._parse_payload(payload, client_id)

    def fetch_recent_months(
        self,
        client_id: int,
        limit: int | None = None,
    ) -> list[MonthRef]:
        params = {"client_id": client_id}
        query = _MONTHS_QUERY
        if limit is not None:
            query = _LIMITED_MONTHS_QUERY
            params["limit"] = limit
        try:
            engine = self._db_port.get_snapshot_engine()
            with engine.connect() as conn:
                rows = conn.execute(query, params).all()
        except _STORE_ERRORS as exc:
            self._logger.error(
                f"Month listing failed for client_id={client_id}: {exc}"
            )
            raise UpstreamFetchError("Failed to load snapshot months") from exc
        return [MonthRef(year=int(row.y), month=int(row.m)) for row in rows]

    def _fetch_payload(self, query, params: dict, kind: str):
        try:
            engine = self._db_port.get_snapshot_engine()
            with engine.connect() as conn:
                row = conn.execute(query, params).first()
        except _STORE_ERRORS as exc:
            self._logger.error(
                f"Snapshot {kind} query failed for "
                f"client_id={params['client_id']}: {exc}"
            )
            raise UpstreamFetchError("Failed to load snapshots") from exc
        if row is None or row.data is None:
            return {"tableData": []}
        return row.data

    def _parse_payload(self, payload, client_id: int) -> list[Snapshot]:
        if isinstance(payload, (str, bytes)):
            try:
                payload = json.loads(payload)
            except ValueError as exc:
                raise UpstreamFetchError(
                    "Snapshot payload is not valid JSON"
                ) from exc
        if not isinstance(payload, Mapping):
            raise UpstreamFetchError(
                f"Snapshot payload must be an object, got {type(payload).__name__}"
            )
        blocks = payload.get("tableData")
        if blocks is None:
            blocks = []
        if not isinstance(blocks, list):
            raise UpstreamFetchError("Snapshot payload tableData must be a list")
        snapshots = []
        for index, block in enumerate(blocks):
            if not isinstance(block, Mapping):
                raise UpstreamFetchError(
                    f"Snapshot block {index} must be an object"
                )
            snapshots.append(
                parse_snapshot(block, client_id, logger=self._logger)
            )
        self._logger.info(
            f"Fetched {len(snapshots)} snapshots for client_id={client_id}"
        )
        return snapshots


__all__ = ["SqlAlchemySnapshotRepository"]
