"""Tests for the SQLAlchemy snapshot repository."""

from datetime import date
import json
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from src.application.errors import UpstreamFetchError
from src.domain.models import MonthRef
from src.infrastructure.snapshot_repository import SqlAlchemySnapshotRepository


class _FakeResult:
    def __init__(self, rows: list[SimpleNamespace]) -> None:
        self._rows = rows

    def all(self):
        return self._rows

    def first(self):
        return self._rows[0] if self._rows else None


def _build_db_port(results: list[list[SimpleNamespace]]) -> tuple[MagicMock, MagicMock]:
    engine = MagicMock()
    conn = MagicMock()
    context = MagicMock()
    context.__enter__.return_value = conn
    engine.connect.return_value = context
    conn.execute.side_effect = [_FakeResult(rows) for rows in results]

    db_port = MagicMock()
    db_port.get_snapshot_engine.return_value = engine
    return db_port, conn


def _payload_row(data) -> list[SimpleNamespace]:
    return [SimpleNamespace(data=data)]


def test_fetch_range_parses_table_data() -> None:
    """Range payload blocks become snapshots for the client."""
    payload = {
        "tableData": [
            {
                "bank": "UBS",
                "account_number": "A-1",
                "as_of_date": "2025-07-31",
                "cash_equivalents": [{"currency": "usd", "balance": 10}],
            }
        ],
        "periods": [],
    }
    db_port, conn = _build_db_port([_payload_row(payload)])
    repository = SqlAlchemySnapshotRepository(db_port, logger=MagicMock())

    snapshots = repository.fetch_range(
        4,
        date(2025, 1, 1),
        date(2025, 12, 31),
        custodian="UBS",
    )

    assert [(item.client_id, item.bank, item.as_of_date) for item in snapshots] == [
        (4, "UBS", date(2025, 7, 31))
    ]
    params = conn.execute.call_args[0][1]
    assert params == {
        "client_id": 4,
        "start_date": "2025-01-01",
        "end_date": "2025-12-31",
        "custodian": "UBS",
        "account": None,
    }


def test_fetch_month_accepts_json_text_payload() -> None:
    """A payload returned as JSON text is decoded."""
    payload = json.dumps({"tableData": [{"bank": "HSBC", "loans": []}]})
    db_port, conn = _build_db_port([_payload_row(payload)])
    repository = SqlAlchemySnapshotRepository(db_port, logger=MagicMock())

    snapshots = repository.fetch_month(4, 2025, 6)

    assert [item.bank for item in snapshots] == ["HSBC"]
    assert conn.execute.call_args[0][1] == {"client_id": 4, "year": 2025, "month": 6}


def test_null_payload_means_no_snapshots() -> None:
    """A NULL function result is an empty month."""
    db_port, _ = _build_db_port([_payload_row(None)])
    repository = SqlAlchemySnapshotRepository(db_port, logger=MagicMock())

    assert repository.fetch_month(4, 2025, 6) == []


@pytest.mark.parametrize(
    "payload",
    [
        ["not", "an", "object"],
        {"tableData": {"bank": "UBS"}},
        {"tableData": ["UBS"]},
        "{not json",
    ],
)
def test_malformed_payloads_raise_upstream_error(payload) -> None:
    """Payloads that cannot be read are upstream failures."""
    db_port, _ = _build_db_port([_payload_row(payload)])
    repository = SqlAlchemySnapshotRepository(db_port, logger=MagicMock())

    with pytest.raises(UpstreamFetchError):
        repository.fetch_month(4, 2025, 6)


def test_database_errors_are_wrapped() -> None:
    """SQLAlchemy failures surface as UpstreamFetchError."""
    db_port, conn = _build_db_port([])
    conn.execute.side_effect = OperationalError("SELECT 1", {}, Exception("down"))
    logger = MagicMock()
    repository = SqlAlchemySnapshotRepository(db_port, logger=logger)

    with pytest.raises(UpstreamFetchError):
        repository.fetch_range(4, date(1900, 1, 1), date(9999, 12, 31))
    logger.error.assert_called_once()


def test_fetch_recent_months_maps_rows() -> None:
    """Month rows become MonthRefs in query order."""
    db_port, conn = _build_db_port(
        [[SimpleNamespace(y=2025, m=7), SimpleNamespace(y=2025, m=5)]]
    )
    repository = SqlAlchemySnapshotRepository(db_port, logger=MagicMock())

    months = repository.fetch_recent_months(4, limit=12)

    assert months == [MonthRef(2025, 7), MonthRef(2025, 5)]
    assert conn.execute.call_args[0][1] == {"client_id": 4, "limit": 12}


def test_fetch_recent_months_without_limit() -> None:
    """Without a limit the unbounded query is used."""
    db_port, conn = _build_db_port([[]])
    repository = SqlAlchemySnapshotRepository(db_port, logger=MagicMock())

    assert repository.fetch_recent_months(4) == []
    assert conn.execute.call_args[0][1] == {"client_id": 4}


@pytest.mark.parametrize(
    "error",
    [
        RuntimeError("Missing environment variable: SNAPSHOT_DB_URL"),
        ImportError("No module named 'psycopg2'"),
    ],
)
def test_engine_lookup_failures_are_wrapped(error) -> None:
    """Missing configuration or driver surfaces as UpstreamFetchError."""
    db_port = MagicMock()
    db_port.get_snapshot_engine.side_effect = error
    logger = MagicMock()
    repository = SqlAlchemySnapshotRepository(db_port, logger=logger)

    with pytest.raises(UpstreamFetchError):
        repository.fetch_month(4, 2025, 7)
    with pytest.raises(UpstreamFetchError):
        repository.fetch_recent_months(4, limit=12)
    assert logger.error.call_count == 2
