"""Shared fixtures for application use case tests."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from src.domain.models import MonthRef, Snapshot
from src.domain.services.snapshots import parse_snapshot


class FakeSnapshotRepository:
    """In-memory snapshot store keyed by client."""

    def __init__(self, blocks_by_client: dict[int, list[dict]]) -> None:
        self._snapshots = {
            client_id: [parse_snapshot(block, client_id) for block in blocks]
            for client_id, blocks in blocks_by_client.items()
        }
        self.range_calls: list[tuple] = []
        self.month_calls: list[tuple] = []

    def fetch_range(
        self,
        client_id: int,
        start_date: date,
        end_date: date,
        custodian: str | None = None,
        account: str | None = None,
    ) -> list[Snapshot]:
        self.range_calls.append(
            (client_id, start_date, end_date, custodian, account)
        )
        return [
            snapshot
            for snapshot in self._snapshots.get(client_id, [])
            if snapshot.as_of_date is not None
            and start_date <= snapshot.as_of_date <= end_date
        ]

    def fetch_month(self, client_id: int, year: int, month: int) -> list[Snapshot]:
        self.month_calls.append((client_id, year, month))
        wanted = MonthRef(year, month)
        return [
            snapshot
            for snapshot in self._snapshots.get(client_id, [])
            if snapshot.as_of_date is not None
            and wanted.contains(snapshot.as_of_date)
        ]

    def fetch_recent_months(
        self,
        client_id: int,
        limit: int | None = None,
    ) -> list[MonthRef]:
        months = sorted(
            {
                MonthRef.from_date(snapshot.as_of_date)
                for snapshot in self._snapshots.get(client_id, [])
                if snapshot.as_of_date is not None
            },
            reverse=True,
        )
        return months if limit is None else months[:limit]


def _block(bank, as_of, account="ACC-1", **buckets) -> dict:
    raw = {"bank": bank, "account_number": account, "as_of_date": as_of}
    raw.update(buckets)
    return raw


def _cash(amount, currency="USD") -> list[dict]:
    return [{"currency": currency, "balance": amount}]


@pytest.fixture
def make_repository():
    """Return a factory building fake repositories from raw blocks."""
    return FakeSnapshotRepository


@pytest.fixture
def portfolio_blocks() -> list[dict]:
    """Two custodians over three months for client 1."""
    return [
        _block("UBS", "2025-05-31", cash_equivalents=_cash(100)),
        _block("UBS", "2025-06-30", cash_equivalents=_cash(200)),
        _block(
            "UBS",
            "2025-07-31",
            cash_equivalents=_cash(300),
            loans=_cash(-50),
        ),
        _block("HSBC", "2025-06-30", account="H-1", cash_equivalents=_cash(1000, "EUR")),
    ]


@pytest.fixture
def logger() -> MagicMock:
    return MagicMock()


@pytest.fixture
def block():
    """Return a builder for raw store blocks."""
    return _block


@pytest.fixture
def cash():
    """Return a builder for single-row cash buckets."""
    return _cash
