"""Tests for the SelectSnapshotsUseCase."""

from datetime import date

from src.application.use_cases.select_snapshots import SelectSnapshotsUseCase
from src.domain.constants import RANGE_END, RANGE_START
from src.domain.models import MonthRef, SnapshotFilters
from src.domain.policies.selection import SelectionPolicy


def _banks_and_dates(selection):
    return [(item.bank, item.as_of_date) for item in selection.snapshots]


def test_fleet_latest_reads_full_range(
    make_repository, portfolio_blocks, logger
) -> None:
    """Without filters the range query is called with sentinel bounds."""
    repository = make_repository({1: portfolio_blocks})
    use_case = SelectSnapshotsUseCase(repository, logger=logger)

    selection = use_case.execute(SnapshotFilters(client_id=1))

    assert selection.policy is SelectionPolicy.FLEET_LATEST
    assert repository.range_calls == [(1, RANGE_START, RANGE_END, None, None)]
    assert _banks_and_dates(selection) == [
        ("UBS", date(2025, 7, 31)),
        ("HSBC", date(2025, 6, 30)),
    ]
    logger.info.assert_called_once()


def test_custodian_latest_uses_custodian_snapshot_date(
    make_repository, portfolio_blocks, logger
) -> None:
    """A custodian filter returns that custodian's latest set."""
    repository = make_repository({1: portfolio_blocks})

    selection = SelectSnapshotsUseCase(repository, logger=logger).execute(
        SnapshotFilters(client_id=1, custodian="hsbc")
    )

    assert selection.policy is SelectionPolicy.CUSTODIAN_LATEST
    assert repository.range_calls[0][3] == "hsbc"
    assert _banks_and_dates(selection) == [("HSBC", date(2025, 6, 30))]


def test_month_pinned_reads_month_query(
    make_repository, portfolio_blocks, logger
) -> None:
    """A month pin never touches the range query."""
    repository = make_repository({1: portfolio_blocks})

    selection = SelectSnapshotsUseCase(repository, logger=logger).execute(
        SnapshotFilters(client_id=1, month=MonthRef(2025, 6))
    )

    assert selection.policy is SelectionPolicy.MONTH_PINNED
    assert repository.range_calls == []
    assert repository.month_calls == [(1, 2025, 6)]
    assert {item.bank for item in selection.snapshots} == {"UBS", "HSBC"}


def test_range_returns_all_snapshots_in_bounds(
    make_repository, portfolio_blocks, logger
) -> None:
    """Explicit bounds are forwarded and every snapshot inside is kept."""
    repository = make_repository({1: portfolio_blocks})
    filters = SnapshotFilters(
        client_id=1,
        start_date=date(2025, 5, 1),
        end_date=date(2025, 6, 30),
    )

    selection = SelectSnapshotsUseCase(repository, logger=logger).execute(filters)

    assert selection.policy is SelectionPolicy.RANGE_ALL
    assert repository.range_calls == [
        (1, date(2025, 5, 1), date(2025, 6, 30), None, None)
    ]
    assert len(selection.snapshots) == 3


def test_unknown_client_selects_nothing(make_repository, logger) -> None:
    """A client without snapshots yields an empty selection."""
    repository = make_repository({})

    selection = SelectSnapshotsUseCase(repository, logger=logger).execute(
        SnapshotFilters(client_id=5)
    )

    assert selection.snapshots == []
