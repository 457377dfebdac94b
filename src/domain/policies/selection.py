"""Selection policies deciding which snapshots are in scope for a query."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date
from enum import Enum

from src.domain.models import Snapshot, SnapshotFilters
from src.domain.policies.account_filters import filter_snapshots


class SelectionPolicy(Enum):
    """Snapshot selection modes, in decision priority order."""

    MONTH_PINNED = "month_pinned"
    RANGE_ALL = "range_all"
    FLEET_LATEST = "fleet_latest"
    CUSTODIAN_LATEST = "custodian_latest"
    ACCOUNT_LATEST = "account_latest"


@dataclass(frozen=True)
class SnapshotSelection:
    """Snapshots chosen for a query and the policy that chose them."""

    policy: SelectionPolicy
    snapshots: list[Snapshot]


def choose_selection_policy(filters: SnapshotFilters) -> SelectionPolicy:
    """Pick the selection policy for a set of filters.

    Args:
        filters: Validated query filters.

    Returns:
        SelectionPolicy: First matching mode of the decision table.
    """
    if filters.month is not None:
        return SelectionPolicy.MONTH_PINNED
    if filters.has_date_bounds:
        return SelectionPolicy.RANGE_ALL
    if filters.account is not None:
        return SelectionPolicy.ACCOUNT_LATEST
    if filters.custodian is not None:
        return SelectionPolicy.CUSTODIAN_LATEST
    return SelectionPolicy.FLEET_LATEST


def _sort_date(snapshot: Snapshot) -> date:
    return snapshot.as_of_date or date.min


def latest_per_bank(snapshots: Sequence[Snapshot]) -> list[Snapshot]:
    """Keep, for each bank, every snapshot at that bank's latest date.

    Args:
        snapshots: Candidate snapshots.

    Returns:
        list[Snapshot]: Snapshots in input order.
    """
    latest: dict[str, date] = {}
    for snapshot in snapshots:
        current = latest.get(snapshot.bank)
        if current is None or _sort_date(snapshot) > current:
            latest[snapshot.bank] = _sort_date(snapshot)
    return [
        snapshot
        for snapshot in snapshots
        if _sort_date(snapshot) == latest[snapshot.bank]
    ]


def latest_snapshot_set(snapshots: Sequence[Snapshot]) -> list[Snapshot]:
    """Keep every snapshot sharing the single overall latest date.

    Args:
        snapshots: Candidate snapshots.

    Returns:
        list[Snapshot]: Snapshots in input order; empty for empty input.
    """
    if not snapshots:
        return []
    latest = max(_sort_date(snapshot) for snapshot in snapshots)
    return [
        snapshot for snapshot in snapshots if _sort_date(snapshot) == latest
    ]


def within_range(
    snapshots: Iterable[Snapshot],
    start: date,
    end: date,
) -> list[Snapshot]:
    """Keep snapshots dated inside the inclusive range.

    Snapshots without a date are kept; the store already scoped them.
    """
    return [
        snapshot
        for snapshot in snapshots
        if snapshot.as_of_date is None or start <= snapshot.as_of_date <= end
    ]


def apply_selection_policy(
    policy: SelectionPolicy,
    snapshots: Sequence[Snapshot],
    filters: SnapshotFilters,
) -> list[Snapshot]:
    """Reduce fetched snapshots to the ones in scope for the policy.

    Args:
        policy: Selection mode chosen for the filters.
        snapshots: Snapshots returned by the store.
        filters: Validated query filters.

    Returns:
        list[Snapshot]: Selected snapshots in store order.
    """
    scoped = filter_snapshots(snapshots, filters.custodian, filters.account)
    if policy is SelectionPolicy.MONTH_PINNED:
        return scoped
    if policy is SelectionPolicy.RANGE_ALL:
        return within_range(
            scoped,
            filters.effective_start,
            filters.effective_end,
        )
    if policy is SelectionPolicy.FLEET_LATEST:
        return latest_per_bank(scoped)
    return latest_snapshot_set(scoped)


__all__ = [
    "SelectionPolicy",
    "SnapshotSelection",
    "choose_selection_policy",
    "latest_per_bank",
    "latest_snapshot_set",
    "within_range",
    "apply_selection_policy",
]
