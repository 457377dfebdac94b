"""Reporting-month resolution shared by the cash and overview use cases."""

from collections.abc import Callable, Sequence

from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.domain.models import MonthRef, Snapshot, SnapshotFilters
from src.domain.policies.account_filters import filter_snapshots


class MonthSnapshotLoader:
    """Load the filtered snapshot set of a month, once per request."""

    def __init__(
        self,
        snapshot_repository: SnapshotRepositoryPort,
        filters: SnapshotFilters,
    ) -> None:
        self._snapshot_repository = snapshot_repository
        self._filters = filters
        self._cache: dict[MonthRef, list[Snapshot]] = {}

    def __call__(self, month: MonthRef) -> list[Snapshot]:
        if month not in self._cache:
            fetched = self._snapshot_repository.fetch_month(
                self._filters.client_id,
                month.year,
                month.month,
            )
            self._cache[month] = filter_snapshots(
                fetched,
                self._filters.custodian,
                self._filters.account,
            )
        return self._cache[month]


def candidate_months(
    snapshot_repository: SnapshotRepositoryPort,
    filters: SnapshotFilters,
    limit: int,
) -> list[MonthRef]:
    """Return the months to consider for a request, most recent first.

    An explicit month is the sole candidate. Otherwise the client's months
    with snapshots are used, restricted to the date bounds when present, and
    capped at ``limit``.

    Args:
        snapshot_repository: Port providing snapshot store reads.
        filters: Validated query filters.
        limit: Maximum number of candidate months.

    Returns:
        list[MonthRef]: Candidate months in recency order.
    """
    if filters.month is not None:
        return [filters.month]
    if filters.has_date_bounds:
        first = MonthRef.from_date(filters.effective_start)
        last = MonthRef.from_date(filters.effective_end)
        months = snapshot_repository.fetch_recent_months(filters.client_id)
        months = [month for month in months if first <= month <= last]
    else:
        months = snapshot_repository.fetch_recent_months(
            filters.client_id,
            limit=limit,
        )
    return sorted(set(months), reverse=True)[:limit]


def resolve_reporting_month(
    candidates: Sequence[MonthRef],
    load_month: Callable[[MonthRef], list[Snapshot]],
) -> tuple[MonthRef, list[Snapshot]] | None:
    """Pick the reporting month among candidates.

    Candidates are scanned in order; the first month with a non-empty
    snapshot set wins. When none qualifies, the first candidate is returned
    with its empty set.

    Args:
        candidates: Months in recency order.
        load_month: Callable returning the snapshot set of a month.

    Returns:
        tuple[MonthRef, list[Snapshot]] | None: Selected month and its
        snapshots, or None when there are no candidates.
    """
    if not candidates:
        return None
    for month in candidates:
        snapshots = load_month(month)
        if snapshots:
            return month, snapshots
    return candidates[0], load_month(candidates[0])


__all__ = [
    "MonthSnapshotLoader",
    "candidate_months",
    "resolve_reporting_month",
]
