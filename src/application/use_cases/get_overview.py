"""Use case backing the overview page: summary cards and trend."""

from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.application.use_cases.reporting_months import (
    MonthSnapshotLoader,
    candidate_months,
    resolve_reporting_month,
)
from src.application.use_cases.select_snapshots import SelectSnapshotsUseCase
from src.domain.constants import DEFAULT_TREND_MONTHS
from src.domain.models import (
    MonthRef,
    OverviewView,
    SnapshotFilters,
    TrendPoint,
)
from src.domain.services.finance import aggregate_snapshots, compute_summary_cards
from src.infrastructure.logging.logger import get_app_logger

DIVERGENCE_TOLERANCE = Decimal("0.01")


class GetOverviewUseCase:
    """Compute summary cards and a monthly net-assets trend."""

    def __init__(
        self,
        snapshot_repository: SnapshotRepositoryPort,
        logger=None,
        trend_month_limit: int = DEFAULT_TREND_MONTHS,
        trend_max_workers: int = 1,
    ) -> None:
        """Initialize the use case.

        Args:
            snapshot_repository: Port providing snapshot store reads.
            logger: Optional logger compatible with logging.Logger-like API.
            trend_month_limit: Maximum number of months in the trend.
            trend_max_workers: Worker threads used to compute trend points.
        """
        self._snapshot_repository = snapshot_repository
        self._logger = logger or get_app_logger()
        self._trend_month_limit = trend_month_limit
        self._trend_max_workers = max(1, trend_max_workers)

    def execute(self, filters: SnapshotFilters) -> OverviewView | None:
        """Return the overview for the filters.

        With date bounds and no month pin, the cards cover every snapshot in
        the range. Otherwise the most recent month with data is used.

        Args:
            filters: Validated query filters.

        Returns:
            OverviewView | None: Cards, aggregate and trend, or None when the
            client has no reporting month.
        """
        months = candidate_months(
            self._snapshot_repository,
            filters,
            self._trend_month_limit,
        )
        loader = MonthSnapshotLoader(self._snapshot_repository, filters)

        if filters.month is None and filters.has_date_bounds:
            selection = SelectSnapshotsUseCase(
                self._snapshot_repository,
                logger=self._logger,
            ).execute(filters)
            snapshots = selection.snapshots
            month_date = filters.effective_end
        else:
            resolved = resolve_reporting_month(months, loader)
            if resolved is None:
                self._logger.warning(
                    f"No snapshot months for client_id={filters.client_id}"
                )
                return None
            month, snapshots = resolved
            month_date = month.first_day

        aggregate = aggregate_snapshots(snapshots, logger=self._logger)
        cards = compute_summary_cards(aggregate)
        if abs(cards.divergence) > DIVERGENCE_TOLERANCE:
            self._logger.warning(
                f"aum_from_banks={cards.aum_from_banks} differs from "
                f"net_assets={cards.net_assets} for client_id={filters.client_id}"
            )

        trend = self._build_trend(self._trend_months(filters, months), loader)
        self._logger.info(
            f"Overview for client_id={filters.client_id} as of {month_date}: "
            f"net={cards.net_assets}, {len(trend)} trend points"
        )
        return OverviewView(
            month_date=month_date,
            snapshots=snapshots,
            aggregate=aggregate,
            cards=cards,
            trend=trend,
        )

    def _trend_months(
        self,
        filters: SnapshotFilters,
        candidates: list[MonthRef],
    ) -> list[MonthRef]:
        if filters.month is None:
            return candidates
        recent = self._snapshot_repository.fetch_recent_months(filters.client_id)
        months = {month for month in recent if month <= filters.month}
        months.add(filters.month)
        return sorted(months, reverse=True)[: self._trend_month_limit]

    def _build_trend(
        self,
        months: list[MonthRef],
        loader: MonthSnapshotLoader,
    ) -> list[TrendPoint]:
        ordered = sorted(months)

        def point(month: MonthRef) -> TrendPoint:
            aggregate = aggregate_snapshots(loader(month))
            return TrendPoint(month=month, net_assets=aggregate.net_assets)

        workers = min(self._trend_max_workers, len(ordered))
        if workers <= 1:
            return [point(month) for month in ordered]
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(point, ordered))


__all__ = ["GetOverviewUseCase", "DIVERGENCE_TOLERANCE"]
