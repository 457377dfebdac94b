"""Use case backing the cash distribution view."""

from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.application.use_cases.reporting_months import (
    MonthSnapshotLoader,
    candidate_months,
    resolve_reporting_month,
)
from src.domain.constants import DEFAULT_TREND_MONTHS
from src.domain.models import DistributionView, SnapshotFilters
from src.domain.services.finance import aggregate_snapshots
from src.infrastructure.logging.logger import get_app_logger


class GetCashDistributionUseCase:
    """Aggregate the reporting month's snapshots for the cash page."""

    def __init__(
        self,
        snapshot_repository: SnapshotRepositoryPort,
        logger=None,
        month_limit: int = DEFAULT_TREND_MONTHS,
    ) -> None:
        """Initialize the use case.

        Args:
            snapshot_repository: Port providing snapshot store reads.
            logger: Optional logger compatible with logging.Logger-like API.
            month_limit: Maximum number of months scanned for data.
        """
        self._snapshot_repository = snapshot_repository
        self._logger = logger or get_app_logger()
        self._month_limit = month_limit

    def execute(self, filters: SnapshotFilters) -> DistributionView:
        """Return the cash distribution for the reporting month.

        Args:
            filters: Validated query filters.

        Returns:
            DistributionView: Aggregate of the reporting month. When the
            client has no months, the aggregate is empty and month_date is
            None.
        """
        candidates = candidate_months(
            self._snapshot_repository,
            filters,
            self._month_limit,
        )
        loader = MonthSnapshotLoader(self._snapshot_repository, filters)
        resolved = resolve_reporting_month(candidates, loader)
        if resolved is None:
            self._logger.warning(
                f"No snapshot months for client_id={filters.client_id}"
            )
            return DistributionView(
                aggregate=aggregate_snapshots([]),
                snapshots=[],
            )

        month, snapshots = resolved
        aggregate = aggregate_snapshots(snapshots, logger=self._logger)
        self._logger.info(
            f"Cash distribution for client_id={filters.client_id} "
            f"month={month.key}: {len(snapshots)} snapshots"
        )
        return DistributionView(
            aggregate=aggregate,
            snapshots=snapshots,
            month_date=month.first_day,
        )


__all__ = ["GetCashDistributionUseCase"]
