"""Use case backing the custodian distribution view."""

from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.application.use_cases.select_snapshots import SelectSnapshotsUseCase
from src.domain.models import DistributionView, SnapshotFilters
from src.domain.policies.selection import SelectionPolicy
from src.domain.services.finance import aggregate_snapshots
from src.infrastructure.logging.logger import get_app_logger


class GetCustodianDistributionUseCase:
    """Aggregate the selected snapshots by bank, currency and account."""

    def __init__(
        self,
        snapshot_repository: SnapshotRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            snapshot_repository: Port providing snapshot store reads.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()
        self._selector = SelectSnapshotsUseCase(
            snapshot_repository,
            logger=self._logger,
        )

    def execute(self, filters: SnapshotFilters) -> DistributionView:
        """Return the custodian distribution for the filters.

        Args:
            filters: Validated query filters.

        Returns:
            DistributionView: Aggregate over the selected snapshots. The
            month date is set only for month-pinned requests.
        """
        selection = self._selector.execute(filters)
        aggregate = aggregate_snapshots(selection.snapshots, logger=self._logger)
        month_date = None
        if selection.policy is SelectionPolicy.MONTH_PINNED:
            month_date = filters.month.first_day
        self._logger.info(
            f"Custodian distribution for client_id={filters.client_id}: "
            f"{len(aggregate.bank_totals)} banks, net={aggregate.net_assets}"
        )
        return DistributionView(
            aggregate=aggregate,
            snapshots=selection.snapshots,
            month_date=month_date,
        )


__all__ = ["GetCustodianDistributionUseCase"]
