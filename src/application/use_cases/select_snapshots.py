"""Use case resolving which snapshots are in scope for a query."""

from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.domain.models import SnapshotFilters
from src.domain.policies.selection import (
    SelectionPolicy,
    SnapshotSelection,
    apply_selection_policy,
    choose_selection_policy,
)
from src.infrastructure.logging.logger import get_app_logger


class SelectSnapshotsUseCase:
    """Fetch snapshots from the store and apply the selection policy."""

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
        self._snapshot_repository = snapshot_repository
        self._logger = logger or get_app_logger()

    def execute(self, filters: SnapshotFilters) -> SnapshotSelection:
        """Return the snapshots in scope for the filters.

        A month pin reads the month query of the store; every other mode reads
        the range query (open bounds become sentinels) before the policy
        narrows the result.

        Args:
            filters: Validated query filters.

        Returns:
            SnapshotSelection: Selected snapshots and the policy applied.
        """
        policy = choose_selection_policy(filters)
        if policy is SelectionPolicy.MONTH_PINNED:
            fetched = self._snapshot_repository.fetch_month(
                filters.client_id,
                filters.month.year,
                filters.month.month,
            )
        else:
            fetched = self._snapshot_repository.fetch_range(
                filters.client_id,
                filters.effective_start,
                filters.effective_end,
                custodian=filters.custodian,
                account=filters.account,
            )
        snapshots = apply_selection_policy(policy, fetched, filters)
        self._logger.info(
            f"Selected {len(snapshots)} of {len(fetched)} snapshots for "
            f"client_id={filters.client_id} (policy={policy.value})"
        )
        return SnapshotSelection(policy=policy, snapshots=snapshots)


__all__ = ["SelectSnapshotsUseCase"]
