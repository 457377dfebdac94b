"""Use case listing the months with snapshot data for a client."""

from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.domain.models import MonthRef
from src.infrastructure.logging.logger import get_app_logger


class GetSnapshotMonthsUseCase:
    """Return the client's months with data, most recent first."""

    def __init__(
        self,
        snapshot_repository: SnapshotRepositoryPort,
        logger=None,
    ) -> None:
        self._snapshot_repository = snapshot_repository
        self._logger = logger or get_app_logger()

    def execute(self, client_id: int, limit: int | None = None) -> list[MonthRef]:
        months = sorted(
            set(self._snapshot_repository.fetch_recent_months(client_id, limit=limit)),
            reverse=True,
        )
        if limit is not None:
            months = months[:limit]
        self._logger.info(f"Fetched {len(months)} months for client_id={client_id}")
        return months


__all__ = ["GetSnapshotMonthsUseCase"]
