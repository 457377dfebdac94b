"""Request-level entry points for the dashboard asset pages.

Each view validates raw parameters, runs a use case, and returns a JSON-ready
payload. Validation and upstream failures become ``status: "error"``
payloads; nothing raised by the use cases escapes to the caller.
"""

from collections.abc import Mapping

from src.application.errors import UpstreamFetchError, ValidationError
from src.application.ports.snapshot_repository import SnapshotRepositoryPort
from src.application.use_cases.get_cash_distribution import (
    GetCashDistributionUseCase,
)
from src.application.use_cases.get_custodian_distribution import (
    GetCustodianDistributionUseCase,
)
from src.application.use_cases.get_overview import GetOverviewUseCase
from src.application.use_cases.get_snapshot_months import (
    GetSnapshotMonthsUseCase,
)
from src.application.use_cases.snapshot_filters import (
    parse_client_id,
    parse_snapshot_filters,
)
from src.adapters.interface.api.responses import (
    distribution_payload,
    error_payload,
    months_payload,
    overview_payload,
)
from src.infrastructure.container import build_settings, build_snapshot_repository
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import DashboardSettings

UPSTREAM_ERROR_MESSAGE = "Failed to load portfolio snapshots"


def custodian_view(
    params: Mapping[str, object],
    repository: SnapshotRepositoryPort | None = None,
) -> dict:
    """Return the custodian distribution payload for request parameters."""

    def run() -> dict:
        filters = parse_snapshot_filters(params)
        use_case = GetCustodianDistributionUseCase(
            repository or build_snapshot_repository(),
            logger=get_app_logger(),
        )
        return distribution_payload(use_case.execute(filters))

    return _serve("custodian", params, run)


def cash_view(
    params: Mapping[str, object],
    repository: SnapshotRepositoryPort | None = None,
    settings: DashboardSettings | None = None,
) -> dict:
    """Return the cash distribution payload for request parameters."""

    def run() -> dict:
        filters = parse_snapshot_filters(params)
        resolved = settings or build_settings()
        use_case = GetCashDistributionUseCase(
            repository or build_snapshot_repository(),
            logger=get_app_logger(),
            month_limit=resolved.trend_month_limit,
        )
        return distribution_payload(use_case.execute(filters))

    return _serve("cash", params, run)


def overview_view(
    params: Mapping[str, object],
    repository: SnapshotRepositoryPort | None = None,
    settings: DashboardSettings | None = None,
) -> dict:
    """Return the overview payload for request parameters."""

    def run() -> dict:
        filters = parse_snapshot_filters(params)
        resolved = settings or build_settings()
        use_case = GetOverviewUseCase(
            repository or build_snapshot_repository(),
            logger=get_app_logger(),
            trend_month_limit=resolved.trend_month_limit,
            trend_max_workers=resolved.trend_max_workers,
        )
        return overview_payload(use_case.execute(filters))

    return _serve("overview", params, run)


def months_view(
    params: Mapping[str, object],
    repository: SnapshotRepositoryPort | None = None,
) -> dict:
    """Return the months holding snapshots for a client, newest first."""

    def run() -> dict:
        client_id = parse_client_id(params.get("client_id"))
        use_case = GetSnapshotMonthsUseCase(
            repository or build_snapshot_repository(),
            logger=get_app_logger(),
        )
        return months_payload(use_case.execute(client_id))

    return _serve("months", params, run)


def _serve(view: str, params: Mapping[str, object], run) -> dict:
    get_usage_logger().info(
        f"view={view} client_id={params.get('client_id')}"
    )
    try:
        return run()
    except ValidationError as exc:
        get_app_logger().warning(f"Rejected {view} request: {exc}")
        return error_payload(str(exc))
    except UpstreamFetchError as exc:
        get_app_logger().error(f"Upstream failure in {view} view: {exc}")
        return error_payload(UPSTREAM_ERROR_MESSAGE)


__all__ = [
    "custodian_view",
    "cash_view",
    "overview_view",
    "months_view",
    "UPSTREAM_ERROR_MESSAGE",
]
