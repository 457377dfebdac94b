"""Application use cases package."""

from .get_cash_distribution import GetCashDistributionUseCase
from .get_custodian_distribution import GetCustodianDistributionUseCase
from .get_overview import GetOverviewUseCase
from .get_snapshot_months import GetSnapshotMonthsUseCase
from .reporting_months import (
    MonthSnapshotLoader,
    candidate_months,
    resolve_reporting_month,
)
from .select_snapshots import SelectSnapshotsUseCase
from .snapshot_filters import parse_client_id, parse_snapshot_filters

__all__ = [
    "GetCashDistributionUseCase",
    "GetCustodianDistributionUseCase",
    "GetOverviewUseCase",
    "GetSnapshotMonthsUseCase",
    "MonthSnapshotLoader",
    "candidate_months",
    "resolve_reporting_month",
    "SelectSnapshotsUseCase",
    "parse_client_id",
    "parse_snapshot_filters",
]
