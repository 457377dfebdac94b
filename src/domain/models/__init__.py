"""Domain models package."""

from .finance import (
    AggregateResult,
    DistributionView,
    OverviewView,
    SummaryCards,
    TrendPoint,
)
from .periods import MonthRef, SnapshotFilters
from .snapshots import (
    BucketBlock,
    BucketRecord,
    BucketRows,
    Row,
    Snapshot,
)

__all__ = [
    "AggregateResult",
    "DistributionView",
    "OverviewView",
    "SummaryCards",
    "TrendPoint",
    "MonthRef",
    "SnapshotFilters",
    "BucketBlock",
    "BucketRecord",
    "BucketRows",
    "Row",
    "Snapshot",
]
