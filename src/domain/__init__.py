"""Domain package for snapshot aggregation rules and core models."""

from .constants import (
    BUCKET_ALIASES,
    BUCKET_LABELS,
    CANONICAL_BUCKETS,
    LOANS_BUCKET,
    PLACEHOLDER,
)
from .models import (
    AggregateResult,
    BucketBlock,
    BucketRecord,
    BucketRows,
    MonthRef,
    Row,
    Snapshot,
    SnapshotFilters,
    SummaryCards,
    TrendPoint,
)
from .policies import (
    SelectionPolicy,
    SnapshotSelection,
    apply_selection_policy,
    choose_selection_policy,
)
from .services import (
    aggregate_snapshots,
    compute_summary_cards,
    normalize_bucket,
    parse_snapshot,
    rows_of,
    sum_of,
)

__all__ = [
    "BUCKET_ALIASES",
    "BUCKET_LABELS",
    "CANONICAL_BUCKETS",
    "LOANS_BUCKET",
    "PLACEHOLDER",
    "AggregateResult",
    "BucketBlock",
    "BucketRecord",
    "BucketRows",
    "MonthRef",
    "Row",
    "Snapshot",
    "SnapshotFilters",
    "SummaryCards",
    "TrendPoint",
    "SelectionPolicy",
    "SnapshotSelection",
    "apply_selection_policy",
    "choose_selection_policy",
    "aggregate_snapshots",
    "compute_summary_cards",
    "normalize_bucket",
    "parse_snapshot",
    "rows_of",
    "sum_of",
]
