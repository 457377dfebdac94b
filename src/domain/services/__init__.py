"""Domain services package."""

from .buckets import normalize_bucket, parse_row, rows_of, sum_of
from .finance import (
    aggregate_snapshots,
    compute_summary_cards,
    sort_by_magnitude,
)
from .normalization import (
    normalize_currency,
    normalize_custodian,
    normalize_label,
    parse_snapshot_date,
)
from .snapshots import parse_snapshot
from .validation import validate_bucket_sign

__all__ = [
    "normalize_bucket",
    "parse_row",
    "rows_of",
    "sum_of",
    "aggregate_snapshots",
    "compute_summary_cards",
    "sort_by_magnitude",
    "normalize_currency",
    "normalize_custodian",
    "normalize_label",
    "parse_snapshot_date",
    "parse_snapshot",
    "validate_bucket_sign",
]
