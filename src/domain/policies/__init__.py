"""Domain policies package."""

from .account_filters import filter_snapshots, matches_account, matches_custodian
from .selection import (
    SelectionPolicy,
    SnapshotSelection,
    apply_selection_policy,
    choose_selection_policy,
    latest_per_bank,
    latest_snapshot_set,
)

__all__ = [
    "filter_snapshots",
    "matches_account",
    "matches_custodian",
    "SelectionPolicy",
    "SnapshotSelection",
    "apply_selection_policy",
    "choose_selection_policy",
    "latest_per_bank",
    "latest_snapshot_set",
]
