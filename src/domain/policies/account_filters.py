"""Custodian and account filters for snapshot sets."""

from collections.abc import Iterable

from src.domain.models import Snapshot
from src.domain.services.normalization import normalize_custodian


def matches_custodian(snapshot: Snapshot, custodian: str | None) -> bool:
    """Return True when the snapshot belongs to the custodian.

    Args:
        snapshot: Snapshot to evaluate.
        custodian: Custodian name; None matches every snapshot.

    Returns:
        bool: True when the bank matches case-insensitively.
    """
    wanted = normalize_custodian(custodian)
    if wanted is None:
        return True
    return normalize_custodian(snapshot.bank) == wanted


def matches_account(snapshot: Snapshot, account: str | None) -> bool:
    """Return True when the snapshot belongs to the account.

    Args:
        snapshot: Snapshot to evaluate.
        account: Account number; None matches every snapshot.

    Returns:
        bool: True when the account number matches exactly.
    """
    if account is None:
        return True
    return snapshot.account_number == account.strip()


def filter_snapshots(
    snapshots: Iterable[Snapshot],
    custodian: str | None = None,
    account: str | None = None,
) -> list[Snapshot]:
    """Keep the snapshots matching both filters, in input order."""
    return [
        snapshot
        for snapshot in snapshots
        if matches_custodian(snapshot, custodian)
        and matches_account(snapshot, account)
    ]


__all__ = ["matches_custodian", "matches_account", "filter_snapshots"]
