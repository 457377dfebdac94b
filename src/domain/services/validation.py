"""Domain validation helpers."""

from decimal import Decimal
from logging import Logger

from src.domain.constants import LOANS_BUCKET


def validate_bucket_sign(
    bucket: str,
    amount: Decimal,
    bank: str,
    logger: Logger,
) -> None:
    """Warn when a bucket total violates the expected sign convention.

    Loans are carried as negative balances; every other bucket is expected to
    be non-negative. Amounts are reported, never corrected.

    Args:
        bucket: Canonical bucket name.
        amount: Bucket total for one snapshot.
        bank: Bank the snapshot belongs to.
        logger: Logger used for warnings.
    """
    if bucket == LOANS_BUCKET and amount > 0:
        logger.warning(
            f"Loans balance is positive for bank={bank}: {amount}"
        )
    if bucket != LOANS_BUCKET and amount < 0:
        logger.warning(
            f"Asset balance is negative for bank={bank}, bucket={bucket}: {amount}"
        )


__all__ = ["validate_bucket_sign"]
