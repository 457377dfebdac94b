"""Bucket normalization for snapshot payloads.

Custodian extractions deliver a bucket either as a bare list of rows or as a
record holding ``rows`` and a declared ``subtotal``. ``normalize_bucket`` is the
single place where raw payload values are turned into a ``BucketBlock``; every
other service reads buckets through ``rows_of`` and ``sum_of``.
"""

from collections.abc import Mapping, Sequence
from decimal import Decimal
from logging import Logger

from src.domain.models.snapshots import BucketBlock, BucketRecord, BucketRows, Row
from src.domain.services.normalization import normalize_currency
from src.utils.decimal_utils import coerce_decimal, is_numeric

BALANCE_FIELDS = ("balanceUsd", "balance_usd", "balance")
CURRENCY_FIELDS = ("currency", "ccy")
SUBTOTAL_FIELDS = ("subtotal", "subtotalUsd", "subtotal_usd")


def _first_present(raw: Mapping, fields: tuple[str, ...]):
    for name in fields:
        value = raw.get(name)
        if value is not None:
            return value
    return None


def parse_row(raw) -> Row:
    """Build a Row from a raw holding line.

    Args:
        raw: Mapping describing one holding line.

    Returns:
        Row: Row with defaulted currency and coerced balance.
    """
    if not isinstance(raw, Mapping):
        return Row(currency=normalize_currency(None), balance=Decimal("0"))
    return Row(
        currency=normalize_currency(_first_present(raw, CURRENCY_FIELDS)),
        balance=coerce_decimal(_first_present(raw, BALANCE_FIELDS)),
    )


def _parse_rows(raw_rows) -> tuple[Row, ...]:
    if isinstance(raw_rows, Sequence) and not isinstance(raw_rows, (str, bytes)):
        return tuple(parse_row(item) for item in raw_rows)
    return ()


def normalize_bucket(
    raw,
    logger: Logger | None = None,
    name: str | None = None,
) -> BucketBlock:
    """Turn a raw bucket value into a BucketBlock.

    Unknown shapes are logged and treated as an empty bucket so aggregation
    can continue with a partial result.

    Args:
        raw: Raw bucket value from the snapshot payload.
        logger: Optional logger used for shape warnings.
        name: Optional bucket key, used in warnings.

    Returns:
        BucketBlock: Normalized bucket.
    """
    if raw is None:
        return BucketRows()
    if isinstance(raw, (BucketRows, BucketRecord)):
        return raw
    if isinstance(raw, Mapping):
        subtotal_raw = _first_present(raw, SUBTOTAL_FIELDS)
        subtotal = (
            coerce_decimal(subtotal_raw) if is_numeric(subtotal_raw) else None
        )
        return BucketRecord(rows=_parse_rows(raw.get("rows")), subtotal=subtotal)
    if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
        return BucketRows(rows=_parse_rows(raw))
    if logger is not None:
        logger.warning(
            f"Ignoring bucket {name or '?'} with unexpected shape "
            f"{type(raw).__name__}"
        )
    return BucketRows()


def rows_of(bucket: BucketBlock | None) -> tuple[Row, ...]:
    """Return the rows of a bucket, ignoring any declared subtotal.

    Args:
        bucket: Normalized bucket, or None when absent.

    Returns:
        tuple[Row, ...]: Rows in source order.
    """
    if bucket is None:
        return ()
    return bucket.rows


def sum_of(bucket: BucketBlock | None) -> Decimal:
    """Return the total value of a bucket.

    A declared subtotal takes precedence over the sum of the rows, even when
    the two disagree.

    Args:
        bucket: Normalized bucket, or None when absent.

    Returns:
        Decimal: Full-precision bucket total.
    """
    if isinstance(bucket, BucketRecord) and bucket.subtotal is not None:
        return bucket.subtotal
    return sum((row.balance for row in rows_of(bucket)), Decimal("0"))


def canonical_bucket(
    name: str,
    aliases: Mapping[str, str],
) -> str | None:
    """Return the canonical bucket for a source key, or None if unknown."""
    return aliases.get(name)


__all__ = [
    "parse_row",
    "normalize_bucket",
    "rows_of",
    "sum_of",
    "canonical_bucket",
]
