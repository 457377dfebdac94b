"""Domain models for custodian statement snapshots."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Union


@dataclass(frozen=True)
class Row:
    """Holding line inside a bucket.

    Attributes:
        currency: Currency code of the line.
        balance: Signed balance used for aggregation.
    """

    currency: str
    balance: Decimal


@dataclass(frozen=True)
class BucketRows:
    """Bucket delivered as a bare sequence of rows."""

    rows: tuple[Row, ...] = ()


@dataclass(frozen=True)
class BucketRecord:
    """Bucket delivered as a record holding rows and an optional subtotal.

    Attributes:
        rows: Holding lines of the bucket.
        subtotal: Declared subtotal; takes precedence over the row sum.
    """

    rows: tuple[Row, ...] = ()
    subtotal: Decimal | None = None


BucketBlock = Union[BucketRows, BucketRecord]


@dataclass(frozen=True)
class Snapshot:
    """One statement extraction for a bank account at a date.

    Attributes:
        client_id: Client owning the snapshot.
        bank: Custodian display name, or the placeholder when unknown.
        account_number: Account identifier, or the placeholder when unknown.
        as_of_date: Statement date, None when the source omits it.
        buckets: Buckets keyed by their source spelling.
        source: Raw block as delivered by the snapshot store.
    """

    client_id: int | None
    bank: str
    account_number: str
    as_of_date: date | None
    buckets: Mapping[str, BucketBlock]
    source: Mapping[str, Any] = field(
        default_factory=dict,
        repr=False,
        compare=False,
    )


__all__ = [
    "Row",
    "BucketRows",
    "BucketRecord",
    "BucketBlock",
    "Snapshot",
]
