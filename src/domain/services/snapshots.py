"""Conversion of raw snapshot-store blocks into Snapshot models."""

from collections.abc import Mapping
from logging import Logger

from src.domain.constants import BUCKET_ALIASES
from src.domain.models.snapshots import Snapshot
from src.domain.services.buckets import normalize_bucket
from src.domain.services.normalization import (
    normalize_label,
    parse_snapshot_date,
)


def parse_snapshot(
    block: Mapping,
    client_id: int | None,
    *,
    aliases: Mapping[str, str] = BUCKET_ALIASES,
    logger: Logger | None = None,
) -> Snapshot:
    """Build a Snapshot from one per-bank block of the store payload.

    Only keys present in the alias table are read as buckets; every other key
    is descriptive and stays available through ``Snapshot.source``.

    Args:
        block: Raw per-bank block.
        client_id: Client the block was fetched for.
        aliases: Source bucket spelling to canonical bucket mapping.
        logger: Optional logger used for bucket shape warnings.

    Returns:
        Snapshot: Normalized snapshot.
    """
    buckets = {
        key: normalize_bucket(value, logger=logger, name=key)
        for key, value in block.items()
        if key in aliases
    }
    return Snapshot(
        client_id=client_id,
        bank=normalize_label(block.get("bank")),
        account_number=normalize_label(block.get("account_number")),
        as_of_date=parse_snapshot_date(block.get("as_of_date")),
        buckets=buckets,
        source=block,
    )


__all__ = ["parse_snapshot"]
