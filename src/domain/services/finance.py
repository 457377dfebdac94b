"""Domain services for consolidated portfolio aggregates."""

from collections.abc import Iterable, Mapping
from decimal import Decimal
from logging import Logger
from typing import TypeVar

from src.domain.constants import BUCKET_ALIASES, CANONICAL_BUCKETS, LOANS_BUCKET
from src.domain.models import AggregateResult, Snapshot, SummaryCards
from src.domain.services.buckets import canonical_bucket, rows_of, sum_of
from src.domain.services.validation import validate_bucket_sign
from src.utils.decimal_utils import round_amount

K = TypeVar("K")


def aggregate_snapshots(
    snapshots: Iterable[Snapshot],
    *,
    aliases: Mapping[str, str] = BUCKET_ALIASES,
    logger: Logger | None = None,
) -> AggregateResult:
    """Consolidate snapshots into bank, currency, account and bucket totals.

    Bank totals use each bucket's total value (declared subtotal first) with
    loans keeping their sign. Currency and account splits walk the rows of
    every bucket and skip zero balances, so no zero-valued line is created.

    Args:
        snapshots: Already-selected snapshots.
        aliases: Source bucket spelling to canonical bucket mapping.
        logger: Optional logger used for sign-convention warnings.

    Returns:
        AggregateResult: Rounded totals and cross-tabulations.
    """
    bank_totals: dict[str, Decimal] = {}
    currency_totals: dict[str, Decimal] = {}
    matrix: dict[str, dict[str, Decimal]] = {}
    account_totals: dict[tuple[str, str], Decimal] = {}
    account_currency: dict[tuple[str, str], dict[str, Decimal]] = {}
    bucket_totals: dict[str, Decimal] = {
        name: Decimal("0") for name in CANONICAL_BUCKETS
    }

    for snapshot in snapshots:
        bank = snapshot.bank
        account_key = (bank, snapshot.account_number)
        net = Decimal("0")
        snapshot_buckets: dict[str, Decimal] = {}

        for key, bucket in snapshot.buckets.items():
            canonical = canonical_bucket(key, aliases)
            if canonical is None:
                continue
            amount = sum_of(bucket)
            net += amount
            snapshot_buckets[canonical] = (
                snapshot_buckets.get(canonical, Decimal("0")) + amount
            )
            for row in rows_of(bucket):
                if row.balance == 0:
                    continue
                _add(currency_totals, row.currency, row.balance)
                _add(matrix.setdefault(bank, {}), row.currency, row.balance)
                _add(account_totals, account_key, row.balance)
                _add(
                    account_currency.setdefault(account_key, {}),
                    row.currency,
                    row.balance,
                )

        for canonical, amount in snapshot_buckets.items():
            _add(bucket_totals, canonical, amount)
            if logger is not None:
                validate_bucket_sign(canonical, amount, bank, logger)
        _add(bank_totals, bank, net)

    gross_assets = sum(
        (
            amount
            for name, amount in bucket_totals.items()
            if name != LOANS_BUCKET
        ),
        Decimal("0"),
    )
    loans_total = bucket_totals.get(LOANS_BUCKET, Decimal("0"))

    return AggregateResult(
        bank_totals=_round_values(bank_totals),
        currency_totals=_round_values(currency_totals),
        bank_currency_matrix={
            bank: _round_values(row) for bank, row in matrix.items()
        },
        account_totals=dict(
            sort_by_magnitude(_round_values(account_totals))
        ),
        account_currency_breakdown={
            key: dict(sort_by_magnitude(_round_values(items)))
            for key, items in account_currency.items()
        },
        bucket_totals=_round_values(bucket_totals),
        gross_assets=round_amount(gross_assets),
        loans_total=round_amount(loans_total),
        net_assets=round_amount(gross_assets + loans_total),
    )


def compute_summary_cards(aggregate: AggregateResult) -> SummaryCards:
    """Build the overview cards from an aggregate.

    ``net_assets`` comes from bucket totals and ``aum_from_banks`` from bank
    totals; the two are reported side by side and never reconciled.

    Args:
        aggregate: Result of one aggregation pass.

    Returns:
        SummaryCards: Headline figures.
    """
    return SummaryCards(
        total_assets=aggregate.gross_assets,
        total_liabilities=aggregate.loans_total,
        net_assets=aggregate.net_assets,
        aum_from_banks=aggregate.aum_from_banks,
    )


def sort_by_magnitude(amounts: Mapping[K, Decimal]) -> list[tuple[K, Decimal]]:
    """Return items ordered by descending absolute amount, ties kept in order."""
    return sorted(amounts.items(), key=lambda item: abs(item[1]), reverse=True)


def _add(totals: dict, key, amount: Decimal) -> None:
    totals[key] = totals.get(key, Decimal("0")) + amount


def _round_values(amounts: Mapping[K, Decimal]) -> dict[K, Decimal]:
    return {key: round_amount(amount) for key, amount in amounts.items()}


__all__ = [
    "aggregate_snapshots",
    "compute_summary_cards",
    "sort_by_magnitude",
]
