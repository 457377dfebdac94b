"""Domain models for consolidated portfolio aggregates."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from src.domain.models.periods import MonthRef
from src.domain.models.snapshots import Snapshot


@dataclass(frozen=True)
class AggregateResult:
    """Totals produced by one aggregation pass over a snapshot set.

    Every amount is rounded half-up to two decimals; accumulation happens at
    full precision before rounding.

    Attributes:
        bank_totals: Net total per bank, loans included.
        currency_totals: Sum of non-zero row balances per currency.
        bank_currency_matrix: Per bank, sum of non-zero rows per currency.
        account_totals: Sum of non-zero rows per (bank, account).
        account_currency_breakdown: Per (bank, account), sum per currency.
        bucket_totals: Total per canonical bucket, aliases merged.
        gross_assets: Sum of every bucket except loans.
        loans_total: Signed loans total.
        net_assets: Gross assets plus the signed loans total.
    """

    bank_totals: dict[str, Decimal]
    currency_totals: dict[str, Decimal]
    bank_currency_matrix: dict[str, dict[str, Decimal]]
    account_totals: dict[tuple[str, str], Decimal]
    account_currency_breakdown: dict[tuple[str, str], dict[str, Decimal]]
    bucket_totals: dict[str, Decimal]
    gross_assets: Decimal
    loans_total: Decimal
    net_assets: Decimal

    @property
    def aum_from_banks(self) -> Decimal:
        """Return the sum of per-bank totals."""
        return sum(self.bank_totals.values(), Decimal("0"))

    @property
    def grand_total(self) -> Decimal:
        """Return the sum of currency totals."""
        return sum(self.currency_totals.values(), Decimal("0"))


@dataclass(frozen=True)
class SummaryCards:
    """Headline figures shown on the overview page."""

    total_assets: Decimal
    total_liabilities: Decimal
    net_assets: Decimal
    aum_from_banks: Decimal

    @property
    def divergence(self) -> Decimal:
        """Return aum_from_banks minus net_assets."""
        return self.aum_from_banks - self.net_assets


@dataclass(frozen=True)
class TrendPoint:
    """Net assets for one month of the trend series."""

    month: MonthRef
    net_assets: Decimal


@dataclass(frozen=True)
class DistributionView:
    """Aggregates backing the custodian and cash distribution pages."""

    aggregate: AggregateResult
    snapshots: list[Snapshot]
    month_date: date | None = None


@dataclass(frozen=True)
class OverviewView:
    """Aggregates, cards, and trend backing the overview page."""

    month_date: date
    snapshots: list[Snapshot]
    aggregate: AggregateResult
    cards: SummaryCards
    trend: list[TrendPoint] = field(default_factory=list)


__all__ = [
    "AggregateResult",
    "SummaryCards",
    "TrendPoint",
    "DistributionView",
    "OverviewView",
]
