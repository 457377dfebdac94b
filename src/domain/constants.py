"""Domain constants for snapshot aggregation."""

from datetime import date

CANONICAL_BUCKETS = (
    "cash_equivalents",
    "direct_fixed_income",
    "fixed_income_funds",
    "direct_equities",
    "equities_fund",
    "alternative_fund",
    "structured_product",
    "loans",
)

LOANS_BUCKET = "loans"

BUCKET_LABELS = {
    "cash_equivalents": "Cash And Equivalents",
    "direct_fixed_income": "Direct Fixed Income",
    "fixed_income_funds": "Fixed Income Funds",
    "direct_equities": "Direct Equities",
    "equities_fund": "Equities Fund",
    "alternative_fund": "Alternative Fund",
    "structured_product": "Structured Product",
    "loans": "Loans",
}

# Source spellings seen across custodians, mapped to the canonical bucket.
BUCKET_ALIASES = {
    "cash_equivalents": "cash_equivalents",
    "cash_and_equivalents": "cash_equivalents",
    "direct_fixed_income": "direct_fixed_income",
    "fixed_income_funds": "fixed_income_funds",
    "direct_equities": "direct_equities",
    "equities_fund": "equities_fund",
    "equity_funds": "equities_fund",
    "alternative_fund": "alternative_fund",
    "alternative_funds": "alternative_fund",
    "structured_product": "structured_product",
    "structured_products": "structured_product",
    "loans": "loans",
}

PLACEHOLDER = "—"
DEFAULT_CURRENCY = "USD"

RANGE_START = date(1900, 1, 1)
RANGE_END = date(9999, 12, 31)

DEFAULT_TREND_MONTHS = 12

CHART_PALETTE = (
    "#4F6CF0",
    "#34d399",
    "#fbbf24",
    "#f472b6",
    "#38bdf8",
    "#a78bfa",
    "#ef4444",
    "#10b981",
    "#22d3ee",
    "#fb7185",
)


__all__ = [
    "CANONICAL_BUCKETS",
    "LOANS_BUCKET",
    "BUCKET_LABELS",
    "BUCKET_ALIASES",
    "PLACEHOLDER",
    "DEFAULT_CURRENCY",
    "RANGE_START",
    "RANGE_END",
    "DEFAULT_TREND_MONTHS",
    "CHART_PALETTE",
]
