"""Shape use-case results into the JSON payloads served to dashboard pages.

Amounts leave the domain as Decimal and are emitted as floats here. Nothing in
this module computes totals; it only orders, labels and colors them.
"""

from collections.abc import Iterable, Mapping, Sequence
from decimal import Decimal

from src.domain.constants import (
    BUCKET_LABELS,
    CANONICAL_BUCKETS,
    CHART_PALETTE,
    PLACEHOLDER,
)
from src.domain.models import (
    AggregateResult,
    DistributionView,
    MonthRef,
    OverviewView,
    TrendPoint,
)
from src.utils.decimal_utils import round_amount


def palette(count: int) -> list[str]:
    """Return ``count`` chart colors, cycling through the palette."""
    return [CHART_PALETTE[index % len(CHART_PALETTE)] for index in range(count)]


def to_float(value: Decimal) -> float:
    return float(round_amount(value))


def distribution_payload(view: DistributionView) -> dict:
    """Build the custodian/cash distribution payload.

    Args:
        view: Result of a distribution use case.

    Returns:
        dict: Payload with ``totals`` and the ``cash`` splits.
    """
    aggregate = view.aggregate
    currencies = list(aggregate.currency_totals)
    banks = list(aggregate.bank_totals)
    return {
        "status": "ok",
        "month_date": _iso(view.month_date),
        "totals": {"grand_total": to_float(aggregate.grand_total)},
        "cash": {
            "by_currency": _split(aggregate.currency_totals, "currency"),
            "by_bank": _split(aggregate.bank_totals, "bank"),
            "by_account": [
                {"bank": bank, "account": account, "amount": to_float(amount)}
                for (bank, account), amount in aggregate.account_totals.items()
                if account != PLACEHOLDER
            ],
            "by_account_currency": [
                {
                    "bank": bank,
                    "account": account,
                    "items": [
                        {"currency": currency, "amount": to_float(amount)}
                        for currency, amount in items.items()
                    ],
                }
                for (bank, account), items in (
                    aggregate.account_currency_breakdown.items()
                )
            ],
            "bank_currency": {
                "banks": banks,
                "currencies": currencies,
                "matrix": [
                    [
                        to_float(
                            aggregate.bank_currency_matrix.get(bank, {}).get(
                                currency, Decimal("0")
                            )
                        )
                        for currency in currencies
                    ]
                    for bank in banks
                ],
            },
        },
    }


def overview_payload(view: OverviewView | None) -> dict:
    """Build the overview payload.

    Args:
        view: Result of the overview use case, or None when the client has no
            reporting month.

    Returns:
        dict: Payload with ``overview_data`` and ``computed`` sections.
    """
    if view is None:
        return {"status": "ok", "overview_data": [], "computed": None}
    aggregate = view.aggregate
    cards = view.cards
    return {
        "status": "ok",
        "overview_data": [
            {
                "month_date": view.month_date.isoformat(),
                "pie_chart_data": {"charts": overview_charts(aggregate)},
                "table_data": {
                    "tableData": [dict(item.source) for item in view.snapshots]
                },
            }
        ],
        "computed": {
            "cards": {
                "total_assets": to_float(cards.total_assets),
                "total_liabilities": to_float(cards.total_liabilities),
                "net_assets": to_float(cards.net_assets),
                "aum_from_banks": to_float(cards.aum_from_banks),
            },
            "breakdown": {
                BUCKET_LABELS[name]: to_float(aggregate.bucket_totals[name])
                for name in CANONICAL_BUCKETS
            },
            "trend": trend_payload(view.trend),
        },
    }


def overview_charts(aggregate: AggregateResult) -> list[dict]:
    """Return the bank, asset-class and currency charts of the overview."""
    currencies = sorted(
        aggregate.currency_totals.items(),
        key=lambda item: item[1],
        reverse=True,
    )
    return [
        _chart("AUM_ratio", aggregate.bank_totals.items()),
        _chart(
            "overall_asset_class_breakdown",
            (
                (BUCKET_LABELS[name], aggregate.bucket_totals[name])
                for name in CANONICAL_BUCKETS
            ),
        ),
        _chart("overall_currency_breakdown", currencies),
    ]


def trend_payload(points: Sequence[TrendPoint]) -> list[dict]:
    return [
        {
            "y": point.month.year,
            "m": point.month.month,
            "label": point.month.label,
            "net_assets": to_float(point.net_assets),
        }
        for point in points
    ]


def months_payload(months: Iterable[MonthRef]) -> dict:
    return {"status": "ok", "months": [month.key for month in months]}


def error_payload(message: str) -> dict:
    return {"status": "error", "message": message}


def _split(amounts: Mapping[str, Decimal], key: str) -> dict:
    labels = list(amounts)
    data = [to_float(amounts[label]) for label in labels]
    return {
        "labels": labels,
        "data": data,
        "colors": palette(len(labels)),
        "pairs": [
            {key: label, "amount": amount} for label, amount in zip(labels, data)
        ],
    }


def _chart(title: str, items: Iterable[tuple[str, Decimal]]) -> dict:
    pairs = list(items)
    return {
        "title": title,
        "labels": [label for label, _ in pairs],
        "data": [to_float(amount) for _, amount in pairs],
        "colors": palette(len(pairs)),
    }


def _iso(value) -> str | None:
    return value.isoformat() if value is not None else None


__all__ = [
    "palette",
    "to_float",
    "distribution_payload",
    "overview_payload",
    "overview_charts",
    "trend_payload",
    "months_payload",
    "error_payload",
]
