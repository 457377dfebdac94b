"""Tests for the snapshot aggregator and summary cards."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.domain.constants import CANONICAL_BUCKETS, PLACEHOLDER
from src.domain.services.finance import (
    aggregate_snapshots,
    compute_summary_cards,
    sort_by_magnitude,
)
from src.domain.services.snapshots import parse_snapshot


def _snapshot(bank=None, account=None, as_of="2025-07-31", **buckets):
    block = {"bank": bank, "account_number": account, "as_of_date": as_of}
    block.update(buckets)
    return parse_snapshot(block, client_id=1)


def _two_bank_fixture():
    return [
        _snapshot(
            bank="A",
            account="A-1",
            cash_equivalents=[{"currency": "USD", "balance": 1000}],
            loans=[{"currency": "USD", "balance": -200}],
        ),
        _snapshot(
            bank="B",
            account="B-1",
            cash_equivalents=[{"currency": "EUR", "balance": 500}],
        ),
    ]


def test_end_to_end_totals() -> None:
    """Two banks with cash and a loan consolidate into the expected totals."""
    result = aggregate_snapshots(_two_bank_fixture())

    assert result.bank_totals == {"A": Decimal("800.00"), "B": Decimal("500.00")}
    assert result.currency_totals == {
        "USD": Decimal("800.00"),
        "EUR": Decimal("500.00"),
    }
    assert result.gross_assets == Decimal("1500.00")
    assert result.loans_total == Decimal("-200.00")
    assert result.net_assets == Decimal("1300.00")
    assert result.bank_currency_matrix == {
        "A": {"USD": Decimal("800.00")},
        "B": {"EUR": Decimal("500.00")},
    }


def test_bank_totals_sum_to_net_assets() -> None:
    """Per-bank totals include every bucket, loans too."""
    snapshots = _two_bank_fixture() + [
        _snapshot(
            bank="C",
            direct_equities={"rows": [{"balance": "10.333"}], "subtotal": "10.333"},
            structured_products=[{"balance": "0.004"}],
        )
    ]

    result = aggregate_snapshots(snapshots)

    assert abs(result.aum_from_banks - result.net_assets) <= Decimal("0.01")


def test_alias_buckets_merge_into_canonical_total() -> None:
    """equity_funds and equities_fund land in the same bucket."""
    snapshots = [
        _snapshot(bank="UBS", equity_funds=[{"balance": 300}]),
        _snapshot(bank="UBS", equities_fund=[{"balance": 200}]),
    ]

    result = aggregate_snapshots(snapshots)

    assert result.bucket_totals["equities_fund"] == Decimal("500.00")
    assert result.bank_totals == {"UBS": Decimal("500.00")}


def test_every_canonical_bucket_is_reported() -> None:
    """Buckets absent from all snapshots report zero."""
    result = aggregate_snapshots([])

    assert list(result.bucket_totals) == list(CANONICAL_BUCKETS)
    assert all(value == Decimal("0") for value in result.bucket_totals.values())
    assert result.net_assets == Decimal("0.00")


def test_missing_bank_is_aggregated_under_placeholder() -> None:
    """A snapshot without a bank is never dropped."""
    result = aggregate_snapshots(
        [_snapshot(cash_equivalents=[{"currency": "USD", "balance": 50}])]
    )

    assert result.bank_totals == {PLACEHOLDER: Decimal("50.00")}
    assert result.account_totals == {(PLACEHOLDER, PLACEHOLDER): Decimal("50.00")}


def test_zero_balance_rows_create_no_lines() -> None:
    """Zero rows count toward bucket totals but add no currency entry."""
    result = aggregate_snapshots(
        [
            _snapshot(
                bank="A",
                account="1",
                cash_equivalents=[
                    {"currency": "GBP", "balance": 0},
                    {"currency": "USD", "balance": 25},
                ],
            )
        ]
    )

    assert "GBP" not in result.currency_totals
    assert result.account_currency_breakdown == {("A", "1"): {"USD": Decimal("25.00")}}
    assert result.bucket_totals["cash_equivalents"] == Decimal("25.00")


def test_subtotal_drives_bank_total_while_rows_drive_currency_split() -> None:
    """Bank totals use the declared subtotal; currency splits use rows."""
    result = aggregate_snapshots(
        [
            _snapshot(
                bank="A",
                direct_fixed_income={
                    "rows": [{"currency": "USD", "balance": 90}],
                    "subtotal": 100,
                },
            )
        ]
    )

    assert result.bank_totals["A"] == Decimal("100.00")
    assert result.currency_totals["USD"] == Decimal("90.00")


def test_rounding_is_half_up_at_cent_boundary() -> None:
    """Amounts ending in a half cent round away from zero."""
    result = aggregate_snapshots(
        [
            _snapshot(
                bank="A",
                cash_equivalents=[{"currency": "USD", "balance": "0.125"}],
                loans=[{"currency": "USD", "balance": "-2.675"}],
            )
        ]
    )

    assert result.bucket_totals["cash_equivalents"] == Decimal("0.13")
    assert result.loans_total == Decimal("-2.68")


def test_aggregation_is_idempotent() -> None:
    """Running twice on the same input yields equal results."""
    snapshots = _two_bank_fixture()

    assert aggregate_snapshots(snapshots) == aggregate_snapshots(snapshots)


def test_account_totals_sorted_by_magnitude() -> None:
    """Account totals come out ordered by absolute amount."""
    result = aggregate_snapshots(
        [
            _snapshot(bank="A", account="small", cash_equivalents=[{"balance": 5}]),
            _snapshot(bank="A", account="loan", loans=[{"balance": -900}]),
            _snapshot(bank="B", account="big", cash_equivalents=[{"balance": 100}]),
        ]
    )

    assert list(result.account_totals) == [("A", "loan"), ("B", "big"), ("A", "small")]


def test_sign_warnings_are_logged_without_changing_totals() -> None:
    """Positive loans are reported, not corrected."""
    logger = MagicMock()

    result = aggregate_snapshots(
        [_snapshot(bank="A", loans=[{"balance": 10}])],
        logger=logger,
    )

    assert result.loans_total == Decimal("10.00")
    logger.warning.assert_called_once()


def test_summary_cards_expose_both_net_figures() -> None:
    """Cards carry net assets and the bank-derived figure side by side."""
    cards = compute_summary_cards(aggregate_snapshots(_two_bank_fixture()))

    assert cards.total_assets == Decimal("1500.00")
    assert cards.total_liabilities == Decimal("-200.00")
    assert cards.net_assets == Decimal("1300.00")
    assert cards.aum_from_banks == Decimal("1300.00")
    assert cards.divergence == Decimal("0")


def test_sort_by_magnitude_keeps_ties_in_order() -> None:
    """Equal magnitudes keep insertion order."""
    items = {"x": Decimal("-5"), "y": Decimal("5"), "z": Decimal("7")}

    assert sort_by_magnitude(items) == [
        ("z", Decimal("7")),
        ("x", Decimal("-5")),
        ("y", Decimal("5")),
    ]


def test_snapshot_dates_do_not_affect_totals() -> None:
    """Aggregation works on whatever set it is given."""
    snapshots = [
        _snapshot(bank="A", as_of=str(date(2024, 1, 31)), cash_equivalents=[{"balance": 1}]),
        _snapshot(bank="A", as_of=str(date(2025, 1, 31)), cash_equivalents=[{"balance": 2}]),
    ]

    assert aggregate_snapshots(snapshots).bank_totals == {"A": Decimal("3.00")}


def test_grand_total_sums_currency_totals() -> None:
    """The grand total is the sum of the per-currency split."""
    result = aggregate_snapshots(_two_bank_fixture())

    assert result.grand_total == Decimal("1300.00")
    assert result.grand_total == result.aum_from_banks


def test_very_large_balances_aggregate_without_error() -> None:
    """Balances beyond 28 significant digits are rounded, not rejected."""
    result = aggregate_snapshots(
        [
            _snapshot(
                bank="A",
                cash_equivalents=[{"currency": "USD", "balance": "1e27"}],
            )
        ]
    )

    assert result.net_assets == Decimal("1e27")
    assert result.currency_totals == {"USD": Decimal("1e27")}
