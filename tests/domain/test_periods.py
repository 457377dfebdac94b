"""Tests for month references and snapshot filters."""

from datetime import date

from src.domain.constants import RANGE_END, RANGE_START
from src.domain.models import MonthRef, SnapshotFilters


def test_month_ref_formats_key_and_label() -> None:
    """Months render as YYYY-MM and a short label."""
    month = MonthRef(2025, 7)

    assert month.key == "2025-07"
    assert month.label == "Jul 2025"
    assert month.first_day == date(2025, 7, 1)
    assert month.contains(date(2025, 7, 31))
    assert not month.contains(date(2024, 7, 31))


def test_month_ref_label_uses_fixed_english_abbreviations() -> None:
    """Labels do not depend on the process locale."""
    labels = [MonthRef(2024, month).label for month in range(1, 13)]

    assert labels == [
        "Jan 2024",
        "Feb 2024",
        "Mar 2024",
        "Apr 2024",
        "May 2024",
        "Jun 2024",
        "Jul 2024",
        "Aug 2024",
        "Sep 2024",
        "Oct 2024",
        "Nov 2024",
        "Dec 2024",
    ]


def test_month_refs_order_chronologically() -> None:
    """Sorting months yields chronological order."""
    months = [MonthRef(2025, 1), MonthRef(2024, 12), MonthRef(2025, 3)]

    assert sorted(months) == [MonthRef(2024, 12), MonthRef(2025, 1), MonthRef(2025, 3)]


def test_effective_bounds_fall_back_to_sentinels() -> None:
    """Open bounds are replaced by the far-past and far-future dates."""
    filters = SnapshotFilters(client_id=1, end_date=date(2025, 6, 30))

    assert filters.has_date_bounds
    assert filters.effective_start == RANGE_START
    assert filters.effective_end == date(2025, 6, 30)
    assert SnapshotFilters(client_id=1).effective_end == RANGE_END
