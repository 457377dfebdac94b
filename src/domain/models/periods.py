"""Domain models for reporting periods and snapshot filters."""

from dataclasses import dataclass
from datetime import date

from src.domain.constants import RANGE_END, RANGE_START

_MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


@dataclass(frozen=True, order=True)
class MonthRef:
    """Calendar month used for month-pinned reporting."""

    year: int
    month: int

    @classmethod
    def from_date(cls, value: date) -> "MonthRef":
        """Return the month containing the given date."""
        return cls(year=value.year, month=value.month)

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def key(self) -> str:
        """Return the month as YYYY-MM."""
        return f"{self.year:04d}-{self.month:02d}"

    @property
    def label(self) -> str:
        """Return a short display label such as 'Jul 2025'."""
        return f"{_MONTH_ABBREVIATIONS[self.month - 1]} {self.year}"

    def contains(self, value: date) -> bool:
        return value.year == self.year and value.month == self.month


@dataclass(frozen=True)
class SnapshotFilters:
    """Validated filters for a snapshot query.

    Attributes:
        client_id: Positive client identifier.
        custodian: Optional custodian name, matched case-insensitively.
        account: Optional account number, matched exactly.
        start_date: Optional inclusive lower bound.
        end_date: Optional inclusive upper bound.
        month: Optional single month pin.
    """

    client_id: int
    custodian: str | None = None
    account: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    month: MonthRef | None = None

    @property
    def has_date_bounds(self) -> bool:
        return self.start_date is not None or self.end_date is not None

    @property
    def effective_start(self) -> date:
        return self.start_date or RANGE_START

    @property
    def effective_end(self) -> date:
        return self.end_date or RANGE_END


__all__ = ["MonthRef", "SnapshotFilters"]
