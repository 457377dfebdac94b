"""Parsing and validation of snapshot query parameters."""

from collections.abc import Mapping
from datetime import date
from decimal import Decimal, InvalidOperation

from src.application.errors import ValidationError
from src.domain.models import MonthRef, SnapshotFilters
from src.domain.services.normalization import parse_snapshot_date

ALL_ACCOUNTS = "ALL"


def parse_snapshot_filters(params: Mapping[str, object]) -> SnapshotFilters:
    """Build validated filters from raw request parameters.

    Args:
        params: Query-string or body parameters. Recognized keys are
            client_id, custodian, account, from/date_from, to/date_to,
            year, month and month_date.

    Returns:
        SnapshotFilters: Validated filters.

    Raises:
        ValidationError: If client_id is missing, non-numeric, or not
            positive, or if a date bound or month is invalid.
    """
    client_id = parse_client_id(params.get("client_id"))
    start_date = _parse_bound(_first(params, "from", "date_from"), "from")
    end_date = _parse_bound(_first(params, "to", "date_to"), "to")
    if start_date and end_date and start_date > end_date:
        raise ValidationError(
            f"from ({start_date}) must not be after to ({end_date})"
        )
    return SnapshotFilters(
        client_id=client_id,
        custodian=_clean_text(params.get("custodian")),
        account=_parse_account(params.get("account")),
        start_date=start_date,
        end_date=end_date,
        month=_parse_month(
            params.get("year"),
            params.get("month"),
            params.get("month_date"),
        ),
    )


def parse_client_id(value) -> int:
    """Validate a client identifier.

    Args:
        value: Raw identifier (int or numeric string).

    Returns:
        int: Positive client identifier.

    Raises:
        ValidationError: If the identifier is missing or invalid.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError("client_id is required")
    number = _parse_number(value)
    if number is None or number != number.to_integral_value():
        raise ValidationError(f"client_id must be an integer, got {value!r}")
    client_id = int(number)
    if client_id <= 0:
        raise ValidationError(f"client_id must be positive, got {client_id}")
    return client_id


def _parse_number(value) -> Decimal | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        raw = str(value)
    elif isinstance(value, str):
        raw = value.strip()
    else:
        return None
    try:
        number = Decimal(raw)
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


def _optional_int(value) -> int | None:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    number = _parse_number(value)
    if number is None or number != number.to_integral_value():
        return None
    return int(number) or None


def _parse_month(year, month, month_date) -> MonthRef | None:
    year_value = _optional_int(year)
    month_value = _optional_int(month)
    if year_value and month_value:
        if not 1 <= month_value <= 12:
            raise ValidationError(f"month must be between 1 and 12, got {month}")
        if not 1 <= year_value <= 9999:
            raise ValidationError(f"year is out of range, got {year}")
        return MonthRef(year=year_value, month=month_value)
    if month_date:
        return _parse_month_date(str(month_date))
    return None


def _parse_month_date(value: str) -> MonthRef | None:
    parsed = parse_snapshot_date(value)
    if parsed is not None:
        return MonthRef.from_date(parsed)
    try:
        return MonthRef.from_date(date.fromisoformat(f"{value.strip()[:7]}-01"))
    except ValueError:
        return None


def _parse_bound(value, name: str) -> date | None:
    if value is None:
        return None
    if isinstance(value, date):
        return parse_snapshot_date(value)
    text = str(value).strip()
    if not text:
        return None
    parsed = parse_snapshot_date(text)
    if parsed is None:
        raise ValidationError(f"{name} must be an ISO date (YYYY-MM-DD), got {text!r}")
    return parsed


def _parse_account(value) -> str | None:
    account = _clean_text(value)
    if account is None or account == ALL_ACCOUNTS:
        return None
    return account


def _clean_text(value) -> str | None:
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None


def _first(params: Mapping[str, object], *keys: str):
    for key in keys:
        value = params.get(key)
        if value is not None:
            return value
    return None


__all__ = ["parse_snapshot_filters", "parse_client_id", "ALL_ACCOUNTS"]
