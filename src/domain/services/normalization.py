"""Domain normalization helpers."""

from datetime import date, datetime

from src.domain.constants import DEFAULT_CURRENCY, PLACEHOLDER


def normalize_label(value) -> str:
    """Normalize bank and account labels from a snapshot block.

    Args:
        value: Raw bank name or account number.

    Returns:
        str: Stripped label, or the placeholder when missing or blank.
    """
    if value is None:
        return PLACEHOLDER
    cleaned = str(value).strip()
    return cleaned if cleaned else PLACEHOLDER


def normalize_currency(value) -> str:
    """Normalize currency codes from a holding row.

    Args:
        value: Raw currency value.

    Returns:
        str: Upper-cased code, or the default currency when missing.
    """
    if value is None:
        return DEFAULT_CURRENCY
    cleaned = str(value).strip()
    return cleaned.upper() if cleaned else DEFAULT_CURRENCY


def normalize_custodian(value: str | None) -> str | None:
    """Normalize a custodian name for case-insensitive comparison.

    Args:
        value: Raw custodian name.

    Returns:
        str | None: Case-folded name, or None when blank.
    """
    if not value:
        return None
    cleaned = value.strip()
    return cleaned.casefold() if cleaned else None


def parse_snapshot_date(value) -> date | None:
    """Parse the as-of date of a snapshot block.

    Args:
        value: ISO date string, date, or datetime.

    Returns:
        date | None: Parsed date, or None when missing or unparseable.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if len(text) < 10:
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


__all__ = [
    "normalize_label",
    "normalize_currency",
    "normalize_custodian",
    "parse_snapshot_date",
]
