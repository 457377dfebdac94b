"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

_CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Non-numeric input (None, booleans, unparseable strings, NaN, infinities)
    becomes zero instead of raising.

    Args:
        value: Raw numeric value from a snapshot payload or adapter.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal("0")
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return Decimal("0")
    elif not isinstance(value, (int, float)):
        return Decimal("0")
    try:
        result = Decimal(str(value))
    except InvalidOperation:
        return Decimal("0")
    return result if result.is_finite() else Decimal("0")


def is_numeric(value) -> bool:
    """Return True when the value is a finite number or numeric string.

    Args:
        value: Raw value to inspect.

    Returns:
        bool: True when coerce_decimal would keep the value.
    """
    if value is None or isinstance(value, bool):
        return False
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, (int, float)):
        return Decimal(str(value)).is_finite()
    if isinstance(value, str) and value.strip():
        try:
            return Decimal(value.strip()).is_finite()
        except InvalidOperation:
            return False
    return False


def round_amount(value: Decimal) -> Decimal:
    """Round an amount half-up to two decimals.

    Args:
        value: Full-precision amount.

    Returns:
        Decimal: Amount quantized to cents.
    """
    with localcontext() as ctx:
        # Keep every integer digit plus the two cents.
        ctx.prec = max(28, value.adjusted() + 3)
        return value.quantize(_CENT, rounding=ROUND_HALF_UP)


__all__ = ["coerce_decimal", "is_numeric", "round_amount"]
