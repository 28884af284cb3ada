"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from storage, JSON payloads or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def parse_optional_decimal(value) -> Decimal | None:
    """Parse a price-like value, keeping missing values missing.

    Args:
        value: Raw value, an empty string or None.

    Returns:
        Decimal | None: Parsed value, or None when nothing was given.

    Raises:
        ValueError: If the value is not a finite number.
    """
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    try:
        parsed = coerce_decimal(value.strip() if isinstance(value, str) else value)
    except InvalidOperation as exc:
        raise ValueError(f"Invalid decimal value: {value!r}") from exc
    if not parsed.is_finite():
        raise ValueError(f"Invalid decimal value: {value!r}")
    return parsed


__all__ = ["coerce_decimal", "parse_optional_decimal"]
