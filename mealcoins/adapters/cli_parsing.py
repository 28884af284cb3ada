"""Argument parsing helpers shared by the CLI adapters."""

from datetime import date, datetime
from decimal import Decimal

from mealcoins.utils.decimal_utils import parse_optional_decimal


def parse_day(value: str | None, logger) -> datetime | None:
    """Parse an ISO date into a naive midnight timestamp.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        datetime | None: Midnight of the day, or None when invalid.
    """
    if not value:
        return None
    try:
        parsed = date.fromisoformat(value)
    except ValueError:
        logger.warning(f"Invalid date '{value}'. Expected format YYYY-MM-DD.")
        return None
    return datetime(parsed.year, parsed.month, parsed.day)


def parse_timestamp(value: str | None, logger) -> datetime | None:
    """Parse an ISO timestamp; naive values are read in the user's timezone."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid timestamp '{value}'. Expected ISO 8601, "
            "e.g. 2024-03-01T12:30."
        )
        return None


def parse_price(value: str | None, logger) -> tuple[bool, Decimal | None]:
    """Parse a price argument.

    Returns:
        tuple[bool, Decimal | None]: Validity flag and the parsed amount.
    """
    try:
        return True, parse_optional_decimal(value)
    except ValueError as exc:
        logger.warning(str(exc))
        return False, None


__all__ = ["parse_day", "parse_timestamp", "parse_price"]
