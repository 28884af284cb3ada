"""CLI adapter printing the state of the current day."""

import argparse

from mealcoins.adapters.cli_parsing import parse_day
from mealcoins.infrastructure.container import build_store, build_today_overview
from mealcoins.infrastructure.logging.logger import get_app_logger


def main(argv: list[str] | None = None) -> int:
    """Print today's totals, remaining budget and forecast."""
    parser = argparse.ArgumentParser(
        prog="mealcoins-today",
        description="Show coins spent today against the daily plan.",
    )
    parser.add_argument("--day", help="Day to show (YYYY-MM-DD).")
    args = parser.parse_args(argv)

    logger = get_app_logger()
    day = parse_day(args.day, logger)
    if args.day and day is None:
        return 1

    store = build_store()
    overview = build_today_overview(store).execute(day)
    summary = overview.summary
    settings = store.settings

    print(
        f"{overview.day.date()}: {summary.total_coins}/{summary.plan_coins} "
        f"coins ({summary.entries_count} entries, "
        f"{summary.fill_ratio:.0%} of plan, {summary.indicator.value})"
    )
    print(
        f"Remaining: {summary.remaining_coins}, "
        f"overspent: {summary.overspent_coins}"
    )
    print(
        f"Forecast at end of day: {overview.forecast.expected_at_end:.1f} "
        f"({overview.forecast.indicator.value})"
    )
    for entry in overview.entries:
        line = (
            f"  {entry.timestamp.strftime('%H:%M')} {entry.coins:>4} "
            f"{entry.icon.value}"
        )
        if settings.show_money and entry.formatted_price:
            line += f" {entry.formatted_price}"
        if entry.note:
            line += f" - {entry.note}"
        print(line)
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
