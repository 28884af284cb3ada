"""CLI adapter printing history statistics for a range of days."""

import argparse

from mealcoins.adapters.cli_parsing import parse_day
from mealcoins.application.use_cases.get_history_report import RangeKind
from mealcoins.infrastructure.container import (
    build_history_report,
    build_store,
)
from mealcoins.infrastructure.logging.logger import get_app_logger


def main(argv: list[str] | None = None) -> int:
    """Print daily totals, averages, streaks and money per currency."""
    parser = argparse.ArgumentParser(
        prog="mealcoins-history",
        description="Show spending trends over a week, month or custom range.",
    )
    parser.add_argument(
        "--kind",
        choices=[kind.value for kind in RangeKind],
        default=RangeKind.WEEK.value,
    )
    parser.add_argument("--reference", help="Day inside the week or month.")
    parser.add_argument("--start", help="First day of a custom range.")
    parser.add_argument("--end", help="Last day of a custom range.")
    parser.add_argument(
        "--step",
        type=int,
        default=0,
        help="Move the range back (negative) or forward by whole periods.",
    )
    args = parser.parse_args(argv)

    logger = get_app_logger()
    parsed = {
        name: parse_day(getattr(args, name), logger)
        for name in ("reference", "start", "end")
    }
    if any(getattr(args, name) and parsed[name] is None for name in parsed):
        return 1

    store = build_store()
    use_case = build_history_report(store)
    report = use_case.execute(
        kind=RangeKind(args.kind),
        reference=parsed["reference"],
        start=parsed["start"],
        end=parsed["end"],
    )
    if args.step:
        report = use_case.step(report, args.step)

    print(
        f"{report.kind.value} {report.start.date()}..{report.end.date()} "
        f"(plan {report.plan_coins} coins/day)"
    )
    for summary in report.summaries:
        print(
            f"  {summary.date.date()} {summary.total_coins:>5} "
            f"{summary.indicator.value}"
        )
    print(f"Total: {report.total_coins}, average/day: {report.average_per_day:.1f}")
    trend = ", ".join(
        f"{point.date.date()}={point.value:.1f}"
        for point in report.moving_average
    )
    print(f"Trend: {trend or '-'}")
    print(
        f"Streak: current {report.current_streak}, best {report.max_streak}"
    )
    for currency, amount in sorted(
        report.money_by_currency.items(),
        key=lambda item: item[0].value,
    ):
        print(f"  {currency.format(amount)}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
