"""CLI adapter adding and removing spending entries."""

import argparse

from mealcoins.adapters.cli_parsing import parse_day, parse_price, parse_timestamp
from mealcoins.domain.models import ColorTag, Currency, IconTag
from mealcoins.infrastructure.container import build_manage_entries, build_store
from mealcoins.infrastructure.logging.logger import get_app_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mealcoins-entries",
        description="Record or remove coin spending.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    add = commands.add_parser("add", help="Add an entry.")
    add.add_argument("coins", type=int)
    add.add_argument("--note")
    add.add_argument("--price", help="Money amount, e.g. 1500 or 4.99.")
    add.add_argument(
        "--currency",
        choices=[currency.value for currency in Currency],
    )
    add.add_argument(
        "--color",
        choices=[color.value for color in ColorTag],
        default=ColorTag.TEAL.value,
    )
    add.add_argument(
        "--icon",
        choices=[icon.value for icon in IconTag],
        default=IconTag.CUSTOM.value,
    )
    add.add_argument("--at", help="Timestamp (ISO 8601), now by default.")

    quick = commands.add_parser("quick", help="Add an entry from a preset.")
    quick.add_argument("preset_id")
    quick.add_argument("--note")
    quick.add_argument("--price")

    undo = commands.add_parser("undo", help="Remove the latest entry of a day.")
    undo.add_argument("--day", help="Day (YYYY-MM-DD), today by default.")

    delete = commands.add_parser("delete", help="Remove one entry by id.")
    delete.add_argument("entry_id")

    delete_day = commands.add_parser(
        "delete-day",
        help="Remove every entry of a day.",
    )
    delete_day.add_argument("day", help="Day (YYYY-MM-DD).")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one entry command and print its outcome."""
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()

    if args.command == "add":
        valid, price = parse_price(args.price, logger)
        timestamp = parse_timestamp(args.at, logger)
        if not valid or (args.at and timestamp is None):
            return 1
        use_case = build_manage_entries(build_store())
        entry = use_case.add_entry(
            args.coins,
            note=args.note,
            price=price,
            currency=Currency(args.currency) if args.currency else None,
            color=ColorTag(args.color),
            icon=IconTag(args.icon),
            timestamp=timestamp,
        )
        print(f"Added {entry.coins} coins ({entry.id})")
        return 0

    if args.command == "quick":
        valid, price = parse_price(args.price, logger)
        if not valid:
            return 1
        use_case = build_manage_entries(build_store())
        entry = use_case.quick_add_preset(
            args.preset_id,
            note=args.note,
            price=price,
        )
        if entry is None:
            print(f"Unknown preset: {args.preset_id}")
            return 1
        print(f"Added {entry.coins} coins ({entry.id})")
        return 0

    if args.command == "undo":
        day = parse_day(args.day, logger)
        if args.day and day is None:
            return 1
        removed = build_manage_entries(build_store()).undo_last(day)
        if removed is None:
            print("Nothing to undo")
            return 0
        print(f"Removed {removed.coins} coins ({removed.id})")
        return 0

    if args.command == "delete":
        deleted = build_manage_entries(build_store()).delete_entry(args.entry_id)
        if not deleted:
            print(f"Unknown entry: {args.entry_id}")
            return 1
        print(f"Deleted {args.entry_id}")
        return 0

    day = parse_day(args.day, logger)
    if day is None:
        return 1
    removed_count = build_manage_entries(build_store()).delete_day(day)
    print(f"Deleted {removed_count} entries")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
