"""CLI adapter for the plan, display preferences and presets."""

import argparse

from mealcoins.domain.models import ColorTag, Currency, IconTag, PlanKind
from mealcoins.infrastructure.container import build_manage_settings, build_store


def _on_off(value: str) -> bool:
    return value == "on"


def main(argv: list[str] | None = None) -> int:
    """Show or change the settings."""
    parser = argparse.ArgumentParser(
        prog="mealcoins-settings",
        description="Show or change the daily plan, currency and presets.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("show", help="Print the current settings.")

    plan = commands.add_parser("plan", help="Change the daily plan.")
    plan.add_argument("kind", choices=[kind.value for kind in PlanKind])
    plan.add_argument("--coins", type=int, help="Daily coins for the plan.")

    currency = commands.add_parser("currency", help="Change the currency.")
    currency.add_argument("code", choices=[item.value for item in Currency])

    show_money = commands.add_parser("show-money", help="Toggle money display.")
    show_money.add_argument("state", choices=["on", "off"])

    haptics = commands.add_parser("haptics", help="Toggle haptic feedback.")
    haptics.add_argument("state", choices=["on", "off"])

    add_preset = commands.add_parser("add-preset", help="Add a preset.")
    add_preset.add_argument("title")
    add_preset.add_argument("coins", type=int)
    add_preset.add_argument(
        "--color",
        choices=[color.value for color in ColorTag],
        default=ColorTag.TEAL.value,
    )
    add_preset.add_argument(
        "--icon",
        choices=[icon.value for icon in IconTag],
        default=IconTag.CUSTOM.value,
    )

    delete_preset = commands.add_parser("delete-preset", help="Remove a preset.")
    delete_preset.add_argument("preset_id")

    commands.add_parser("reset-presets", help="Restore the default presets.")
    args = parser.parse_args(argv)

    store = build_store()
    use_case = build_manage_settings(store)

    if args.command == "plan":
        use_case.change_plan(PlanKind(args.kind), args.coins)
    elif args.command == "currency":
        use_case.change_currency(Currency(args.code))
    elif args.command == "show-money":
        use_case.set_show_money(_on_off(args.state))
    elif args.command == "haptics":
        use_case.set_haptics_enabled(_on_off(args.state))
    elif args.command == "add-preset":
        use_case.add_preset(
            args.title,
            args.coins,
            ColorTag(args.color),
            IconTag(args.icon),
        )
    elif args.command == "delete-preset":
        use_case.delete_preset(args.preset_id)
    elif args.command == "reset-presets":
        use_case.reset_presets()

    settings = store.settings
    print(
        f"Plan: {settings.plan.kind.title} "
        f"({settings.plan.daily_coins} coins/day)"
    )
    print(f"Currency: {settings.currency.value}")
    print(f"Show money: {'on' if settings.show_money else 'off'}")
    print(f"Haptics: {'on' if settings.haptics_enabled else 'off'}")
    for preset in settings.presets:
        print(
            f"  {preset.id} {preset.title}: {preset.coins} coins "
            f"({preset.color.value}, {preset.icon.value})"
        )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
