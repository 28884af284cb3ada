"""CLI adapter exporting, importing and wiping tracker data."""

import argparse
from pathlib import Path

from mealcoins.application.ports.snapshot_codec import DataImportError
from mealcoins.infrastructure.container import build_store, build_transfer_data
from mealcoins.infrastructure.logging.logger import get_app_logger
from mealcoins.infrastructure.settings import MealCoinsSettings


def main(argv: list[str] | None = None) -> int:
    """Run one transfer command."""
    parser = argparse.ArgumentParser(
        prog="mealcoins-transfer",
        description="Export, import or wipe all tracker data.",
    )
    commands = parser.add_subparsers(dest="command", required=True)
    export = commands.add_parser("export", help="Write a JSON export file.")
    export.add_argument("--dir", help="Target directory.")
    import_ = commands.add_parser("import", help="Replace data from a file.")
    import_.add_argument("path")
    wipe = commands.add_parser("wipe", help="Delete all data.")
    wipe.add_argument(
        "--yes",
        action="store_true",
        help="Confirm the wipe.",
    )
    args = parser.parse_args(argv)

    logger = get_app_logger()
    settings = MealCoinsSettings.from_env()
    store = build_store(settings=settings)
    use_case = build_transfer_data(store)

    if args.command == "export":
        directory = (
            Path(args.dir) if args.dir else settings.export_dir or Path.cwd()
        )
        path = use_case.export_to_directory(directory)
        print(f"Exported {len(store.entries)} entries to {path}")
        return 0

    if args.command == "import":
        path = Path(args.path)
        try:
            result = use_case.import_file(path)
        except FileNotFoundError:
            logger.error(f"Import file not found: {path}")
            return 1
        except DataImportError as exc:
            logger.error(f"Import failed: {exc}")
            return 1
        print(
            f"Imported {result.entries_count} entries "
            f"(schema v{result.schema_version})"
        )
        return 0

    if not args.yes:
        print("Refusing to wipe without --yes")
        return 1
    use_case.wipe()
    print("All data wiped")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
