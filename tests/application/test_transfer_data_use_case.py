"""Tests for the TransferDataUseCase."""

from datetime import datetime, timezone
from decimal import Decimal
import json
from unittest.mock import MagicMock

import pytest

from mealcoins.application.ports.snapshot_codec import DataImportError
from mealcoins.application.use_cases.transfer_data import (
    EXPORT_FILE_PREFIX,
    TransferDataUseCase,
)
from mealcoins.domain.models import CoinPlan, Currency, PlanKind
from mealcoins.infrastructure.json_codec import JsonSnapshotCodec


def _use_case(store, logger=None) -> TransferDataUseCase:
    return TransferDataUseCase(
        store,
        codec=JsonSnapshotCodec(),
        logger=logger or MagicMock(),
        usage_logger=MagicMock(),
    )


def test_export_then_import_restores_state(make_store) -> None:
    """An exported payload rebuilds the same settings and entries."""
    source = make_store()
    source.update_plan(CoinPlan(kind=PlanKind.REDUCE))
    source.add_entry(
        25,
        note="soup",
        price=Decimal("1500"),
        currency=Currency.AMD,
    )
    payload = _use_case(source).export_payload()

    target = make_store()
    result = _use_case(target).import_payload(payload)

    assert result.entries_count == 1
    assert result.schema_version == 1
    assert target.settings == source.settings
    assert target.entries == source.entries


def test_export_to_directory_names_file_by_time(make_store, tmp_path) -> None:
    """Export files carry the prefix and a filesystem-safe timestamp."""
    store = make_store()
    store.add_entry(10)

    path = _use_case(store).export_to_directory(tmp_path / "out")

    assert path.parent == tmp_path / "out"
    assert path.name == f"{EXPORT_FILE_PREFIX}2024-03-06T12-00-00+00-00.json"
    assert json.loads(path.read_text(encoding="utf-8"))["schema_version"] == 1


def test_invalid_import_leaves_store_untouched(make_store) -> None:
    """A malformed payload raises and keeps the current data."""
    store = make_store()
    entry = store.add_entry(10)

    with pytest.raises(DataImportError):
        _use_case(store).import_payload("{not json")

    assert store.entries == (entry,)


def test_newer_schema_is_imported_with_warning(make_store) -> None:
    """Payloads from a newer schema are accepted and logged."""
    source = make_store()
    source.add_entry(10)
    data = json.loads(_use_case(source).export_payload())
    data["schema_version"] = 99
    target = make_store()
    logger = MagicMock()

    result = _use_case(target, logger=logger).import_payload(json.dumps(data))

    assert result.schema_version == 99
    assert len(target.entries) == 1
    logger.warning.assert_called_once()


def test_import_file_and_wipe(make_store, tmp_path) -> None:
    """Files are read as UTF-8 and wipe clears everything."""
    source = make_store()
    source.add_entry(10, timestamp=datetime(2024, 3, 5, 8, tzinfo=timezone.utc))
    path = tmp_path / "backup.json"
    path.write_text(_use_case(source).export_payload(), encoding="utf-8")
    target = make_store()
    use_case = _use_case(target)

    use_case.import_file(path)
    assert len(target.entries) == 1

    use_case.wipe()
    assert target.entries == ()
