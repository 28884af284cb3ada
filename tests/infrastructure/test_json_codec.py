"""Tests for the JSON snapshot codec."""

from datetime import datetime, timezone
from decimal import Decimal
import json
from zoneinfo import ZoneInfo

import pytest

from mealcoins.application.ports.snapshot_codec import (
    DataImportError,
    DataSnapshot,
)
from mealcoins.domain.models import (
    AppSettings,
    CoinPlan,
    ColorTag,
    Currency,
    IconTag,
    PlanKind,
    SpendingEntry,
)
from mealcoins.infrastructure.json_codec import (
    JsonSnapshotCodec,
    entry_from_dict,
    entry_to_dict,
    settings_from_dict,
)

BERLIN = ZoneInfo("Europe/Berlin")


def _snapshot() -> DataSnapshot:
    entry = SpendingEntry.create(
        entry_id="entry-1",
        timestamp=datetime(2024, 3, 6, 8, 30, tzinfo=BERLIN),
        coins=35,
        note="Борщ",
        price=Decimal("1800.50"),
        currency=Currency.AMD,
        preset_id="lunch",
        color=ColorTag.SKY,
        icon=IconTag.LUNCH,
    )
    return DataSnapshot(
        schema_version=1,
        settings=AppSettings(plan=CoinPlan(kind=PlanKind.CUSTOM, daily_coins=90)),
        entries=(entry,),
        exported_at=datetime(2024, 3, 6, 12, tzinfo=timezone.utc),
    )


def test_encode_writes_readable_sorted_json() -> None:
    """Payloads are indented, key-sorted and keep non-ASCII text."""
    payload = JsonSnapshotCodec().encode(_snapshot())
    data = json.loads(payload)

    assert "Борщ" in payload
    assert list(data) == sorted(data)
    assert data["entries"][0]["price"] == "1800.50"
    assert data["entries"][0]["timestamp"] == "2024-03-06T08:30:00+01:00"
    assert data["settings"]["plan"] == {"kind": "custom", "daily_coins": 90}


def test_decode_restores_snapshot() -> None:
    """Decoding an encoded snapshot gives back equal values."""
    codec = JsonSnapshotCodec()
    original = _snapshot()

    decoded = codec.decode(codec.encode(original))

    assert decoded.settings == original.settings
    assert decoded.entries == original.entries
    assert decoded.entries[0].price.amount == Decimal("1800.50")
    assert decoded.exported_at == original.exported_at


@pytest.mark.parametrize(
    "payload",
    [
        "{broken",
        "[]",
        json.dumps({"schema_version": 1}),
        json.dumps(
            {
                "schema_version": 1,
                "exported_at": "2024-03-06T12:00:00+00:00",
                "settings": {},
                "entries": [
                    {
                        "id": "x",
                        "timestamp": "2024-03-06T12:00:00+00:00",
                        "coins": 1,
                        "color": "plaid",
                    }
                ],
            }
        ),
        json.dumps(
            {
                "schema_version": 1,
                "exported_at": "2024-03-06T12:00:00+00:00",
                "settings": {},
                "entries": [
                    {
                        "id": "x",
                        "timestamp": "2024-03-06T12:00:00+00:00",
                        "coins": 1,
                        "price": "lots",
                    }
                ],
            }
        ),
    ],
)
def test_decode_rejects_malformed_payloads(payload) -> None:
    """Any malformed payload surfaces as DataImportError."""
    with pytest.raises(DataImportError):
        JsonSnapshotCodec().decode(payload)


def test_settings_from_dict_fills_missing_keys() -> None:
    """Older payloads without optional keys get default values."""
    settings = settings_from_dict({"currency": "EUR"})

    assert settings.currency is Currency.EUR
    assert settings.plan.daily_coins == 100
    assert settings.show_money is True
    assert len(settings.presets) == len(AppSettings().presets)


def test_entry_dict_defaults_price_currency() -> None:
    """A price stored without currency falls back to the default one."""
    entry = entry_from_dict(
        {
            "id": "e",
            "timestamp": "2024-03-06T12:00:00+00:00",
            "coins": 5,
            "price": "2.5",
        }
    )

    assert entry.price.currency is Currency.USD
    assert entry_to_dict(entry)["currency"] == "USD"
    assert entry.color is ColorTag.TEAL
