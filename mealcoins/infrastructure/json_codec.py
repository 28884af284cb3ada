"""JSON conversion of settings, entries and export snapshots.

Timestamps are ISO-8601 strings carrying their UTC offset and prices are
decimal strings, so a round trip keeps both exact.
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
import json
from typing import Any

from mealcoins.application.ports.snapshot_codec import (
    DataImportError,
    DataSnapshot,
    SnapshotCodecPort,
)
from mealcoins.domain.models import (
    AppSettings,
    CoinPlan,
    ColorTag,
    Currency,
    IconTag,
    PlanKind,
    Preset,
    SpendingEntry,
)


def preset_to_dict(preset: Preset) -> dict[str, Any]:
    return {
        "id": preset.id,
        "title": preset.title,
        "coins": preset.coins,
        "color": preset.color.value,
        "icon": preset.icon.value,
    }


def preset_from_dict(data: dict[str, Any]) -> Preset:
    return Preset(
        id=str(data["id"]),
        title=str(data["title"]),
        coins=int(data["coins"]),
        color=ColorTag(data["color"]),
        icon=IconTag(data["icon"]),
    )


def settings_to_dict(settings: AppSettings) -> dict[str, Any]:
    return {
        "plan": {
            "kind": settings.plan.kind.value,
            "daily_coins": settings.plan.daily_coins,
        },
        "currency": settings.currency.value,
        "haptics_enabled": settings.haptics_enabled,
        "show_money": settings.show_money,
        "presets": [preset_to_dict(preset) for preset in settings.presets],
    }


def settings_from_dict(data: dict[str, Any]) -> AppSettings:
    """Rebuild settings; missing keys take their default values."""
    defaults = AppSettings()
    raw_plan = data.get("plan")
    plan = defaults.plan
    if raw_plan is not None:
        daily_coins = raw_plan.get("daily_coins")
        plan = CoinPlan(
            kind=PlanKind(raw_plan["kind"]),
            daily_coins=int(daily_coins) if daily_coins is not None else None,
        )
    raw_presets = data.get("presets")
    presets = (
        tuple(preset_from_dict(item) for item in raw_presets)
        if raw_presets is not None
        else defaults.presets
    )
    return AppSettings(
        plan=plan,
        currency=Currency(data.get("currency", defaults.currency.value)),
        haptics_enabled=bool(
            data.get("haptics_enabled", defaults.haptics_enabled)
        ),
        show_money=bool(data.get("show_money", defaults.show_money)),
        presets=presets,
    )


def entry_to_dict(entry: SpendingEntry) -> dict[str, Any]:
    return {
        "id": entry.id,
        "timestamp": entry.timestamp.isoformat(),
        "coins": entry.coins,
        "note": entry.note,
        "price": str(entry.price.amount) if entry.price else None,
        "currency": entry.price.currency.value if entry.price else None,
        "preset_id": entry.preset_id,
        "color": entry.color.value,
        "icon": entry.icon.value,
    }


def entry_from_dict(data: dict[str, Any]) -> SpendingEntry:
    """Rebuild an entry.

    A stored price without a currency gets the default price currency, the
    same as when the entry is created.
    """
    raw_price = data.get("price")
    raw_currency = data.get("currency")
    return SpendingEntry.create(
        entry_id=str(data["id"]),
        timestamp=datetime.fromisoformat(data["timestamp"]),
        coins=int(data["coins"]),
        note=data.get("note"),
        price=Decimal(str(raw_price)) if raw_price is not None else None,
        currency=Currency(raw_currency) if raw_currency else None,
        preset_id=data.get("preset_id"),
        color=ColorTag(data.get("color", ColorTag.TEAL.value)),
        icon=IconTag(data.get("icon", IconTag.CUSTOM.value)),
    )


class JsonSnapshotCodec(SnapshotCodecPort):
    """Snapshot codec producing indented JSON with sorted keys."""

    def encode(self, snapshot: DataSnapshot) -> str:
        payload = {
            "schema_version": snapshot.schema_version,
            "exported_at": snapshot.exported_at.isoformat(),
            "settings": settings_to_dict(snapshot.settings),
            "entries": [entry_to_dict(entry) for entry in snapshot.entries],
        }
        return json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False)

    def decode(self, payload: str) -> DataSnapshot:
        """Parse a snapshot payload.

        Raises:
            DataImportError: If the JSON is invalid or a field is malformed.
        """
        try:
            data = json.loads(payload)
            if not isinstance(data, dict):
                raise DataImportError("Snapshot payload must be a JSON object")
            entries = tuple(entry_from_dict(item) for item in data["entries"])
            return DataSnapshot(
                schema_version=int(data["schema_version"]),
                settings=settings_from_dict(data["settings"]),
                entries=entries,
                exported_at=datetime.fromisoformat(data["exported_at"]),
            )
        except DataImportError:
            raise
        except (
            json.JSONDecodeError,
            KeyError,
            TypeError,
            ValueError,
            AttributeError,
            InvalidOperation,
        ) as exc:
            raise DataImportError(f"Invalid snapshot payload: {exc}") from exc


__all__ = [
    "JsonSnapshotCodec",
    "entry_from_dict",
    "entry_to_dict",
    "preset_from_dict",
    "preset_to_dict",
    "settings_from_dict",
    "settings_to_dict",
]
