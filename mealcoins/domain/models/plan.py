"""Domain models for the daily coin plan and user settings."""

from dataclasses import dataclass, field
from enum import Enum

from .entries import ColorTag, Currency, IconTag, Preset


class PlanKind(str, Enum):
    """Plan categories, each with a recommended daily budget."""

    REDUCE = "reduce"
    MAINTAIN = "maintain"
    GAIN = "gain"
    CUSTOM = "custom"

    @property
    def recommended_daily_coins(self) -> int:
        return _RECOMMENDED_DAILY_COINS[self]

    @property
    def title(self) -> str:
        return self.value.capitalize()


_RECOMMENDED_DAILY_COINS = {
    PlanKind.REDUCE: 80,
    PlanKind.MAINTAIN: 100,
    PlanKind.GAIN: 120,
    PlanKind.CUSTOM: 100,
}


@dataclass(frozen=True)
class CoinPlan:
    """Daily coin budget and the category it was chosen from.

    Attributes:
        kind: Plan category.
        daily_coins: Daily budget; defaults to the kind's recommendation.
    """

    kind: PlanKind = PlanKind.MAINTAIN
    daily_coins: int | None = None

    def __post_init__(self) -> None:
        if self.daily_coins is None:
            object.__setattr__(
                self,
                "daily_coins",
                self.kind.recommended_daily_coins,
            )


def recommended_presets() -> list[Preset]:
    """Return the out-of-the-box quick-add presets."""
    return [
        Preset("Breakfast", 20, ColorTag.MINT, IconTag.BREAKFAST),
        Preset("Lunch", 35, ColorTag.SKY, IconTag.LUNCH),
        Preset("Dinner", 35, ColorTag.VIOLET, IconTag.DINNER),
        Preset("Snack", 10, ColorTag.AMBER, IconTag.SNACK),
        Preset("Takeout", 40, ColorTag.ROSE, IconTag.TAKEOUT),
        Preset("Grocery", 0, ColorTag.TEAL, IconTag.GROCERY),
    ]


@dataclass(frozen=True)
class AppSettings:
    """User settings persisted next to the entries.

    Attributes:
        plan: Daily coin plan.
        currency: Currency used for quick-add prices and display.
        haptics_enabled: Stored preference for feedback vibrations.
        show_money: Whether money annotations are displayed.
        presets: Quick-add presets.
    """

    plan: CoinPlan = field(default_factory=CoinPlan)
    currency: Currency = Currency.AMD
    haptics_enabled: bool = True
    show_money: bool = True
    presets: tuple[Preset, ...] = field(
        default_factory=lambda: tuple(recommended_presets())
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "presets", tuple(self.presets))

    def find_preset(self, preset_id: str) -> Preset | None:
        for preset in self.presets:
            if preset.id == preset_id:
                return preset
        return None


__all__ = ["PlanKind", "CoinPlan", "AppSettings", "recommended_presets"]
