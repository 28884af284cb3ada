"""Use case for editing the plan, display preferences and presets."""

from mealcoins.application.store import BudgetStore
from mealcoins.domain.models import (
    CoinPlan,
    ColorTag,
    Currency,
    IconTag,
    PlanKind,
    Preset,
    recommended_presets,
)
from mealcoins.infrastructure.logging.logger import get_app_logger


class ManageSettingsUseCase:
    """Apply settings changes through the store."""

    def __init__(self, store: BudgetStore, logger=None) -> None:
        """Initialize the use case.

        Args:
            store: Store owning the settings.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._logger = logger or get_app_logger()

    def change_plan(
        self,
        kind: PlanKind,
        daily_coins: int | None = None,
    ) -> CoinPlan:
        """Switch the plan, using the kind's recommendation when no budget is given.

        A non-positive budget is stored as given; the engine treats it as a
        plan with no room (fill ratio 0).
        """
        plan = CoinPlan(kind=kind, daily_coins=daily_coins)
        if plan.daily_coins <= 0:
            self._logger.warning(
                f"Plan {kind.value} set to a non-positive budget: "
                f"{plan.daily_coins}"
            )
        self._store.update_plan(plan)
        self._logger.info(
            f"Plan changed to {kind.value} ({plan.daily_coins} coins/day)"
        )
        return plan

    def change_currency(self, currency: Currency) -> None:
        self._store.update_currency(currency)

    def set_show_money(self, enabled: bool) -> None:
        self._store.set_show_money(enabled)

    def set_haptics_enabled(self, enabled: bool) -> None:
        self._store.set_haptics_enabled(enabled)

    def add_preset(
        self,
        title: str,
        coins: int,
        color: ColorTag,
        icon: IconTag,
    ) -> Preset:
        preset = Preset(title=title, coins=coins, color=color, icon=icon)
        self._store.add_preset(preset)
        return preset

    def update_preset(self, preset: Preset) -> bool:
        return self._store.update_preset(preset)

    def delete_preset(self, preset_id: str) -> None:
        self._store.delete_preset(preset_id)

    def reset_presets(self) -> list[Preset]:
        """Restore the recommended presets."""
        presets = recommended_presets()
        self._store.replace_presets(presets)
        return presets


__all__ = ["ManageSettingsUseCase"]
