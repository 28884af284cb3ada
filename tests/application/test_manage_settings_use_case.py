"""Tests for the ManageSettingsUseCase."""

from unittest.mock import MagicMock

from mealcoins.application.use_cases.manage_settings import (
    ManageSettingsUseCase,
)
from mealcoins.domain.models import (
    AppSettings,
    ColorTag,
    Currency,
    IconTag,
    PlanKind,
    recommended_presets,
)


def test_change_plan_uses_recommendation_or_custom_value(make_store) -> None:
    """Plans default to their recommended budget."""
    store = make_store()
    use_case = ManageSettingsUseCase(store, logger=MagicMock())

    reduce_plan = use_case.change_plan(PlanKind.REDUCE)
    assert reduce_plan.daily_coins == 80
    assert store.plan_coins == 80

    use_case.change_plan(PlanKind.CUSTOM, daily_coins=65)
    assert store.plan_coins == 65


def test_non_positive_plan_is_stored_with_warning(make_store) -> None:
    """A zero budget is accepted but logged."""
    store = make_store()
    logger = MagicMock()

    ManageSettingsUseCase(store, logger=logger).change_plan(
        PlanKind.CUSTOM,
        daily_coins=0,
    )

    assert store.plan_coins == 0
    logger.warning.assert_called_once()


def test_display_preferences(make_store) -> None:
    """Currency and toggles are written to the settings."""
    store = make_store()
    use_case = ManageSettingsUseCase(store, logger=MagicMock())

    use_case.change_currency(Currency.RUB)
    use_case.set_show_money(False)
    use_case.set_haptics_enabled(False)

    assert store.settings.currency is Currency.RUB
    assert store.settings.show_money is False
    assert store.settings.haptics_enabled is False


def test_preset_lifecycle_and_reset(make_store) -> None:
    """Presets can be added, removed and restored to the defaults."""
    store = make_store(settings=AppSettings(presets=()))
    use_case = ManageSettingsUseCase(store, logger=MagicMock())

    preset = use_case.add_preset("Pie", 30, ColorTag.ROSE, IconTag.DESSERT)
    assert store.settings.presets == (preset,)

    use_case.delete_preset(preset.id)
    assert store.settings.presets == ()

    restored = use_case.reset_presets()
    assert [item.title for item in restored] == [
        item.title for item in recommended_presets()
    ]
    assert len(store.settings.presets) == len(restored)
