"""Domain models for spending entries and their annotations."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
import uuid


class Currency(str, Enum):
    """Real currencies an entry price can be recorded in."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    RUB = "RUB"
    AMD = "AMD"

    @property
    def symbol(self) -> str:
        return _CURRENCY_SYMBOLS[self]

    def format(self, amount: Decimal) -> str:
        """Format an amount with this currency's symbol.

        Args:
            amount: Money amount to render.

        Returns:
            str: Amount with two decimals and a symbol prefix.
        """
        prefix = self.symbol + (" " if self is Currency.AMD else "")
        sign = "-" if amount < 0 else ""
        return f"{sign}{prefix}{abs(amount):,.2f}"


_CURRENCY_SYMBOLS = {
    Currency.USD: "$",
    Currency.EUR: "€",
    Currency.GBP: "£",
    Currency.RUB: "₽",
    Currency.AMD: "֏",
}

DEFAULT_PRICE_CURRENCY = Currency.USD


class ColorTag(str, Enum):
    """Palette identifiers used to tag entries and presets."""

    MINT = "mint"
    SKY = "sky"
    AMBER = "amber"
    ROSE = "rose"
    VIOLET = "violet"
    LIME = "lime"
    TEAL = "teal"
    GRAPHITE = "graphite"


class IconTag(str, Enum):
    """Icon identifiers used to tag entries and presets."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
    GROCERY = "grocery"
    TAKEOUT = "takeout"
    DESSERT = "dessert"
    DRINK = "drink"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Price:
    """Money paid for an entry, always paired with its currency."""

    amount: Decimal
    currency: Currency

    def format(self) -> str:
        return self.currency.format(self.amount)


def _new_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class Preset:
    """Quick-add template for a recurring kind of spending.

    Attributes:
        id: Opaque unique identifier.
        title: Display title.
        coins: Coin amount, clamped to zero or more.
        color: Color tag applied to entries created from the preset.
        icon: Icon tag applied to entries created from the preset.
    """

    title: str
    coins: int
    color: ColorTag
    icon: IconTag
    id: str = field(default_factory=_new_id)

    def __post_init__(self) -> None:
        object.__setattr__(self, "coins", max(0, int(self.coins)))


@dataclass(frozen=True)
class SpendingEntry:
    """A single timestamped spending record.

    Attributes:
        id: Opaque unique identifier, never changed after creation.
        timestamp: Exact moment the spending happened.
        coins: Coin amount, clamped to zero or more.
        color: Visual color tag.
        icon: Visual icon tag.
        note: Optional free-text note.
        price: Optional money annotation (amount and currency together).
        preset_id: Optional id of the preset the entry was created from.
    """

    id: str
    timestamp: datetime
    coins: int
    color: ColorTag = ColorTag.TEAL
    icon: IconTag = IconTag.CUSTOM
    note: str | None = None
    price: Price | None = None
    preset_id: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "coins", max(0, int(self.coins)))

    @classmethod
    def create(
        cls,
        *,
        timestamp: datetime,
        coins: int,
        note: str | None = None,
        price: Decimal | None = None,
        currency: Currency | None = None,
        preset_id: str | None = None,
        color: ColorTag = ColorTag.TEAL,
        icon: IconTag = IconTag.CUSTOM,
        entry_id: str | None = None,
    ) -> "SpendingEntry":
        """Build an entry from loose price and currency values.

        A price without a currency gets the default price currency; a
        currency without a price is dropped.

        Returns:
            SpendingEntry: New entry with a fresh id unless one is given.
        """
        return cls(
            id=entry_id or _new_id(),
            timestamp=timestamp,
            coins=coins,
            color=color,
            icon=icon,
            note=note,
            price=build_price(price, currency),
            preset_id=preset_id,
        )

    @property
    def amount(self) -> Decimal | None:
        return self.price.amount if self.price is not None else None

    @property
    def currency(self) -> Currency | None:
        return self.price.currency if self.price is not None else None

    @property
    def formatted_price(self) -> str | None:
        return self.price.format() if self.price is not None else None


def build_price(
    amount: Decimal | None,
    currency: Currency | None,
) -> Price | None:
    """Pair a raw amount with its currency.

    Args:
        amount: Optional money amount.
        currency: Optional currency, defaulted when an amount is given.

    Returns:
        Price | None: Priced variant, or None when no amount is given.
    """
    if amount is None:
        return None
    return Price(amount=amount, currency=currency or DEFAULT_PRICE_CURRENCY)


__all__ = [
    "Currency",
    "DEFAULT_PRICE_CURRENCY",
    "ColorTag",
    "IconTag",
    "Price",
    "Preset",
    "SpendingEntry",
    "build_price",
]
