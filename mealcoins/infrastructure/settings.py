"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import dotenv

from mealcoins.infrastructure.logging.logger import get_app_logger
from mealcoins.utils.utils import get_project_root

DEFAULT_TIMEZONE = "UTC"
DEFAULT_FIRST_WEEKDAY = 0
DEFAULT_MAX_DAYS_RANGE = 10
DEFAULT_STREAK_LOOKBACK_DAYS = 3650


@dataclass(frozen=True)
class MealCoinsSettings:
    """Runtime configuration of the tracker.

    Attributes:
        db_url: SQLAlchemy URL of the tracker database.
        timezone: IANA zone name defining local midnight.
        first_weekday: First day of the week, 0 (Monday) to 6 (Sunday).
        max_days_range: Most days computed for one history report.
        streak_lookback_days: Cap on the backward streak walk.
        export_dir: Directory receiving export files.
    """

    db_url: str
    timezone: str = DEFAULT_TIMEZONE
    first_weekday: int = DEFAULT_FIRST_WEEKDAY
    max_days_range: int = DEFAULT_MAX_DAYS_RANGE
    streak_lookback_days: int = DEFAULT_STREAK_LOOKBACK_DAYS
    export_dir: Path | None = None

    @classmethod
    def from_env(cls) -> "MealCoinsSettings":
        """Build settings from environment variables and the ``.env`` file.

        Returns:
            MealCoinsSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        root = get_project_root()
        db_url = os.getenv("MEALCOINS_DB_URL", "").strip()
        if not db_url:
            db_url = cls._default_db_url(root)
        raw_export_dir = os.getenv("MEALCOINS_EXPORT_DIR", "").strip()
        export_dir = (
            Path(raw_export_dir).expanduser().resolve()
            if raw_export_dir
            else root / "exports"
        )
        return cls(
            db_url=db_url,
            timezone=cls._read_timezone(logger),
            first_weekday=cls._read_int(
                "MEALCOINS_FIRST_WEEKDAY",
                DEFAULT_FIRST_WEEKDAY,
                logger,
                minimum=0,
                maximum=6,
            ),
            max_days_range=cls._read_int(
                "MEALCOINS_MAX_DAYS_RANGE",
                DEFAULT_MAX_DAYS_RANGE,
                logger,
                minimum=1,
            ),
            streak_lookback_days=cls._read_int(
                "MEALCOINS_STREAK_LOOKBACK_DAYS",
                DEFAULT_STREAK_LOOKBACK_DAYS,
                logger,
                minimum=1,
            ),
            export_dir=export_dir,
        )

    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @staticmethod
    def _default_db_url(root: Path) -> str:
        data_dir = root / "data"
        data_dir.mkdir(parents=True, exist_ok=True)
        return f"sqlite:///{data_dir / 'mealcoins.db'}"

    @staticmethod
    def _read_timezone(logger) -> str:
        raw = os.getenv("MEALCOINS_TIMEZONE", "").strip()
        if not raw:
            return DEFAULT_TIMEZONE
        try:
            ZoneInfo(raw)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(
                f"Unknown timezone '{raw}', falling back to {DEFAULT_TIMEZONE}"
            )
            return DEFAULT_TIMEZONE
        return raw

    @staticmethod
    def _read_int(
        name: str,
        default: int,
        logger,
        minimum: int | None = None,
        maximum: int | None = None,
    ) -> int:
        """Read an integer variable, falling back to the default.

        Args:
            name: Environment variable name.
            default: Value used when unset or invalid.
            logger: Logger used for warnings.
            minimum: Optional inclusive lower bound.
            maximum: Optional inclusive upper bound.

        Returns:
            int: Parsed value or the default.
        """
        raw = os.getenv(name, "").strip()
        if not raw:
            return default
        try:
            value = int(raw)
        except ValueError:
            logger.warning(f"Invalid integer for {name}: '{raw}'")
            return default
        if (minimum is not None and value < minimum) or (
            maximum is not None and value > maximum
        ):
            logger.warning(f"Out of range value for {name}: {value}")
            return default
        return value


__all__ = ["MealCoinsSettings"]
