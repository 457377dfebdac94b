"""Settings helpers for infrastructure adapters.

Values come from the process environment, completed by a local ``.env`` file
that never overrides variables already set.
"""

from dataclasses import dataclass
import os

import dotenv

from src.domain.constants import DEFAULT_TREND_MONTHS
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class DashboardSettings:
    """Tunables of the overview and cash use cases.

    Attributes:
        trend_month_limit: Maximum number of months scanned and trended.
        trend_max_workers: Worker threads used to compute trend points.
    """

    trend_month_limit: int = DEFAULT_TREND_MONTHS
    trend_max_workers: int = 1

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        return cls(
            trend_month_limit=_positive_int(
                "SNAPSHOT_TREND_MONTHS",
                DEFAULT_TREND_MONTHS,
                logger=logger,
            ),
            trend_max_workers=_positive_int(
                "SNAPSHOT_TREND_WORKERS",
                1,
                logger=logger,
            ),
        )


@dataclass(frozen=True)
class DatabaseSettings:
    """Connection settings of the snapshot store.

    Attributes:
        url: SQLAlchemy database URL.
        pool_size: Connections kept open in the pool.
        max_overflow: Extra connections allowed under load.
    """

    url: str
    pool_size: int = 5
    max_overflow: int = 5

    @classmethod
    def from_env(cls) -> "DatabaseSettings":
        """Build connection settings from environment variables.

        Returns:
            DatabaseSettings: Settings sourced from environment variables.

        Raises:
            RuntimeError: If SNAPSHOT_DB_URL is missing or empty.
        """
        dotenv.load_dotenv()
        url = (os.getenv("SNAPSHOT_DB_URL") or "").strip()
        if not url:
            raise RuntimeError("Missing environment variable: SNAPSHOT_DB_URL")
        logger = get_app_logger()
        return cls(
            url=url,
            pool_size=_positive_int("SNAPSHOT_DB_POOL_SIZE", 5, logger=logger),
            max_overflow=_positive_int(
                "SNAPSHOT_DB_MAX_OVERFLOW",
                5,
                logger=logger,
            ),
        )


def _positive_int(name: str, default: int, logger) -> int:
    """Read a positive integer from the environment.

    Args:
        name: Environment variable name.
        default: Value used when unset or invalid.
        logger: Logger used for warnings.

    Returns:
        int: Parsed value or the default.
    """
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning(f"Invalid {name}={raw!r}; using {default}")
        return default
    if value <= 0:
        logger.warning(f"{name} must be positive, got {value}; using {default}")
        return default
    return value


__all__ = ["DashboardSettings", "DatabaseSettings"]
